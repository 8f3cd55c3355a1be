"""Prometheus metrics for bewit generation and validation."""

import os

from prometheus_client import (
    CollectorRegistry,
    Counter,
    generate_latest,
    multiprocess,
)
from starlette.requests import Request
from starlette.responses import Response

# === Counters ===

BEWITS_GENERATED_TOTAL = Counter(
    "hawkbewit_generated_total",
    "Total bewits generated",
    ["algorithm"],
)

BEWIT_VALIDATIONS_TOTAL = Counter(
    "hawkbewit_validations_total",
    "Total bewit validations",
    ["outcome"],  # outcome: good, bad, expired, authentication_error
)


# === Helper Functions ===


def record_generated(algorithm: str) -> None:
    """Record a generated bewit."""
    BEWITS_GENERATED_TOTAL.labels(algorithm=algorithm).inc()


def record_validation(outcome: str) -> None:
    """Record a bewit validation outcome."""
    BEWIT_VALIDATIONS_TOTAL.labels(outcome=outcome).inc()


# === HTTP Endpoint ===


async def metrics_endpoint(_request: Request) -> Response:
    """
    Prometheus metrics endpoint.

    Returns metrics in Prometheus text format.
    """
    multiproc_dir = os.environ.get("PROMETHEUS_MULTIPROC_DIR")
    if multiproc_dir:
        registry = CollectorRegistry()
        multiprocess.MultiProcessCollector(registry)  # type: ignore[no-untyped-call]
        return Response(
            generate_latest(registry),
            media_type="text/plain; version=0.0.4; charset=utf-8",
        )

    return Response(
        generate_latest(),
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )
