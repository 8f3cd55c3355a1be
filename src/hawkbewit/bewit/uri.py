"""Unsigned URI model and bewit transport helpers."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

DEFAULT_BEWIT_PARAM = "bewit"


@dataclass(frozen=True)
class Uri:
    """
    Parsed components of an unsigned URI.

    ``port`` is None (or -1) when the URI does not carry an explicit port.
    ``query`` excludes the leading ``?``.
    """

    scheme: str
    host: str | None
    port: int | None
    path: str
    query: str | None = None

    @classmethod
    def from_url(cls, url: str) -> Uri:
        return parse_uri(url)


def parse_uri(url: str) -> Uri:
    """
    Parse an already-encoded URL into a Uri without re-encoding it.

    Path and query are kept verbatim, so they must be encoded the same way at
    generation and validation time. An invalid port is treated as absent.

    Args:
        url: The encoded URL string

    Returns:
        Parsed Uri
    """
    parts = urlsplit(url)
    try:
        port = parts.port
    except ValueError:
        port = None
    return Uri(
        scheme=parts.scheme,
        host=parts.hostname,
        port=port,
        path=parts.path,
        query=parts.query or None,
    )


def add_bewit(url: str, bewit: str, param: str = DEFAULT_BEWIT_PARAM) -> str:
    """Append a bewit to a URL as a query parameter."""
    parts = urlsplit(url)
    entry = f"{param}={bewit}"
    query = f"{parts.query}&{entry}" if parts.query else entry
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def strip_bewit(url: str, param: str = DEFAULT_BEWIT_PARAM) -> tuple[str, str | None]:
    """
    Remove a bewit query parameter from a URL.

    The remaining query parameters are kept verbatim and in order.

    Returns:
        Tuple of (unsigned_url, bewit), bewit is None when not present
    """
    parts = urlsplit(url)
    if not parts.query:
        return url, None

    prefix = f"{param}="
    bewit = None
    kept: list[str] = []
    for entry in parts.query.split("&"):
        if bewit is None and entry.startswith(prefix):
            bewit = entry[len(prefix):]
        else:
            kept.append(entry)

    if bewit is None:
        return url, None

    unsigned = urlunsplit((parts.scheme, parts.netloc, parts.path, "&".join(kept), parts.fragment))
    return unsigned, bewit
