"""Shared error types, codes and helpers."""

from __future__ import annotations

from typing import Any

from starlette.responses import JSONResponse


class HawkBewitError(Exception):
    """Base class for hawkbewit errors."""


class InvalidBewitError(HawkBewitError):
    """A bewit could not be decoded."""

    def __init__(self, message: str = "Invalid bewit") -> None:
        super().__init__(message)
        self.message = message


class UnsupportedSchemeError(HawkBewitError, ValueError):
    """URI scheme has no default port, so it cannot be signed."""

    def __init__(self, scheme: str) -> None:
        super().__init__(f'Unknown URI scheme "{scheme}"')
        self.scheme = scheme


class CredentialsError(HawkBewitError):
    """Credentials are missing or incomplete."""


class ErrorCode:
    INVALID_BEWIT = "invalid_bewit"
    BEWIT_EXPIRED = "bewit_expired"
    UNAUTHORIZED = "unauthorized"
    BAD_REQUEST = "bad_request"


def error_response(
    code: str,
    message: str,
    status_code: int,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    payload: dict[str, Any] = {
        "error": {
            "code": code,
            "message": message,
        }
    }
    if details:
        payload["error"]["details"] = details
    return JSONResponse(payload, status_code=status_code)
