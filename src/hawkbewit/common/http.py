"""Starlette integration: bewit-authenticated requests."""

from __future__ import annotations

import structlog
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from hawkbewit.bewit.core import HawkBewit
from hawkbewit.bewit.types import (
    AuthenticationError,
    Bad,
    CredentialsResolver,
    Expired,
    Good,
)
from hawkbewit.bewit.uri import strip_bewit
from hawkbewit.common.errors import ErrorCode, error_response
from hawkbewit.common.logging import get_logger
from hawkbewit.common.settings import Settings

logger = get_logger(__name__)


def raw_request_url(request: Request) -> str:
    """
    Rebuild the request URL with its path and query exactly as sent.

    ``request.url`` is built from the percent-decoded path, which would not
    match a bewit generated for the encoded URL.
    """
    raw_path = request.scope.get("raw_path")
    path = raw_path.decode("latin-1") if raw_path else request.scope["path"]
    query = request.scope.get("query_string", b"").decode("latin-1")
    url = f"{request.url.scheme}://{request.url.netloc}{path}"
    if query:
        url = f"{url}?{query}"
    return url


def unsigned_request_url(request: Request, param: str) -> tuple[str, str | None]:
    """Return the raw request URL without its bewit, and the bewit itself."""
    return strip_bewit(raw_request_url(request), param)


class BewitAuthMiddleware(BaseHTTPMiddleware):
    """
    Authorize requests carrying a bewit query parameter.

    The bewit is removed from the URL before validation so the MAC is checked
    against the same unsigned URI it was generated for.
    """

    def __init__(
        self,
        app: ASGIApp,
        settings: Settings,
        credentials_fn: CredentialsResolver,
        bewit: HawkBewit | None = None,
    ) -> None:
        super().__init__(app)
        self._settings = settings
        self._credentials_fn = credentials_fn
        self._bewit = bewit or HawkBewit()
        self._exempt_paths = set(settings.auth_exempt_paths)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in self._exempt_paths:
            return await call_next(request)

        unsigned_url, token = unsigned_request_url(request, self._settings.bewit_param)
        if not token:
            return error_response(ErrorCode.INVALID_BEWIT, "Missing bewit", 401)

        # Resolvers may block on I/O.
        result = await run_in_threadpool(
            self._bewit.validate_with_resolver,
            unsigned_url,
            token,
            self._credentials_fn,
        )

        match result:
            case Good(expiry=expiry):
                request.state.bewit_expiry = expiry
                structlog.contextvars.bind_contextvars(bewit_expiry=expiry.isoformat())
                try:
                    return await call_next(request)
                finally:
                    structlog.contextvars.unbind_contextvars("bewit_expiry")
            case Expired(expiry=expiry):
                return error_response(
                    ErrorCode.BEWIT_EXPIRED,
                    "Bewit expired",
                    401,
                    details={"expiry": expiry.isoformat()},
                )
            case AuthenticationError(message=message):
                logger.warning("Rejected bewit", path=request.url.path, reason=message)
                return error_response(ErrorCode.UNAUTHORIZED, message, 401)
            case Bad(message=message):
                return error_response(ErrorCode.INVALID_BEWIT, message, 401)

