"""
hawkbewit: Signed, time-limited URLs using Hawk-style bewits.

A bewit is a compact token that authorizes a single read-only request for
an exact scheme, host, port, path and query until a fixed expiry, without
any server-side session state.
"""

from hawkbewit.bewit import (
    Algorithm,
    AuthenticationError,
    Bad,
    BewitValidationResult,
    Expired,
    FixedClock,
    Good,
    HawkBewit,
    HawkCredentials,
    SystemClock,
    Uri,
    parse_uri,
)
from hawkbewit.common.errors import (
    HawkBewitError,
    InvalidBewitError,
    UnsupportedSchemeError,
)

__version__ = "1.0.0"

__all__ = [
    "Algorithm",
    "AuthenticationError",
    "Bad",
    "BewitValidationResult",
    "Expired",
    "FixedClock",
    "Good",
    "HawkBewit",
    "HawkBewitError",
    "HawkCredentials",
    "InvalidBewitError",
    "SystemClock",
    "UnsupportedSchemeError",
    "Uri",
    "parse_uri",
]
