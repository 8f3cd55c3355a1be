"""Bewit token algorithm: canonical string, MAC, codec and validation."""

from hawkbewit.bewit.types import (
    Algorithm,
    AuthenticationError,
    Bad,
    BewitValidationResult,
    CredentialsResolver,
    Expired,
    Good,
    HawkCredentials,
)
from hawkbewit.bewit.clock import Clock, FixedClock, SystemClock
from hawkbewit.bewit.uri import Uri, add_bewit, parse_uri, strip_bewit
from hawkbewit.bewit.core import HawkBewit

__all__ = [
    "Algorithm",
    "AuthenticationError",
    "Bad",
    "BewitValidationResult",
    "Clock",
    "CredentialsResolver",
    "Expired",
    "FixedClock",
    "Good",
    "HawkBewit",
    "HawkCredentials",
    "SystemClock",
    "Uri",
    "add_bewit",
    "parse_uri",
    "strip_bewit",
]
