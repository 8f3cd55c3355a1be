"""Pytest configuration and fixtures."""

from datetime import datetime, timezone

import pytest

from hawkbewit.bewit import Algorithm, FixedClock, HawkBewit, HawkCredentials
from hawkbewit.common.settings import Settings

CLOCK_SEED = datetime(2022, 1, 25, 5, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock_seed() -> datetime:
    """Fixed start time for the test clock."""
    return CLOCK_SEED


@pytest.fixture
def test_clock() -> FixedClock:
    """Deterministic clock starting at the seed time."""
    return FixedClock(CLOCK_SEED)


@pytest.fixture
def hawk_bewit(test_clock: FixedClock) -> HawkBewit:
    """Bewit generator/validator bound to the test clock."""
    return HawkBewit(test_clock)


@pytest.fixture
def creds1() -> HawkCredentials:
    return HawkCredentials(
        key_id="9aA4bFc9df",
        key="4fDE242CacAFdEAFcb5e5b44CFfd7cf4adD53A4AfF32CF5deD7A92facDEC4b33",
        algorithm=Algorithm.SHA256,
    )


@pytest.fixture
def creds2() -> HawkCredentials:
    return HawkCredentials(
        key_id="545D9dC9d7",
        key="32fe2DAF2DE9DcC5AE434Aa7C24CFae3ed42dad3eCe7CED5abf443fbbDFfcAdA",
        algorithm=Algorithm.SHA256,
    )


@pytest.fixture
def settings() -> Settings:
    """Create test settings."""
    return Settings(
        key_id="9aA4bFc9df",
        key="4fDE242CacAFdEAFcb5e5b44CFfd7cf4adD53A4AfF32CF5deD7A92facDEC4b33",
        algorithm="SHA256",
        bewit_param="bewit",
        auth_exempt_paths=("/health", "/metrics"),
    )
