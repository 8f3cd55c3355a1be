"""Bewit credentials and validation outcome datatypes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Union


class Algorithm(str, Enum):
    """HMAC algorithms supported for bewits."""

    SHA1 = "SHA1"
    SHA256 = "SHA256"

    @property
    def digest_size(self) -> int:
        """Length in bytes of a MAC produced with this algorithm."""
        return 20 if self is Algorithm.SHA1 else 32


@dataclass(frozen=True)
class HawkCredentials:
    """Key id, shared secret and algorithm used to sign and validate bewits."""

    key_id: str
    key: str | bytes = field(repr=False)
    algorithm: Algorithm = Algorithm.SHA256

    @property
    def key_bytes(self) -> bytes:
        if isinstance(self.key, bytes):
            return self.key
        return self.key.encode("utf-8")


@dataclass(frozen=True)
class Bad:
    """Malformed bewit, unknown key id or mismatched credentials."""

    message: str


@dataclass(frozen=True)
class Expired:
    """Bewit was authentic-looking but its expiry has passed."""

    expiry: datetime


@dataclass(frozen=True)
class AuthenticationError:
    """MAC did not match: tampered bewit or a different URI."""

    message: str


@dataclass(frozen=True)
class Good:
    """Bewit is valid for the URI until ``expiry``."""

    expiry: datetime


BewitValidationResult = Union[Bad, Expired, AuthenticationError, Good]

CredentialsResolver = Callable[[str], Union[HawkCredentials, None]]
