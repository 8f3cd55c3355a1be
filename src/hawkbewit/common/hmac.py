"""HMAC primitives for bewit signing."""

from __future__ import annotations

import hashlib
import hmac
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hawkbewit.bewit.types import HawkCredentials

_DIGESTS = {
    "SHA1": hashlib.sha1,
    "SHA256": hashlib.sha256,
}


def compute_mac(credentials: HawkCredentials, message: str) -> bytes:
    """Compute the raw HMAC digest of a UTF-8 message with the credentials' algorithm."""
    digestmod = _DIGESTS[credentials.algorithm.value]
    return hmac.new(credentials.key_bytes, message.encode("utf-8"), digestmod).digest()


def macs_equal(expected: bytes, actual: bytes) -> bool:
    """Compare two MACs in constant time."""
    return hmac.compare_digest(expected, actual)
