"""Compact bewit serialization."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timezone

from hawkbewit.common.encoding import b64url_decode_nopad, b64url_encode_nopad
from hawkbewit.common.errors import InvalidBewitError

# Reserved, not escaped. Key ids containing it do not round-trip.
BEWIT_SEPARATOR = "\\"

BEWIT_FIELDS = 4
BEWIT_FIELD_ID = 0
BEWIT_FIELD_EXPIRY = 1
BEWIT_FIELD_MAC = 2

_EXPIRY_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class BewitData:
    """Fields carried inside a bewit."""

    key_id: str
    expiry: datetime
    mac: bytes


def to_epoch_seconds(instant: datetime) -> int:
    """Whole seconds since the epoch; naive datetimes are taken as UTC."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return math.floor(instant.timestamp())


def from_epoch_seconds(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def encode_bewit(key_id: str, expiry_seconds: int, mac: bytes) -> str:
    """
    Serialize a bewit.

    The inner string is ``key_id\\expiry\\mac\\`` with the MAC in base64url;
    the trailing separator makes a well-formed bewit always split into four
    fields. The whole string is base64url encoded again.
    """
    raw = BEWIT_SEPARATOR.join([key_id, str(expiry_seconds), b64url_encode_nopad(mac), ""])
    return b64url_encode_nopad(raw.encode("utf-8"))


def decode_bewit(bewit: str) -> BewitData:
    """
    Parse a bewit produced by ``encode_bewit``.

    Raises:
        InvalidBewitError: If the bewit is not well formed
    """
    try:
        decoded = b64url_decode_nopad(bewit).decode("utf-8")
    except ValueError as e:
        raise InvalidBewitError() from e

    fields = decoded.split(BEWIT_SEPARATOR)
    if len(fields) != BEWIT_FIELDS:
        raise InvalidBewitError()

    expiry_field = fields[BEWIT_FIELD_EXPIRY]
    if not _EXPIRY_RE.fullmatch(expiry_field):
        raise InvalidBewitError()
    try:
        expiry = from_epoch_seconds(int(expiry_field))
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidBewitError() from e

    try:
        mac = b64url_decode_nopad(fields[BEWIT_FIELD_MAC])
    except ValueError as e:
        raise InvalidBewitError() from e

    return BewitData(
        key_id=fields[BEWIT_FIELD_ID],
        expiry=expiry,
        mac=mac,
    )
