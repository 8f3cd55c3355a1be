"""Common utilities for hawkbewit."""

from hawkbewit.common.encoding import b64url_decode_nopad, b64url_encode_nopad
from hawkbewit.common.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "b64url_encode_nopad",
    "b64url_decode_nopad",
]
