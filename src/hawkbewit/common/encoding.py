"""Base64 URL-safe encoding without padding."""

import base64
import binascii
import re

_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def b64url_encode_nopad(data: bytes) -> str:
    """
    Encode bytes to Base64 URL-safe without padding.

    Args:
        data: Raw bytes to encode

    Returns:
        Base64 URL-safe encoded string without padding
    """
    enc = base64.urlsafe_b64encode(data).decode("ascii")
    return enc.rstrip("=")


def b64url_decode_nopad(text: str) -> bytes:
    """
    Decode a Base64 URL-safe string, with or without padding.

    Characters outside the URL-safe alphabet are rejected rather than
    skipped.

    Args:
        text: Base64 encoded string

    Returns:
        Decoded bytes

    Raises:
        ValueError: If the input is not valid Base64 URL-safe text
    """
    if not _B64URL_RE.fullmatch(text):
        raise ValueError("Invalid character in base64url input")
    raw = text.rstrip("=").encode("ascii")

    # Add padding back
    pad = b"=" * ((4 - (len(raw) % 4)) % 4)
    try:
        return base64.b64decode(raw + pad, altchars=b"-_", validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64url input: {e}") from e
