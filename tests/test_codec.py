"""Tests for the bewit wire format."""

from datetime import datetime, timezone

import pytest

from hawkbewit.bewit.codec import (
    BEWIT_SEPARATOR,
    decode_bewit,
    encode_bewit,
    from_epoch_seconds,
    to_epoch_seconds,
)
from hawkbewit.common.encoding import b64url_decode_nopad, b64url_encode_nopad
from hawkbewit.common.errors import InvalidBewitError

MAC = bytes(range(32))
EXPIRY = 1643087400


def _wrap(raw: str) -> str:
    return b64url_encode_nopad(raw.encode("utf-8"))


class TestEncode:
    """Test bewit serialization."""

    def test_inner_layout(self):
        """Inner string is key id, expiry, MAC and a trailing separator."""
        bewit = encode_bewit("K1", EXPIRY, MAC)
        inner = b64url_decode_nopad(bewit).decode("utf-8")

        assert inner == f"K1\\{EXPIRY}\\{b64url_encode_nopad(MAC)}\\"
        assert inner.split(BEWIT_SEPARATOR) == ["K1", str(EXPIRY), b64url_encode_nopad(MAC), ""]

    def test_url_safe_without_padding(self):
        bewit = encode_bewit("key-id", EXPIRY, b"\xff" * 20)

        assert "=" not in bewit
        assert "+" not in bewit
        assert "/" not in bewit

    def test_decode_inverts_encode(self):
        data = decode_bewit(encode_bewit("K1", EXPIRY, MAC))

        assert data.key_id == "K1"
        assert data.expiry == datetime(2022, 1, 25, 5, 10, tzinfo=timezone.utc)
        assert data.mac == MAC

    def test_key_id_preserved_exactly(self):
        """Key ids are not case-folded or trimmed."""
        for key_id in [" Mixed Case ", "ключ", "a/b+c=d", ""]:
            assert decode_bewit(encode_bewit(key_id, EXPIRY, MAC)).key_id == key_id


class TestDecode:
    """Test bewit parsing failures."""

    def test_accepts_padded_outer_layer(self):
        bewit = encode_bewit("K1", EXPIRY, MAC)
        padded = bewit + "=" * ((4 - len(bewit) % 4) % 4)

        assert decode_bewit(padded).mac == MAC

    @pytest.mark.parametrize(
        "raw",
        [
            f"K1\\{EXPIRY}\\AAAA",  # three fields
            f"K1\\{EXPIRY}\\AAAA\\\\",  # five fields
            "no separators",
            f"K\\1\\{EXPIRY}\\AAAA\\",  # separator inside key id
        ],
    )
    def test_wrong_field_count(self, raw):
        with pytest.raises(InvalidBewitError, match="Invalid bewit"):
            decode_bewit(_wrap(raw))

    @pytest.mark.parametrize("expiry", ["", "soon", "12.5", " 12", "1_000", "99999999999999999999"])
    def test_invalid_expiry(self, expiry):
        with pytest.raises(InvalidBewitError):
            decode_bewit(_wrap(f"K1\\{expiry}\\AAAA\\"))

    def test_invalid_mac(self):
        with pytest.raises(InvalidBewitError):
            decode_bewit(_wrap(f"K1\\{EXPIRY}\\not*base64\\"))

    def test_empty_mac(self):
        assert decode_bewit(_wrap(f"K1\\{EXPIRY}\\\\")).mac == b""

    @pytest.mark.parametrize("char", ["+", "/"])
    def test_standard_alphabet_outer_layer(self, char):
        """Only the URL-safe alphabet is accepted for the token."""
        bewit = encode_bewit("K1", EXPIRY, MAC)

        with pytest.raises(InvalidBewitError):
            decode_bewit(char + bewit[1:])

    @pytest.mark.parametrize("mac", ["+/+/", "AA+A", "AA/A"])
    def test_standard_alphabet_mac(self, mac):
        with pytest.raises(InvalidBewitError):
            decode_bewit(_wrap(f"K1\\{EXPIRY}\\{mac}\\"))

    def test_invalid_outer_base64(self):
        with pytest.raises(InvalidBewitError):
            decode_bewit("@@@")

    def test_non_ascii_token(self):
        with pytest.raises(InvalidBewitError):
            decode_bewit("ключ")

    def test_invalid_utf8(self):
        with pytest.raises(InvalidBewitError):
            decode_bewit(b64url_encode_nopad(b"\xff\xfe\\1\\AA\\"))


class TestEpochSeconds:
    """Test expiry conversion."""

    def test_truncates_subseconds(self):
        instant = datetime(2022, 1, 25, 5, 10, 0, 999_999, tzinfo=timezone.utc)
        assert to_epoch_seconds(instant) == EXPIRY

    def test_naive_is_utc(self):
        assert to_epoch_seconds(datetime(2022, 1, 25, 5, 10)) == EXPIRY

    def test_from_epoch_is_utc(self):
        assert from_epoch_seconds(EXPIRY).tzinfo == timezone.utc


class TestBase64Url:
    """Test the base64url helpers."""

    def test_decode_unpadded(self):
        assert b64url_decode_nopad("-_8") == b"\xfb\xff"

    @pytest.mark.parametrize("text", ["+/+/", "ab+c", "ab/c", "ab c", "a=b", "ab==="])
    def test_rejects_outside_alphabet(self, text):
        with pytest.raises(ValueError):
            b64url_decode_nopad(text)
