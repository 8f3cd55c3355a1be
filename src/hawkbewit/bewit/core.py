"""Bewit generation and validation."""

from __future__ import annotations

from datetime import datetime

from hawkbewit.bewit.canonical import build_canonical_string
from hawkbewit.bewit.clock import Clock, SystemClock
from hawkbewit.bewit.codec import decode_bewit, encode_bewit, to_epoch_seconds
from hawkbewit.bewit.types import (
    AuthenticationError,
    Bad,
    BewitValidationResult,
    CredentialsResolver,
    Expired,
    Good,
    HawkCredentials,
)
from hawkbewit.bewit.uri import Uri, parse_uri
from hawkbewit.common.errors import InvalidBewitError
from hawkbewit.common.hmac import compute_mac, macs_equal
from hawkbewit.common.logging import get_logger
from hawkbewit.common.metrics import record_generated, record_validation

logger = get_logger(__name__)

_OUTCOME_LABELS = {
    Bad: "bad",
    Expired: "expired",
    AuthenticationError: "authentication_error",
    Good: "good",
}


def _as_uri(uri: Uri | str) -> Uri:
    return parse_uri(uri) if isinstance(uri, str) else uri


class HawkBewit:
    """
    Generate and validate bewits for signed URLs.

    It is the caller's responsibility to add the bewit to the link after
    generation, and to extract and remove it from the signed link before
    validation. No assumption is made about where the bewit travels (query
    parameter, path segment or out of band) as long as the unsigned URI
    passed to ``generate`` is the same as the one passed to ``validate``.

    The clock is injectable so that expiry can be tested deterministically.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    def generate(
        self,
        credentials: HawkCredentials,
        uri: Uri | str,
        expiry: datetime,
    ) -> str:
        """
        Generate a bewit for ``uri`` that is valid until ``expiry``.

        Sub-second precision of ``expiry`` is discarded.

        Raises:
            UnsupportedSchemeError: If the URI has no port and no default port
        """
        expiry_seconds = to_epoch_seconds(expiry)
        mac = self._calculate_mac(credentials, expiry_seconds, _as_uri(uri))
        record_generated(credentials.algorithm.value)
        return encode_bewit(credentials.key_id, expiry_seconds, mac)

    def validate(
        self,
        credentials: HawkCredentials,
        uri: Uri | str,
        bewit: str,
    ) -> BewitValidationResult:
        """
        Validate a bewit against the unsigned ``uri`` with known credentials.

        The credentials' key id must match the key id inside the bewit.
        """
        return self.validate_with_resolver(uri, bewit, lambda _key_id: credentials)

    def validate_with_resolver(
        self,
        uri: Uri | str,
        bewit: str,
        credentials_fn: CredentialsResolver,
    ) -> BewitValidationResult:
        """
        Validate a bewit, looking up credentials by the key id it carries.

        If ``credentials_fn`` returns None the bewit is Bad.

        Raises:
            UnsupportedSchemeError: If the URI has no port and no default port
        """
        result = self._check(_as_uri(uri), bewit, credentials_fn)
        record_validation(_OUTCOME_LABELS[type(result)])
        return result

    def _check(
        self,
        uri: Uri,
        bewit: str,
        credentials_fn: CredentialsResolver,
    ) -> BewitValidationResult:
        try:
            data = decode_bewit(bewit)
        except InvalidBewitError as e:
            logger.debug("Rejected malformed bewit")
            return Bad(e.message)

        credentials = credentials_fn(data.key_id)
        if credentials is None:
            logger.debug("No credentials for bewit", key_id=data.key_id)
            return Bad(f"No credentials for key id {data.key_id}")

        if credentials.key_id != data.key_id:
            logger.debug(
                "Bewit key id mismatch",
                key_id=data.key_id,
                credentials_key_id=credentials.key_id,
            )
            return Bad("Key id mismatch")

        if self._clock.now() > data.expiry:
            logger.debug("Bewit expired", key_id=data.key_id, expiry=data.expiry.isoformat())
            return Expired(data.expiry)

        calculated = self._calculate_mac(credentials, to_epoch_seconds(data.expiry), uri)
        if not macs_equal(calculated, data.mac):
            logger.warning("Bewit MAC mismatch", key_id=data.key_id, path=uri.path)
            return AuthenticationError("MAC mismatch")

        logger.debug("Bewit accepted", key_id=data.key_id, expiry=data.expiry.isoformat())
        return Good(data.expiry)

    @staticmethod
    def _calculate_mac(credentials: HawkCredentials, expiry_seconds: int, uri: Uri) -> bytes:
        return compute_mac(credentials, build_canonical_string(uri, expiry_seconds))
