"""Canonical signing string for bewits."""

from __future__ import annotations

from hawkbewit.bewit.uri import Uri
from hawkbewit.common.errors import UnsupportedSchemeError

# Not compatible with Hawk directly: the scheme is signed as well.
HAWK_VERSION = "1a"
AUTH_TYPE_BEWIT = "BEWIT"

# Bewits only grant read-only access; the method is part of the scheme, not a parameter.
BEWIT_METHOD = "GET"

DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
}


def resolve_port(uri: Uri) -> int:
    """
    Return the explicit port of a URI, or the default port for its scheme.

    Raises:
        UnsupportedSchemeError: If no port is given and the scheme has no default
    """
    if uri.port is not None and uri.port != -1:
        return uri.port

    default = DEFAULT_PORTS.get(uri.scheme.lower())
    if default is None:
        raise UnsupportedSchemeError(uri.scheme)
    return default


def build_canonical_string(uri: Uri, expiry_seconds: int) -> str:
    """
    Build the newline-separated string the bewit MAC is computed over.

    Scheme and host are lowercased; path and query are used verbatim.
    """
    resource = uri.path
    if uri.query is not None:
        resource = f"{resource}?{uri.query}"

    return "\n".join(
        [
            f"hawk.{HAWK_VERSION}.{AUTH_TYPE_BEWIT}",
            str(expiry_seconds),
            "",
            BEWIT_METHOD,
            resource,
            uri.scheme.lower(),
            (uri.host or "").lower(),
            str(resolve_port(uri)),
        ]
    )
