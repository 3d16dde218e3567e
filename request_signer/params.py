"""
Canonical encoding of ordered request parameters.

The signature is computed over these bytes, so the output must match what
the remote service rebuilds on its side byte for byte.
"""

from typing import Iterable
from urllib.parse import quote, quote_plus, unquote, unquote_plus

# Lone surrogates are carried through as their UTF-8 byte form
ENCODING_ERRORS = "surrogatepass"


def _escape(value: str, encoding: str, space_as_plus: bool) -> str:
    """Percent-encode a single key or value, leaving only unreserved characters."""
    if space_as_plus:
        return quote_plus(value, safe="", encoding=encoding, errors=ENCODING_ERRORS)
    return quote(value, safe="", encoding=encoding, errors=ENCODING_ERRORS)


def encode_params(
    params: Iterable[tuple[str, str]],
    encoding: str = "utf-8",
    space_as_plus: bool = False,
) -> bytes:
    """
    Encode parameters as ``key=value&key=value`` bytes.

    Pairs keep the caller's order and duplicates are not collapsed. With the
    default UTF-8 encoding every string is representable, lone surrogates
    included.

    Args:
        params: Ordered (key, value) pairs
        encoding: Text encoding for non-ASCII characters (default: utf-8)
        space_as_plus: Encode space as '+' instead of '%20' (default: False)

    Returns:
        The canonical byte string (empty for no parameters)

    Raises:
        UnicodeEncodeError: If a non-UTF encoding is chosen and cannot
            represent a character
    """
    pairs = [
        f"{_escape(key, encoding, space_as_plus)}={_escape(value, encoding, space_as_plus)}"
        for key, value in params
    ]
    return "&".join(pairs).encode("ascii")


def decode_params(
    data: bytes,
    encoding: str = "utf-8",
    space_as_plus: bool = False,
) -> list[tuple[str, str]]:
    """Split canonical bytes back into the ordered (key, value) pairs."""
    if not data:
        return []

    unescape = unquote_plus if space_as_plus else unquote
    result = []
    for pair in data.decode("ascii").split("&"):
        key, _, value = pair.partition("=")
        result.append(
            (
                unescape(key, encoding=encoding, errors=ENCODING_ERRORS),
                unescape(value, encoding=encoding, errors=ENCODING_ERRORS),
            )
        )
    return result
