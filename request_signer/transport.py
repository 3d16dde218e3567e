"""
Transport encoding for signatures carried in a URL query string.
"""

import base64
from urllib.parse import quote, unquote


def encode_signature(signature: bytes) -> str:
    """
    Base64-encode a raw signature and percent-encode it for a query value.

    Args:
        signature: Raw signature bytes

    Returns:
        ASCII string where '+', '/' and '=' appear as %2B, %2F and %3D
    """
    encoded = base64.b64encode(signature).decode("ascii")
    return quote(encoded, safe="")


def decode_signature(encoded_signature: str) -> bytes:
    """
    Reverse encode_signature().

    Raises:
        ValueError: If the value is not valid padded base64 once unquoted
    """
    try:
        return base64.b64decode(unquote(encoded_signature), validate=True)
    except ValueError as e:
        raise ValueError(f"Malformed signature encoding: {str(e)}") from e
