"""
RSA PKCS#1 v1.5 signing of request parameters.

The signing primitive takes an already formatted SHA-512 DigestInfo block
and hands its digest to the RSA key as a prehashed SHA-512 value, so the
key emits the same DigestInfo inside the PKCS#1 v1.5 padding. The
parameter-level helpers compose the whole pipeline:

    canonical bytes -> SHA-512 DigestInfo -> RSA signature -> transport string
"""

import logging
from typing import Iterable, Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa, utils

from request_signer.digest import DIGEST_INFO_SIZE, SHA512_DIGEST_INFO_PREFIX, sha512_digest_info
from request_signer.params import encode_params
from request_signer.transport import decode_signature, encode_signature

_logger = logging.getLogger(__name__)


class SigningError(ValueError):
    """The RSA signing primitive could not produce a signature."""


def sign_digest_info(private_key: rsa.RSAPrivateKey, digest_info: bytes) -> bytes:
    """
    Sign a pre-formatted DigestInfo block with RSA PKCS#1 v1.5.

    No hashing happens here: the block already carries the algorithm
    identifier and the digest.

    Args:
        private_key: RSA private key (never modified)
        digest_info: DER DigestInfo block from sha512_digest_info()

    Returns:
        Raw signature bytes, as long as the key modulus

    Raises:
        SigningError: If the block is not a SHA-512 DigestInfo or the key
            cannot sign it (wrong type, modulus too small)
    """
    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise SigningError(f"Key type mismatch: expected RSA private key, got {type(private_key).__name__}")

    if len(digest_info) != DIGEST_INFO_SIZE or not digest_info.startswith(SHA512_DIGEST_INFO_PREFIX):
        raise SigningError(
            f"Invalid DigestInfo block: expected {DIGEST_INFO_SIZE} bytes with the SHA-512 prefix, "
            f"got {len(digest_info)} bytes"
        )

    digest = digest_info[len(SHA512_DIGEST_INFO_PREFIX):]
    try:
        signature = private_key.sign(digest, padding.PKCS1v15(), utils.Prehashed(hashes.SHA512()))
    except (ValueError, TypeError) as e:
        raise SigningError(f"RSA signing failed: {str(e)}") from e

    _logger.debug("Signed %d-byte DigestInfo block with %d-bit RSA key", len(digest_info), private_key.key_size)
    return signature


def sign_params(
    private_key: rsa.RSAPrivateKey,
    params: Iterable[tuple[str, str]],
    encoding: str = "utf-8",
    space_as_plus: bool = False,
) -> str:
    """
    Sign ordered request parameters and return the query-safe signature.

    Args:
        private_key: RSA private key
        params: Ordered (key, value) pairs, e.g. __method, __service, __nonce
        encoding: Text encoding for non-ASCII parameters (default: utf-8)
        space_as_plus: Encode space as '+' in the canonical string (default: False)

    Returns:
        Base64 signature, percent-encoded for use as a query parameter value

    Raises:
        SigningError: If the signing primitive fails
    """
    canonical = encode_params(params, encoding=encoding, space_as_plus=space_as_plus)
    _logger.debug("Canonical parameter string is %d bytes", len(canonical))

    signature = sign_digest_info(private_key, sha512_digest_info(canonical))
    return encode_signature(signature)


def verify_signature(
    public_key: rsa.RSAPublicKey,
    params: Iterable[tuple[str, str]],
    encoded_signature: str,
    encoding: str = "utf-8",
    space_as_plus: bool = False,
) -> tuple[bool, Optional[str]]:
    """
    Verify a transport-encoded signature over ordered request parameters.

    Args:
        public_key: RSA public key matching the signing key
        params: Ordered (key, value) pairs that were signed
        encoded_signature: Value produced by sign_params()
        encoding: Text encoding used when signing (default: utf-8)
        space_as_plus: Space encoding used when signing (default: False)

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(public_key, rsa.RSAPublicKey):
        return False, "Key type mismatch: expected RSA public key"

    canonical = encode_params(params, encoding=encoding, space_as_plus=space_as_plus)

    try:
        signature = decode_signature(encoded_signature)
        public_key.verify(signature, canonical, padding.PKCS1v15(), hashes.SHA512())
    except InvalidSignature:
        return False, "Signature mismatch"
    except ValueError as e:
        return False, f"Signature verification failed: {str(e)}"

    return True, None
