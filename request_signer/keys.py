"""
RSA key helpers for callers that keep keys as PEM.
"""

import logging
from typing import Optional

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

_logger = logging.getLogger(__name__)

SUPPORTED_KEY_SIZES = (2048, 3072, 4096)


def generate_key_pair(key_size: int = 2048) -> tuple[bytes, bytes]:
    """
    Generate an RSA key pair.

    Args:
        key_size: Modulus size in bits (2048, 3072, 4096)

    Returns:
        Tuple of (private_key_pem, public_key_pem) as bytes

    Raises:
        ValueError: If the key size is not supported
    """
    if key_size not in SUPPORTED_KEY_SIZES:
        raise ValueError(f"Invalid RSA key size: {key_size}. Use 2048, 3072, or 4096.")

    private_key = rsa.generate_private_key(
        public_exponent=65537,
        key_size=key_size,
    )

    # PKCS#1 ("BEGIN RSA PRIVATE KEY"), the format the API hands out
    private_key_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )

    public_key_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )

    return private_key_pem, public_key_pem


def load_private_key(private_key_pem: bytes, password: Optional[bytes] = None) -> rsa.RSAPrivateKey:
    """
    Load an RSA private key from PKCS#1 or PKCS#8 PEM bytes.

    Raises:
        ValueError: If the PEM cannot be parsed or holds a key that is not RSA
    """
    private_key = serialization.load_pem_private_key(private_key_pem, password=password)
    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise ValueError(f"Key type mismatch: expected RSA private key, got {type(private_key).__name__}")

    _logger.debug("Loaded %d-bit RSA private key", private_key.key_size)
    return private_key


def load_public_key(public_key_pem: bytes) -> rsa.RSAPublicKey:
    """Load an RSA public key from PEM bytes."""
    public_key = serialization.load_pem_public_key(public_key_pem)
    if not isinstance(public_key, rsa.RSAPublicKey):
        raise ValueError("Key type mismatch: expected RSA public key")
    return public_key
