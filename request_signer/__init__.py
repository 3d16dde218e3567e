"""
RSA request signing for parameter-authenticated APIs.

Signs an ordered list of request parameters with RSA PKCS#1 v1.5 over a
SHA-512 DigestInfo block and returns the signature ready to be sent as a
URL query value.

Basic Usage:
    from request_signer import load_private_key, sign_params

    private_key = load_private_key(pem_bytes)

    signature = sign_params(
        private_key,
        [
            ("__method", "getDomainNames"),
            ("__service", "DomainService"),
            ("__hostname", "api.transip.nl"),
            ("__timestamp", "1492851509"),
            ("__nonce", "58fb1b35916f25.33598874"),
        ],
    )

Pipeline Stages:
    from request_signer import encode_params, sha512_digest_info, sign_digest_info, encode_signature

    canonical = encode_params(params)
    block = sha512_digest_info(canonical)
    signature = encode_signature(sign_digest_info(private_key, block))

Verification:
    from request_signer import load_public_key, verify_signature

    is_valid, error = verify_signature(load_public_key(public_pem), params, signature)
"""

from request_signer.params import (
    decode_params,
    encode_params,
)

from request_signer.digest import (
    SHA512_DIGEST_INFO_PREFIX,
    sha512_digest_info,
)

from request_signer.transport import (
    decode_signature,
    encode_signature,
)

from request_signer.signer import (
    SigningError,
    sign_digest_info,
    sign_params,
    verify_signature,
)

from request_signer.keys import (
    generate_key_pair,
    load_private_key,
    load_public_key,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Parameter encoding
    "decode_params",
    "encode_params",
    # Digest
    "SHA512_DIGEST_INFO_PREFIX",
    "sha512_digest_info",
    # Transport encoding
    "decode_signature",
    "encode_signature",
    # Signing
    "SigningError",
    "sign_digest_info",
    "sign_params",
    "verify_signature",
    # Keys
    "generate_key_pair",
    "load_private_key",
    "load_public_key",
]
