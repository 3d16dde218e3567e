import hashlib

# DER header of DigestInfo { AlgorithmIdentifier { id-sha512, NULL }, OCTET STRING (64) }
SHA512_DIGEST_INFO_PREFIX = bytes.fromhex("3051300d060960864801650304020305000440")

SHA512_DIGEST_SIZE = 64
DIGEST_INFO_SIZE = len(SHA512_DIGEST_INFO_PREFIX) + SHA512_DIGEST_SIZE


def sha512_digest_info(data: bytes) -> bytes:
    """
    Hash data with SHA-512 and wrap the digest in a DER DigestInfo block.

    Args:
        data: Canonical bytes to hash

    Returns:
        The 83-byte DigestInfo block (19-byte prefix + 64-byte digest)
    """
    return SHA512_DIGEST_INFO_PREFIX + hashlib.sha512(data).digest()
