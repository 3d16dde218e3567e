"""
Unit tests for query-string transport encoding of signatures.
"""

import base64
import os
import unittest
from urllib.parse import unquote

import pytest

from request_signer.transport import decode_signature, encode_signature

RAW_SIGNATURE = bytes.fromhex(
    "532d737590bf008a426a61dbc490fdbf3096a1ba1c4c6d7ff1a1e7df0703725f"
    "21e2bfa2e061861bd5d3c356da9bb1c941d119cdcf9300f5ede7995d4637dd2e"
    "5474a42f45027e85b2f464e8ea71beb8e5b1b39b51460cfd7b73a4c082ba9b7f"
    "16c915df0b280805e5ed88f6ecbc4e53676e2b4b89abfd1a2d56307bc0bae451"
    "35d9e80e801ee085fbe43770c79c0a66618be79ba4f9a90ee0517fe2fd460724"
    "9b9e4dfa6ea750970a916c79b558fbc179792b8b45554c1c23f8f4cc0fe32f92"
    "294db9be645a5120d4984e19744273bd461d05412667c2838068f782efea0591"
    "fd09145cc76a38cf88e3312e172f1973e26c02ced8ecf709eed8f0afb1c334d5"
)

RAW_SIGNATURE_BASE64 = (
    "Uy1zdZC/AIpCamHbxJD9vzCWobocTG1/8aHn3wcDcl8h4r+i4GGGG9XTw1bam7HJQdEZzc+TAPXt55ldRjfdLlR0pC9FAn6FsvRk6OpxvrjlsbO"
    "bUUYM/XtzpMCCupt/FskV3wsoCAXl7Yj27LxOU2duK0uJq/0aLVYwe8C65FE12egOgB7ghfvkN3DHnApmYYvnm6T5qQ7gUX/i/UYHJJueTfpu"
    "p1CXCpFsebVY+8F5eSuLRVVMHCP49MwP4y+SKU25vmRaUSDUmE4ZdEJzvUYdBUEmZ8KDgGj3gu/qBZH9CRRcx2o4z4jjMS4XLxlz4mwCztjs9wnu2"
    "PCvscM01Q=="
)


class TestEncodeSignature(unittest.TestCase):
    """Test base64 + percent encoding."""

    def test_standard_base64_alphabet(self):
        """Test the base64 stage uses the standard alphabet with padding."""
        encoded = encode_signature(RAW_SIGNATURE)
        self.assertEqual(unquote(encoded), RAW_SIGNATURE_BASE64)

    def test_reserved_characters_escaped(self):
        """Test that '+', '/' and '=' are escaped as uppercase hex."""
        encoded = encode_signature(RAW_SIGNATURE)

        self.assertNotIn("+", encoded)
        self.assertNotIn("/", encoded)
        self.assertNotIn("=", encoded)
        self.assertTrue(encoded.startswith("Uy1zdZC%2FAIpCamHbxJD9vzCWobocTG1%2F8aHn3wcDcl8h4r%2Bi4"))
        self.assertTrue(encoded.endswith("PCvscM01Q%3D%3D"))

    def test_output_is_query_safe(self):
        """Test that only unreserved characters and escapes appear."""
        allowed = set("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_.~%")
        for _ in range(20):
            encoded = encode_signature(os.urandom(256))
            self.assertTrue(set(encoded) <= allowed, encoded)

    def test_empty_signature(self):
        """Test that empty input gives an empty string."""
        self.assertEqual(encode_signature(b""), "")


class TestDecodeSignature(unittest.TestCase):
    """Test reversing the transport encoding."""

    def test_recovers_raw_bytes(self):
        """Test percent-decoding then base64-decoding returns the signature."""
        self.assertEqual(decode_signature(encode_signature(RAW_SIGNATURE)), RAW_SIGNATURE)

    def test_matches_manual_decoding(self):
        """Test against decoding done with the standard library directly."""
        encoded = encode_signature(RAW_SIGNATURE)
        self.assertEqual(base64.b64decode(unquote(encoded)), decode_signature(encoded))

    def test_malformed_input(self):
        """Test that invalid base64 is rejected."""
        with pytest.raises(ValueError, match="Malformed signature encoding"):
            decode_signature("not*base64")


if __name__ == "__main__":
    unittest.main()
