#!/usr/bin/env python3
import hashlib
import hmac
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tgproxy.errors import InvalidSignature, MissingRawBody, SecretNotConfigured
from tgproxy.signature import compute_signature, verify_signature

SECRET = "s3cr3t"
BODY = b'{"pusher": {"name": "alice"}, "repository": {}, "commits": []}'


def sign(body, secret=SECRET):
    return "sha256=" + hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()


class TestVerifySignature(unittest.TestCase):
    def test_valid_signature_passes(self):
        verify_signature(SECRET, BODY, sign(BODY))

    def test_uppercase_hex_rejected(self):
        with self.assertRaises(InvalidSignature):
            verify_signature(SECRET, BODY, "sha256=" + compute_signature(SECRET, BODY).upper())

    def test_padded_signature_rejected(self):
        digest = compute_signature(SECRET, BODY)
        for header in ("sha256= " + digest, "sha256=" + digest + " ", "sha256= " + digest + " "):
            with self.assertRaises(InvalidSignature):
                verify_signature(SECRET, BODY, header)

    def test_secret_whitespace_is_part_of_key(self):
        padded = " " + SECRET + " "
        verify_signature(padded, BODY, sign(BODY, secret=padded))
        with self.assertRaises(InvalidSignature):
            verify_signature(padded, BODY, sign(BODY))

    def test_signature_over_different_bytes_fails(self):
        # Mesmo JSON, whitespace diferente: HMAC é sobre os bytes exatos
        other = b'{"pusher":{"name":"alice"},"repository":{},"commits":[]}'
        with self.assertRaises(InvalidSignature):
            verify_signature(SECRET, BODY, sign(other))

    def test_wrong_secret_fails(self):
        with self.assertRaises(InvalidSignature):
            verify_signature(SECRET, BODY, sign(BODY, secret="other"))

    def test_missing_header(self):
        with self.assertRaises(InvalidSignature):
            verify_signature(SECRET, BODY, None)

    def test_wrong_prefix(self):
        digest = compute_signature(SECRET, BODY)
        with self.assertRaises(InvalidSignature):
            verify_signature(SECRET, BODY, "sha1=" + digest)
        with self.assertRaises(InvalidSignature):
            verify_signature(SECRET, BODY, digest)

    def test_length_mismatch_rejected(self):
        digest = compute_signature(SECRET, BODY)
        for candidate in ("", digest[:10], digest + "00", digest[:-1]):
            with self.assertRaises(InvalidSignature):
                verify_signature(SECRET, BODY, "sha256=" + candidate)

    def test_missing_body(self):
        with self.assertRaises(MissingRawBody):
            verify_signature(SECRET, b"", sign(b""))
        with self.assertRaises(MissingRawBody):
            verify_signature(SECRET, None, sign(b""))

    def test_empty_secret_is_server_misconfiguration(self):
        with self.assertRaises(SecretNotConfigured) as ctx:
            verify_signature("", BODY, sign(BODY))
        self.assertEqual(ctx.exception.status_code, 500)

    def test_status_codes(self):
        self.assertEqual(InvalidSignature.status_code, 401)
        self.assertEqual(MissingRawBody.status_code, 400)


if __name__ == '__main__':
    unittest.main()
