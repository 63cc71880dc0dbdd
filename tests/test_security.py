"""Unit tests for gatekeeper.core.security: bcrypt helpers and TokenService."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt
from jwt.utils import base64url_encode

from gatekeeper.core.errors import Unauthorized
from gatekeeper.core.security import TokenClaims, TokenService, hash_password, verify_password


class TestPasswordHashing(unittest.TestCase):
    def test_hash_is_salted_and_verifies(self) -> None:
        first = hash_password("password", rounds=4)
        second = hash_password("password", rounds=4)
        self.assertNotEqual(first, second)
        self.assertNotIn("password", first)
        self.assertTrue(verify_password("password", first))
        self.assertTrue(verify_password("password", second))

    def test_wrong_password_fails(self) -> None:
        hashed = hash_password("password", rounds=4)
        self.assertFalse(verify_password("xyz", hashed))

    def test_garbage_hash_fails_without_raising(self) -> None:
        self.assertFalse(verify_password("password", "not-a-bcrypt-hash"))


class TestTokenService(unittest.TestCase):
    """Tokens verify only under the issuing secret and before expiry."""

    def setUp(self) -> None:
        self.tokens = TokenService("TEST_SECRET", expire_minutes=15)

    def test_issued_token_validates_to_claims(self) -> None:
        token = self.tokens.issue("user", "admin")
        self.assertEqual(self.tokens.validate(token), TokenClaims(username="user", role="admin"))

    def test_claims_carry_iat_and_exp(self) -> None:
        now = datetime.now(UTC).replace(microsecond=0)
        token = self.tokens.issue("user", "admin", now=now)
        payload = jwt.decode(token, "TEST_SECRET", algorithms=["HS256"])
        self.assertEqual(payload["sub"], "user")
        self.assertEqual(payload["iat"], int(now.timestamp()))
        self.assertEqual(payload["exp"], int((now + timedelta(minutes=15)).timestamp()))

    def test_expired_token_rejected(self) -> None:
        issued = datetime.now(UTC) - timedelta(hours=1)
        token = self.tokens.issue("user", "admin", now=issued)
        with self.assertRaises(Unauthorized):
            self.tokens.validate(token)

    def test_other_secret_rejected(self) -> None:
        token = TokenService("OTHER_SECRET").issue("user", "admin")
        with self.assertRaises(Unauthorized):
            self.tokens.validate(token)

    def test_tampered_token_rejected(self) -> None:
        header, payload, signature = self.tokens.issue("user", "user").split(".")
        forged_payload = base64url_encode(
            b'{"sub":"user","role":"admin","iat":0,"exp":9999999999}'
        ).decode()
        with self.assertRaises(Unauthorized):
            self.tokens.validate(f"{header}.{forged_payload}.{signature}")

    def test_malformed_token_rejected(self) -> None:
        for token in ("accessgranted", "", "a.b.c"):
            with self.subTest(token=token), self.assertRaises(Unauthorized):
                self.tokens.validate(token)

    def test_missing_role_claim_rejected(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "user", "iat": now, "exp": now + timedelta(minutes=5)},
            "TEST_SECRET",
            algorithm="HS256",
        )
        with self.assertRaises(Unauthorized):
            self.tokens.validate(token)

    def test_failures_share_one_message(self) -> None:
        expired = self.tokens.issue("user", "admin", now=datetime.now(UTC) - timedelta(hours=1))
        messages = set()
        for token in ("garbage", expired, TokenService("OTHER").issue("user", "admin")):
            with self.assertRaises(Unauthorized) as ctx:
                self.tokens.validate(token)
            messages.add(ctx.exception.message)
        self.assertEqual(len(messages), 1)

    def test_empty_secret_refused(self) -> None:
        with self.assertRaises(ValueError):
            TokenService("")


if __name__ == "__main__":
    unittest.main()
