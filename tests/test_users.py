"""Tests for gatekeeper.services.users.Authenticator against an in-memory database."""

import unittest

from gatekeeper.core.database import SessionLocal, drop_db, init_db
from gatekeeper.core.errors import Conflict, Unauthorized, ValidationError
from gatekeeper.core.security import TokenService, verify_password
from gatekeeper.services.users import Authenticator, list_usernames


class AuthenticatorTestCase(unittest.TestCase):
    def setUp(self) -> None:
        init_db()
        self.db = SessionLocal()
        self.tokens = TokenService("TEST_SECRET")
        self.auth = Authenticator(self.tokens, bcrypt_rounds=4)

    def tearDown(self) -> None:
        self.db.close()
        drop_db()


class TestSignup(AuthenticatorTestCase):
    def test_stores_hash_not_password(self) -> None:
        user, token = self.auth.signup(self.db, "user", "password", "admin")
        self.assertIsNotNone(user.id)
        self.assertNotEqual(user.password_hash, "password")
        self.assertTrue(verify_password("password", user.password_hash))
        self.assertEqual(self.tokens.validate(token).role, "admin")

    def test_default_role_is_user(self) -> None:
        user, _ = self.auth.signup(self.db, "reader", "password")
        self.assertEqual(user.role, "user")

    def test_duplicate_username_rejected(self) -> None:
        self.auth.signup(self.db, "user", "password")
        with self.assertRaises(Conflict):
            self.auth.signup(self.db, "user", "another-password")
        self.assertEqual(list_usernames(self.db), ["user"])

    def test_unknown_role_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            self.auth.signup(self.db, "user", "password", "root")

    def test_short_password_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            self.auth.signup(self.db, "user", "short")


class TestSignin(AuthenticatorTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.auth.signup(self.db, "user", "password", "editor")

    def test_valid_credentials_issue_token(self) -> None:
        user, token = self.auth.signin(self.db, "user", "password")
        self.assertEqual(user.username, "user")
        claims = self.tokens.validate(token)
        self.assertEqual((claims.username, claims.role), ("user", "editor"))

    def test_wrong_password(self) -> None:
        with self.assertRaises(Unauthorized):
            self.auth.signin(self.db, "user", "xyz")

    def test_unknown_user(self) -> None:
        with self.assertRaises(Unauthorized):
            self.auth.signin(self.db, "nobody", "password")


if __name__ == "__main__":
    unittest.main()
