"""Tests for app.services.auth_service against an in-memory database."""

import unittest
from datetime import timedelta

from app.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from app.core.security import create_access_token, verify_password
from app.models import User
from app.services import auth_service
from tests.support import make_session_factory


class AuthServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session_factory()()

    def tearDown(self) -> None:
        self.db.close()

    def user_count(self) -> int:
        return self.db.query(User).count()


class TestRegister(AuthServiceTestCase):
    def test_register_persists_hashed_password_and_returns_token(self) -> None:
        token, user = auth_service.register(self.db, "alice", "secret1")
        self.assertEqual(user.username, "alice")
        self.assertEqual(user.role, "user")
        stored = self.db.query(User).filter(User.username == "alice").one()
        self.assertNotEqual(stored.password_hash, "secret1")
        self.assertTrue(verify_password("secret1", stored.password_hash))
        claims = auth_service.verify(token)
        self.assertEqual(claims.id, stored.id)
        self.assertEqual(claims.username, "alice")

    def test_public_view_has_no_password(self) -> None:
        _, user = auth_service.register(self.db, "alice", "secret1")
        self.assertNotIn("password_hash", user.model_dump())

    def test_existing_username_conflicts_without_duplicate_row(self) -> None:
        auth_service.register(self.db, "alice", "secret1")
        with self.assertRaises(ConflictError) as ctx:
            auth_service.register(self.db, "alice", "another1")
        self.assertEqual(ctx.exception.message, "Username already exists")
        self.assertEqual(ctx.exception.status_code, 409)
        self.assertEqual(self.user_count(), 1)

    def test_short_passwords_are_rejected_without_write(self) -> None:
        for password in ("a", "12345", "     "):
            with self.subTest(password=password):
                with self.assertRaises(ValidationError):
                    auth_service.register(self.db, "bob", password)
        self.assertEqual(self.user_count(), 0)

    def test_username_length_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            auth_service.register(self.db, "ab", "secret1")
        with self.assertRaises(ValidationError):
            auth_service.register(self.db, "x" * 51, "secret1")
        auth_service.register(self.db, "abc", "secret1")
        auth_service.register(self.db, "y" * 50, "secret1")
        self.assertEqual(self.user_count(), 2)

    def test_missing_fields_are_rejected(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            auth_service.register(self.db, None, "secret1")
        self.assertEqual(ctx.exception.message, "Username and password are required")
        with self.assertRaises(ValidationError):
            auth_service.register(self.db, "alice", "")


class TestLogin(AuthServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        auth_service.register(self.db, "alice", "secret1")

    def test_login_returns_token_for_user(self) -> None:
        token, user = auth_service.login(self.db, "alice", "secret1")
        self.assertEqual(user.username, "alice")
        self.assertEqual(auth_service.verify(token).username, "alice")

    def test_wrong_password_and_unknown_user_share_message(self) -> None:
        with self.assertRaises(AuthError) as wrong_password:
            auth_service.login(self.db, "alice", "wrong-password")
        with self.assertRaises(AuthError) as unknown_user:
            auth_service.login(self.db, "nobody", "secret1")
        self.assertEqual(wrong_password.exception.message, unknown_user.exception.message)
        self.assertEqual(wrong_password.exception.status_code, 401)
        self.assertEqual(unknown_user.exception.status_code, 401)

    def test_missing_credentials(self) -> None:
        with self.assertRaises(ValidationError):
            auth_service.login(self.db, "alice", None)


class TestVerify(unittest.TestCase):
    def test_missing_token_is_401(self) -> None:
        with self.assertRaises(AuthError) as ctx:
            auth_service.verify(None)
        self.assertEqual(ctx.exception.status_code, 401)

    def test_garbage_token_is_403(self) -> None:
        with self.assertRaises(AuthError) as ctx:
            auth_service.verify("not-a-jwt")
        self.assertEqual(ctx.exception.status_code, 403)

    def test_expired_token_is_403(self) -> None:
        token = create_access_token(user_id=1, username="alice", expires_delta=timedelta(seconds=-1))
        with self.assertRaises(AuthError) as ctx:
            auth_service.verify(token)
        self.assertEqual(ctx.exception.status_code, 403)

    def test_unexpired_token_is_accepted(self) -> None:
        token = create_access_token(user_id=3, username="carol", expires_delta=timedelta(minutes=5))
        claims = auth_service.verify(token)
        self.assertEqual((claims.id, claims.username), (3, "carol"))


class TestGetProfile(AuthServiceTestCase):
    def test_profile_of_existing_user(self) -> None:
        _, user = auth_service.register(self.db, "alice", "secret1")
        self.assertEqual(auth_service.get_profile(self.db, user.id).username, "alice")

    def test_missing_user_is_not_found(self) -> None:
        with self.assertRaises(NotFoundError):
            auth_service.get_profile(self.db, 999)


if __name__ == "__main__":
    unittest.main()
