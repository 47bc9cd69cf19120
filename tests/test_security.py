"""Unit tests for app.core.security: bcrypt hashing and JWT encode/decode."""

import os
import unittest
from datetime import timedelta
from unittest.mock import patch

import jwt
from pydantic import ValidationError

from app.core.config import Settings
from app.core.security import (
    BCRYPT_ROUNDS,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        hashed = hash_password("secret1")
        self.assertNotEqual(hashed, "secret1")
        self.assertTrue(hashed.startswith("$2"))
        self.assertIn(f"${BCRYPT_ROUNDS:02d}$", hashed)
        self.assertTrue(verify_password("secret1", hashed))

    def test_hash_uses_bcrypt_2b_cost_10(self) -> None:
        self.assertTrue(hash_password("secret1").startswith("$2b$10$"))

    def test_wrong_password_fails(self) -> None:
        hashed = hash_password("secret1")
        self.assertFalse(verify_password("secret2", hashed))

    def test_same_password_gets_different_salts(self) -> None:
        self.assertNotEqual(hash_password("secret1"), hash_password("secret1"))

    def test_plaintext_stored_value_never_verifies(self) -> None:
        # A legacy row holding a plaintext password is not a valid bcrypt hash.
        self.assertFalse(verify_password("123456", "123456"))


class TestAccessToken(unittest.TestCase):
    def test_round_trip_carries_id_and_username(self) -> None:
        token = create_access_token(user_id=7, username="alice")
        payload = decode_access_token(token)
        self.assertEqual(payload["id"], 7)
        self.assertEqual(payload["username"], "alice")
        self.assertEqual(payload["sub"], "7")
        self.assertIn("exp", payload)

    def test_default_expiry_is_configured_minutes(self) -> None:
        payload = decode_access_token(create_access_token(user_id=1, username="bob"))
        self.assertEqual(payload["exp"] - payload["iat"], 1440 * 60)

    def test_expired_token_is_rejected(self) -> None:
        token = create_access_token(user_id=1, username="bob", expires_delta=timedelta(seconds=-5))
        with self.assertRaises(jwt.ExpiredSignatureError):
            decode_access_token(token)

    def test_token_signed_with_other_secret_is_rejected(self) -> None:
        forged = jwt.encode({"sub": "1", "id": 1, "username": "bob", "exp": 9999999999}, "other", algorithm="HS256")
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_access_token(forged)


class TestSigningSecretRequired(unittest.TestCase):
    def test_missing_secret_fails_settings_load(self) -> None:
        with patch.dict(os.environ):
            os.environ.pop("JWT_SECRET", None)
            with self.assertRaises(ValidationError):
                Settings(_env_file=None)

    def test_blank_secret_fails_settings_load(self) -> None:
        with patch.dict(os.environ, {"JWT_SECRET": "   "}):
            with self.assertRaises(ValidationError) as ctx:
                Settings(_env_file=None)
        self.assertIn("JWT_SECRET must be set and non-empty", str(ctx.exception))

    def test_present_secret_loads(self) -> None:
        with patch.dict(os.environ, {"JWT_SECRET": "s3cret"}):
            self.assertEqual(Settings(_env_file=None).JWT_SECRET.get_secret_value(), "s3cret")


if __name__ == "__main__":
    unittest.main()
