"""Tests for the health endpoint and the create_user management command."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.database import get_db
from app.core.security import verify_password
from app.main import app
from app.models import User
from app.scripts import create_user
from tests.support import make_client, make_session_factory


class TestHealth(unittest.TestCase):
    def tearDown(self) -> None:
        app.dependency_overrides.clear()

    def test_healthy_with_database(self) -> None:
        client = make_client(make_session_factory())
        resp = client.get(f"{settings.API_V1_PREFIX}/health/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "healthy")
        self.assertEqual(resp.json()["database"], "connected")

    def test_unhealthy_when_query_fails(self) -> None:
        broken = MagicMock()
        broken.execute.side_effect = RuntimeError("connection refused")
        app.dependency_overrides[get_db] = lambda: broken
        resp = TestClient(app).get(f"{settings.API_V1_PREFIX}/health/")
        self.assertEqual(resp.status_code, 503)
        self.assertEqual(resp.json()["database"], "disconnected")

    def test_unknown_route_uses_error_envelope(self) -> None:
        client = make_client(make_session_factory())
        resp = client.get("/no/such/route")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"success": False, "message": "Route not found"})


class TestCreateUserCommand(unittest.TestCase):
    def setUp(self) -> None:
        self.sessions = make_session_factory()
        patcher = patch.object(create_user, "SessionLocal", self.sessions)
        patcher.start()
        self.addCleanup(patcher.stop)

    def run_cli(self, *argv: str) -> int:
        with redirect_stdout(io.StringIO()), redirect_stderr(io.StringIO()):
            return create_user.main(list(argv))

    def stored(self, username: str) -> User:
        with self.sessions() as db:
            return db.query(User).filter(User.username == username).one()

    def test_creates_ceo(self) -> None:
        self.assertEqual(self.run_cli("ceo", "board-pass", "ceo", "--station", "HQ"), 0)
        user = self.stored("ceo")
        self.assertEqual(user.role, "ceo")
        self.assertEqual(user.station_code, "HQ")
        self.assertTrue(verify_password("board-pass", user.password_hash))

    def test_existing_user_requires_update_flag(self) -> None:
        self.run_cli("ceo", "board-pass", "ceo")
        self.assertEqual(self.run_cli("ceo", "new-pass", "user"), 1)
        self.assertEqual(self.stored("ceo").role, "ceo")
        self.assertEqual(self.run_cli("ceo", "new-pass", "admin", "--update"), 0)
        user = self.stored("ceo")
        self.assertEqual(user.role, "admin")
        self.assertTrue(verify_password("new-pass", user.password_hash))

    def test_rejects_short_credentials(self) -> None:
        self.assertEqual(self.run_cli("ab", "board-pass"), 1)
        self.assertEqual(self.run_cli("carol", "12345"), 1)


if __name__ == "__main__":
    unittest.main()
