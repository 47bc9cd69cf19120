"""Tests for the investment-project review workflow (app.services.review)."""

import unittest

from app.core.errors import NotFoundError, ValidationError
from app.models import InvestmentProject
from app.models.investment_project import REVIEW_STATUSES
from app.schemas.auth import CurrentUser
from app.services.review import comment_column_for_role, update_review_status, validate_review_status
from tests.support import make_session_factory

CEO = CurrentUser(id=1, username="ceo", role="ceo")
PM = CurrentUser(id=2, username="pm", role="user")
ADMIN = CurrentUser(id=3, username="admin", role="admin")


class TestCommentColumnForRole(unittest.TestCase):
    def test_ceo_writes_ceo_comment(self) -> None:
        self.assertEqual(comment_column_for_role("ceo"), "ceo_comment")

    def test_every_other_role_writes_pm_comment(self) -> None:
        for role in ("user", "admin", "", None, "CEO"):
            with self.subTest(role=role):
                self.assertEqual(comment_column_for_role(role), "pm_comment")


class TestValidateReviewStatus(unittest.TestCase):
    def test_all_four_statuses_are_accepted(self) -> None:
        for status in REVIEW_STATUSES:
            self.assertEqual(validate_review_status(status), status)

    def test_missing_status(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            validate_review_status(None)
        self.assertEqual(ctx.exception.message, "Review status is required")

    def test_unknown_status(self) -> None:
        for status in ("approved", "Done", "Pending"):
            with self.subTest(status=status):
                with self.assertRaises(ValidationError):
                    validate_review_status(status)


class TestUpdateReviewStatus(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session_factory()()
        project = InvestmentProject(
            id=42,
            department_type="investment",
            project_name="North Riyadh site",
            project_code="IP-042",
            pm_comment="site visit done",
        )
        self.db.add(project)
        self.db.commit()

    def tearDown(self) -> None:
        self.db.close()

    def reload(self) -> InvestmentProject:
        self.db.expire_all()
        return self.db.get(InvestmentProject, 42)

    def test_new_project_starts_pending_review(self) -> None:
        self.assertEqual(self.reload().review_status, "Pending Review")

    def test_ceo_writes_only_ceo_comment(self) -> None:
        project = update_review_status(self.db, 42, "Approved", "ok", CEO)
        self.assertEqual(project.review_status, "Approved")
        self.assertEqual(project.ceo_comment, "ok")
        self.assertEqual(project.pm_comment, "site visit done")
        self.assertEqual(project.updated_by, CEO.id)

    def test_other_roles_write_only_pm_comment(self) -> None:
        update_review_status(self.db, 42, "Approved", "looks good", CEO)
        for caller in (PM, ADMIN):
            with self.subTest(role=caller.role):
                project = update_review_status(self.db, 42, "Validated", f"by {caller.role}", caller)
                self.assertEqual(project.pm_comment, f"by {caller.role}")
                self.assertEqual(project.ceo_comment, "looks good")
                self.assertEqual(project.updated_by, caller.id)

    def test_invalid_status_leaves_row_unchanged(self) -> None:
        with self.assertRaises(ValidationError):
            update_review_status(self.db, 42, "Shipped", "nope", CEO)
        project = self.reload()
        self.assertEqual(project.review_status, "Pending Review")
        self.assertIsNone(project.ceo_comment)

    def test_unknown_project(self) -> None:
        with self.assertRaises(NotFoundError):
            update_review_status(self.db, 4242, "Approved", "ok", CEO)

    def test_no_transition_is_blocked(self) -> None:
        for status in ("Rejected", "Pending Review", "Approved", "Validated", "Pending Review"):
            project = update_review_status(self.db, 42, status, None, PM)
            self.assertEqual(project.review_status, status)


if __name__ == "__main__":
    unittest.main()
