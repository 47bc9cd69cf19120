"""
Review workflow for investment projects.

review_status is a flat field: any of the four statuses may be written at any
time, by any authenticated user. The caller's role only decides which comment
column receives the comment: 'ceo' writes ceo_comment, every other role
writes pm_comment. The other comment column is never touched.
"""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationError
from app.models.investment_project import REVIEW_STATUSES, InvestmentProject
from app.schemas.auth import CurrentUser

logger = logging.getLogger(__name__)

CEO_ROLE = "ceo"


def validate_review_status(status: str | None) -> str:
    if not status:
        raise ValidationError("Review status is required")
    if status not in REVIEW_STATUSES:
        raise ValidationError(
            f"Invalid review status. Allowed values: {', '.join(REVIEW_STATUSES)}"
        )
    return status


def comment_column_for_role(role: str | None) -> str:
    """Column that receives the review comment for a caller with this role."""
    return "ceo_comment" if role == CEO_ROLE else "pm_comment"


def update_review_status(
    db: Session,
    project_id: int,
    new_status: str | None,
    comment: str | None,
    caller: CurrentUser,
) -> InvestmentProject:
    """Write review_status and the caller's comment column; return the updated project."""
    status = validate_review_status(new_status)

    project = db.get(InvestmentProject, project_id)
    if project is None:
        raise NotFoundError("Project not found")

    previous = project.review_status
    column = comment_column_for_role(caller.role)
    project.review_status = status
    setattr(project, column, comment)
    project.updated_by = caller.id
    project.updated_at = func.now()
    db.commit()
    db.refresh(project)

    logger.info(
        "Review status updated: project_id=%s %s -> %s by user_id=%s (%s)",
        project_id,
        previous,
        status,
        caller.id,
        column,
    )
    return project
