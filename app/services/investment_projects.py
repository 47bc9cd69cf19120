"""CRUD and dashboard stats for investment projects."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationError
from app.models.investment_project import InvestmentProject
from app.services.records import apply_updates, commit_row, require_fields

logger = logging.getLogger(__name__)

CONFLICT_MESSAGE = "Project code already exists"
REQUIRED_FIELDS = ("project_name", "project_code", "department_type")

# Columns writable through create/update. Review fields are excluded: they are
# written only by the review workflow (app.services.review).
UPDATABLE_FIELDS = frozenset(
    {
        "department_type",
        "request_type",
        "project_name",
        "project_code",
        "city",
        "district",
        "area",
        "project_status",
        "contract_type",
        "google_location",
        "priority_level",
        "order_date",
        "request_sender",
        "super_market",
        "fuel_station",
        "kiosks",
        "retail_shop",
        "drive_through",
        "element_area",
        "owner_name",
        "owner_contact_no",
        "id_no",
        "national_address",
        "email",
        "owner_type",
        "design_file_url",
        "documents_url",
        "autocad_url",
        "station_code",
        "feasibility_status",
        "contract_status",
    }
)

# Defaults applied on create when the client omits (or nulls) the value.
CREATE_DEFAULTS: dict[str, Any] = {
    "area": 0,
    "super_market": 0,
    "fuel_station": 0,
    "kiosks": 0,
    "retail_shop": 0,
    "drive_through": 0,
    "element_area": 0,
    "owner_type": "individual",
}


def create_project(db: Session, values: Mapping[str, Any], user_id: int | None) -> InvestmentProject:
    require_fields(
        values,
        REQUIRED_FIELDS,
        "Project name, code and department type are required",
    )
    data = dict(values)
    for name, default in CREATE_DEFAULTS.items():
        if data.get(name) in (None, ""):
            data[name] = default
    project = InvestmentProject(created_by=user_id, updated_by=user_id)
    apply_updates(project, data, UPDATABLE_FIELDS)
    db.add(project)
    commit_row(db, project, CONFLICT_MESSAGE)
    logger.info("Investment project created: id=%s code=%s", project.id, project.project_code)
    return project


def list_projects(
    db: Session,
    department_type: str | None = None,
    station_code: str | None = None,
) -> list[InvestmentProject]:
    """Projects newest first, optionally narrowed to a department and/or station."""
    query = db.query(InvestmentProject)
    if station_code is not None:
        query = query.filter(InvestmentProject.station_code == station_code)
    if department_type:
        query = query.filter(InvestmentProject.department_type == department_type)
    return query.order_by(InvestmentProject.created_at.desc(), InvestmentProject.id.desc()).all()


def get_project(db: Session, project_id: int) -> InvestmentProject:
    project = db.get(InvestmentProject, project_id)
    if project is None:
        raise NotFoundError("Project not found")
    return project


def update_project(
    db: Session,
    project_id: int,
    changes: Mapping[str, Any],
    user_id: int | None,
) -> InvestmentProject:
    """Write only the allow-listed keys present in changes."""
    writable = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
    if not writable:
        raise ValidationError("No fields to update")
    require_fields(
        writable,
        [name for name in REQUIRED_FIELDS if name in writable],
        "Project name, code and department type cannot be empty",
    )
    for name, default in CREATE_DEFAULTS.items():
        if name in writable and writable[name] is None:
            writable[name] = default
    project = get_project(db, project_id)
    apply_updates(project, writable, UPDATABLE_FIELDS)
    project.updated_by = user_id
    project.updated_at = func.now()
    return commit_row(db, project, CONFLICT_MESSAGE)


def delete_project(db: Session, project_id: int) -> InvestmentProject:
    project = get_project(db, project_id)
    db.delete(project)
    db.commit()
    logger.info("Investment project deleted: id=%s", project_id)
    return project


def _count_by(db: Session, column, buckets: Mapping[str, str], department_type: str | None) -> dict[str, int]:
    """COUNT(*) plus one filtered count per bucket value of column."""
    selects = [func.count().label("total")]
    selects.extend(
        func.count().filter(column == value).label(name) for name, value in buckets.items()
    )
    query = db.query(*selects).select_from(InvestmentProject)
    if department_type:
        query = query.filter(InvestmentProject.department_type == department_type)
    row = query.one()
    return {name: int(row._mapping[name] or 0) for name in ("total", *buckets)}


def feasibility_stats(db: Session, department_type: str | None = None) -> dict[str, int]:
    return _count_by(
        db,
        InvestmentProject.feasibility_status,
        {"approved": "approved", "signed_contract": "signed_contract", "rejected": "rejected"},
        department_type,
    )


def contract_stats(db: Session, department_type: str | None = None) -> dict[str, int]:
    return _count_by(
        db,
        InvestmentProject.contract_status,
        {"contracted": "contracted", "need_contract": "need_contract"},
        department_type,
    )
