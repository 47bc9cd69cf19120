"""
Generic CRUD for station-scoped records addressed by a natural key
(tank code, serial number). Each record kind declares which columns a client
may write; nothing outside that allow-list is ever assigned.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, NotFoundError, ValidationError, is_unique_violation
from app.models import Camera, Dispenser, Nozzle, Tank
from app.models.base import Base

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordKind:
    """Describes one table for the generic CRUD helpers."""

    model: type[Base]
    key: str
    label: str
    required: tuple[str, ...]
    required_message: str
    conflict_message: str
    updatable: frozenset[str]
    parent: str = "station_code"

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"

    def column(self, name: str):
        return getattr(self.model, name)


TANKS = RecordKind(
    model=Tank,
    key="tank_code",
    label="Tank",
    required=("tank_code", "station_code"),
    required_message="Tank code and station code are required",
    conflict_message="Tank code already exists",
    updatable=frozenset(
        {
            "fuel_type",
            "vendor",
            "tank_capacity",
            "tank_size",
            "tank_manufacturer",
            "tank_warranty_certificate",
            "station_code",
            "canopy_code",
        }
    ),
)

DISPENSERS = RecordKind(
    model=Dispenser,
    key="dispenser_serial_number",
    label="Dispenser",
    required=("dispenser_serial_number", "station_code"),
    required_message="Dispenser serial number and station code are required",
    conflict_message="Dispenser serial number already exists",
    updatable=frozenset(
        {
            "dispenser_name",
            "model",
            "vendor",
            "number_of_nozzles",
            "status",
            "station_code",
            "canopy_code",
        }
    ),
)

NOZZLES = RecordKind(
    model=Nozzle,
    key="nozzle_serial_number",
    label="Nozzle",
    required=("nozzle_serial_number", "dispenser_serial_number"),
    required_message="Nozzle serial number and dispenser serial number are required",
    conflict_message="Nozzle serial number already exists",
    updatable=frozenset({"fuel_type", "vendor", "dispenser_serial_number"}),
    parent="dispenser_serial_number",
)

CAMERAS = RecordKind(
    model=Camera,
    key="serial_number",
    label="Camera",
    required=("serial_number", "station_code"),
    required_message="Serial number and station code are required",
    conflict_message="Camera serial number already exists",
    updatable=frozenset({"camera_type", "model", "size", "location", "status", "station_code"}),
)


def require_fields(values: Mapping[str, Any], names: Iterable[str], message: str) -> None:
    """Raise ValidationError unless every named value is present and non-empty."""
    for name in names:
        value = values.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(message)


def apply_updates(row: Base, changes: Mapping[str, Any], allowed: frozenset[str]) -> list[str]:
    """Assign allow-listed changes to row; return the column names written."""
    written = []
    for name, value in changes.items():
        if name not in allowed:
            continue
        setattr(row, name, value)
        written.append(name)
    return written


def commit_row(db: Session, row: Base, conflict_message: str) -> Base:
    """Commit the session and refresh row; unique violations become ConflictError."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e):
            raise ConflictError(conflict_message) from e
        raise
    db.refresh(row)
    return row


def create_record(
    db: Session,
    kind: RecordKind,
    values: Mapping[str, Any],
    user_id: int | None,
) -> Base:
    require_fields(values, kind.required, kind.required_message)
    allowed = kind.updatable | {kind.key}
    row = kind.model(created_by=user_id, updated_by=user_id)
    apply_updates(row, values, allowed)
    db.add(row)
    commit_row(db, row, kind.conflict_message)
    logger.info("%s created: %s=%s", kind.label, kind.key, values.get(kind.key))
    return row


def list_records(db: Session, kind: RecordKind) -> list[Base]:
    return db.query(kind.model).order_by(kind.model.created_at.desc(), kind.model.id.desc()).all()


def list_by_parent(db: Session, kind: RecordKind, parent_value: str) -> list[Base]:
    """Rows belonging to one station (or dispenser, for nozzles), newest first."""
    return (
        db.query(kind.model)
        .filter(kind.column(kind.parent) == parent_value)
        .order_by(kind.model.created_at.desc(), kind.model.id.desc())
        .all()
    )


def get_record(db: Session, kind: RecordKind, key_value: str) -> Base:
    row = db.query(kind.model).filter(kind.column(kind.key) == key_value).first()
    if row is None:
        raise NotFoundError(kind.not_found_message)
    return row


def update_record(
    db: Session,
    kind: RecordKind,
    key_value: str,
    changes: Mapping[str, Any],
    user_id: int | None,
) -> Base:
    """
    Partial update: None values leave the stored column unchanged, so a body
    with no usable fields only refreshes updated_by / updated_at.
    """
    row = get_record(db, kind, key_value)
    present = {k: v for k, v in changes.items() if v is not None}
    apply_updates(row, present, kind.updatable)
    row.updated_by = user_id
    row.updated_at = func.now()
    return commit_row(db, row, kind.conflict_message)


def delete_record(db: Session, kind: RecordKind, key_value: str) -> Base:
    """Delete and return the row (detached, with its loaded values)."""
    row = get_record(db, kind, key_value)
    db.delete(row)
    db.commit()
    logger.info("%s deleted: %s=%s", kind.label, kind.key, key_value)
    return row
