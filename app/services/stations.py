"""Station master records: CRUD addressed by id or station code, and bulk import."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import String, cast, func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import InternalError, NotFoundError, ValidationError
from app.models import Station
from app.schemas.station import StationRead
from app.services.records import apply_updates, commit_row, require_fields

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "Station code and station name are required"
CONFLICT_MESSAGE = "Station code already exists"

UPDATABLE_FIELDS = frozenset(
    {
        "station_name",
        "area_region",
        "city",
        "district",
        "street",
        "geographic_location",
        "station_type_code",
        "station_status_code",
    }
)
CREATE_FIELDS = UPDATABLE_FIELDS | {"station_code"}


def _match(identifier: str):
    """Filter matching a station by numeric id or by station code."""
    return or_(cast(Station.id, String) == identifier, Station.station_code == identifier)


def create_station(db: Session, values: Mapping[str, Any], user_id: int | None) -> Station:
    require_fields(values, ("station_code", "station_name"), REQUIRED_MESSAGE)
    station = Station(created_by=user_id, updated_by=user_id)
    apply_updates(station, values, CREATE_FIELDS)
    db.add(station)
    commit_row(db, station, CONFLICT_MESSAGE)
    logger.info("Station created: code=%s", station.station_code)
    return station


def list_stations(db: Session) -> list[Station]:
    return db.query(Station).order_by(Station.created_at.desc(), Station.id.desc()).all()


def get_station(db: Session, identifier: str) -> Station:
    station = db.query(Station).filter(_match(identifier)).first()
    if station is None:
        raise NotFoundError("Station not found")
    return station


def update_station(
    db: Session,
    identifier: str,
    changes: Mapping[str, Any],
    user_id: int | None,
) -> Station:
    """Partial update; None values keep the stored value."""
    station = get_station(db, identifier)
    apply_updates(station, {k: v for k, v in changes.items() if v is not None}, UPDATABLE_FIELDS)
    station.updated_by = user_id
    station.updated_at = func.now()
    return commit_row(db, station, CONFLICT_MESSAGE)


def delete_station(db: Session, identifier: str) -> Station:
    station = get_station(db, identifier)
    db.delete(station)
    db.commit()
    logger.info("Station deleted: code=%s", station.station_code)
    return station


def bulk_upsert_stations(
    db: Session,
    items: Sequence[Mapping[str, Any]],
    user_id: int | None,
) -> tuple[list[StationRead], list[dict[str, str | None]]]:
    """
    Insert or update (by station_code) each item in one transaction.

    Items missing code or name, and items whose row fails to write, are
    reported in the returned error list and skipped; each item runs in its
    own savepoint so a failure does not discard the others. Any other error
    rolls back the whole batch.
    """
    saved: list[StationRead] = []
    errors: list[dict[str, str | None]] = []
    try:
        for item in items:
            code = item.get("station_code")
            try:
                require_fields(item, ("station_code", "station_name"), "Station code and name are required")
            except ValidationError as e:
                errors.append({"station_code": code, "error": e.message})
                continue
            try:
                with db.begin_nested():
                    station = db.query(Station).filter(Station.station_code == code).first()
                    if station is None:
                        station = Station(created_by=user_id)
                        db.add(station)
                    # Bulk import replaces every column, including with nulls.
                    apply_updates(station, {name: item.get(name) for name in CREATE_FIELDS}, CREATE_FIELDS)
                    station.updated_by = user_id
                    db.flush()
                    db.refresh(station)
                    # Snapshot per item: a repeated code later in the batch mutates the same row.
                    saved.append(StationRead.model_validate(station))
            except SQLAlchemyError as e:
                logger.warning("Bulk station import: %s failed: %s", code, e)
                errors.append({"station_code": code, "error": str(getattr(e, "orig", e))})
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Bulk station import failed; rolled back")
        raise InternalError("Internal server error during bulk import") from e
    logger.info("Bulk station import: saved=%s errors=%s", len(saved), len(errors))
    return saved, errors
