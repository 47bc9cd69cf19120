"""Station routes: CRUD by id or station code, and bulk import."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.database import get_db
from app.core.errors import ValidationError
from app.schemas.auth import CurrentUser
from app.schemas.common import DataResponse, ListResponse
from app.schemas.station import (
    BulkStationError,
    BulkStationResponse,
    StationCreate,
    StationRead,
    StationUpdate,
)
from app.services import stations as station_service

router = APIRouter()

DB = Annotated[Session, Depends(get_db)]
User = Annotated[CurrentUser, Depends(get_current_user)]

_station_list = TypeAdapter(list[StationCreate])


@router.post("", response_model=DataResponse[StationRead], status_code=status.HTTP_201_CREATED)
def create_station(body: StationCreate, db: DB, user: User) -> DataResponse[StationRead]:
    station = station_service.create_station(db, body.model_dump(exclude_unset=True), user.id)
    return DataResponse(
        message="Station information created successfully",
        data=StationRead.model_validate(station),
    )


@router.post("/bulk", response_model=BulkStationResponse, status_code=status.HTTP_201_CREATED)
def bulk_create_stations(
    db: DB,
    user: User,
    body: Annotated[Any, Body()] = None,
) -> BulkStationResponse:
    """
    Insert or update many stations (by stationCode) in one transaction.

    Entries without stationCode or stationName are skipped and listed in errors.
    """
    if not isinstance(body, list):
        raise ValidationError("Expected an array of stations")
    try:
        items = _station_list.validate_python(body)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid station entry: {e.errors()[0]['msg']}") from e

    saved, errors = station_service.bulk_upsert_stations(
        db, [item.model_dump() for item in items], user.id
    )
    return BulkStationResponse(
        message=f"Processed {len(items)} stations",
        success_count=len(saved),
        error_count=len(errors),
        data=saved,
        errors=[BulkStationError(**e) for e in errors],
    )


@router.get("", response_model=ListResponse[StationRead])
def list_stations(db: DB, _user: User) -> ListResponse[StationRead]:
    data = [StationRead.model_validate(s) for s in station_service.list_stations(db)]
    return ListResponse(message="Station information retrieved successfully", data=data, count=len(data))


@router.get("/{identifier}", response_model=DataResponse[StationRead])
def get_station(identifier: str, db: DB, _user: User) -> DataResponse[StationRead]:
    """Look up a station by numeric id or by station code."""
    station = station_service.get_station(db, identifier)
    return DataResponse(
        message="Station information retrieved successfully",
        data=StationRead.model_validate(station),
    )


@router.put("/{identifier}", response_model=DataResponse[StationRead])
def update_station(identifier: str, body: StationUpdate, db: DB, user: User) -> DataResponse[StationRead]:
    station = station_service.update_station(db, identifier, body.model_dump(exclude_unset=True), user.id)
    return DataResponse(
        message="Station information updated successfully",
        data=StationRead.model_validate(station),
    )


@router.delete("/{identifier}", response_model=DataResponse[StationRead])
def delete_station(identifier: str, db: DB, _user: User) -> DataResponse[StationRead]:
    station = station_service.delete_station(db, identifier)
    return DataResponse(
        message="Station information deleted successfully",
        data=StationRead.model_validate(station),
    )
