"""
Routers for station equipment. Tanks, dispensers, nozzles and cameras share
the same shape (create, list, list by parent, get/update/delete by natural
key), so one factory builds a router per record kind.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.common import DataResponse, ListResponse
from app.schemas.station import (
    CameraCreate,
    CameraRead,
    CameraUpdate,
    DispenserCreate,
    DispenserRead,
    DispenserUpdate,
    NozzleCreate,
    NozzleRead,
    NozzleUpdate,
    TankCreate,
    TankRead,
    TankUpdate,
)
from app.services import records
from app.services.records import RecordKind

DB = Annotated[Session, Depends(get_db)]
User = Annotated[CurrentUser, Depends(get_current_user)]


def build_router(
    kind: RecordKind,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    read_schema: type[BaseModel],
    plural: str,
    parent_path: str = "station",
) -> APIRouter:
    """Create the CRUD router for one record kind; plural is used in response messages."""
    router = APIRouter()
    label = kind.label

    def read(row):
        return read_schema.model_validate(row)

    def listing(rows) -> ListResponse:
        data = [read(r) for r in rows]
        return ListResponse(message=f"{plural} retrieved successfully", data=data, count=len(data))

    @router.post("", response_model=DataResponse[read_schema], status_code=status.HTTP_201_CREATED)
    def create(body: create_schema, db: DB, user: User) -> DataResponse:
        row = records.create_record(db, kind, body.model_dump(exclude_unset=True), user.id)
        return DataResponse(message=f"{label} created successfully", data=read(row))

    @router.get("", response_model=ListResponse[read_schema])
    def list_all(db: DB, _user: User) -> ListResponse:
        return listing(records.list_records(db, kind))

    @router.get(f"/{parent_path}/{{parent}}", response_model=ListResponse[read_schema])
    def list_by_parent(parent: str, db: DB, _user: User) -> ListResponse:
        return listing(records.list_by_parent(db, kind, parent))

    @router.get("/{key}", response_model=DataResponse[read_schema])
    def get_one(key: str, db: DB, _user: User) -> DataResponse:
        return DataResponse(message=f"{label} retrieved successfully", data=read(records.get_record(db, kind, key)))

    @router.put("/{key}", response_model=DataResponse[read_schema])
    def update(key: str, body: update_schema, db: DB, user: User) -> DataResponse:
        row = records.update_record(db, kind, key, body.model_dump(exclude_unset=True), user.id)
        return DataResponse(message=f"{label} updated successfully", data=read(row))

    @router.delete("/{key}", response_model=DataResponse[read_schema])
    def delete(key: str, db: DB, _user: User) -> DataResponse:
        row = records.delete_record(db, kind, key)
        return DataResponse(message=f"{label} deleted successfully", data=read(row))

    return router


tanks_router = build_router(records.TANKS, TankCreate, TankUpdate, TankRead, "Tanks")
dispensers_router = build_router(
    records.DISPENSERS, DispenserCreate, DispenserUpdate, DispenserRead, "Dispensers"
)
nozzles_router = build_router(
    records.NOZZLES, NozzleCreate, NozzleUpdate, NozzleRead, "Nozzles", parent_path="dispenser"
)
cameras_router = build_router(records.CAMERAS, CameraCreate, CameraUpdate, CameraRead, "Cameras")
