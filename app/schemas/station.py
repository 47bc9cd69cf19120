"""Schemas for stations and station equipment (tanks, dispensers, nozzles, cameras)."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.common import CamelRequest, ORMRead


class _Audit(ORMRead):
    created_by: int | None = None
    updated_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# Stations


class StationUpdate(CamelRequest):
    station_name: str | None = None
    area_region: str | None = None
    city: str | None = None
    district: str | None = None
    street: str | None = None
    geographic_location: str | None = None
    station_type_code: str | None = None
    station_status_code: str | None = None


class StationCreate(StationUpdate):
    """stationCode and stationName are required (checked by the service)."""

    station_code: str | None = None


class StationRead(_Audit):
    id: int
    station_code: str
    station_name: str
    area_region: str | None = None
    city: str | None = None
    district: str | None = None
    street: str | None = None
    geographic_location: str | None = None
    station_type_code: str | None = None
    station_status_code: str | None = None


class BulkStationError(BaseModel):
    station_code: str | None = None
    error: str


class BulkStationResponse(BaseModel):
    """Result of POST /stations/bulk."""

    message: str
    success_count: int
    error_count: int
    data: list[StationRead]
    errors: list[BulkStationError] = Field(default_factory=list)


# Tanks


class TankUpdate(CamelRequest):
    fuel_type: str | None = None
    vendor: str | None = None
    tank_capacity: float | None = None
    tank_size: str | None = None
    tank_manufacturer: str | None = None
    tank_warranty_certificate: str | None = None
    station_code: str | None = None
    canopy_code: str | None = None


class TankCreate(TankUpdate):
    tank_code: str | None = None


class TankRead(_Audit):
    id: int
    tank_code: str
    fuel_type: str | None = None
    vendor: str | None = None
    tank_capacity: float | None = None
    tank_size: str | None = None
    tank_manufacturer: str | None = None
    tank_warranty_certificate: str | None = None
    station_code: str
    canopy_code: str | None = None


# Dispensers


class DispenserUpdate(CamelRequest):
    dispenser_name: str | None = None
    model: str | None = None
    vendor: str | None = None
    number_of_nozzles: int | None = None
    status: str | None = None
    station_code: str | None = None
    canopy_code: str | None = None


class DispenserCreate(DispenserUpdate):
    dispenser_serial_number: str | None = None


class DispenserRead(_Audit):
    id: int
    dispenser_serial_number: str
    dispenser_name: str | None = None
    model: str | None = None
    vendor: str | None = None
    number_of_nozzles: int | None = None
    status: str | None = None
    station_code: str
    canopy_code: str | None = None


# Nozzles


class NozzleUpdate(CamelRequest):
    fuel_type: str | None = None
    vendor: str | None = None
    dispenser_serial_number: str | None = None


class NozzleCreate(NozzleUpdate):
    nozzle_serial_number: str | None = None


class NozzleRead(_Audit):
    id: int
    nozzle_serial_number: str
    fuel_type: str | None = None
    vendor: str | None = None
    dispenser_serial_number: str


# Cameras


class CameraUpdate(CamelRequest):
    camera_type: str | None = None
    model: str | None = None
    size: str | None = None
    location: str | None = None
    status: str | None = None
    station_code: str | None = None


class CameraCreate(CameraUpdate):
    serial_number: str | None = None


class CameraRead(_Audit):
    id: int
    serial_number: str
    camera_type: str | None = None
    model: str | None = None
    size: str | None = None
    location: str | None = None
    status: str | None = None
    station_code: str
