"""ORM models for stations and the equipment installed at them."""

from sqlalchemy import Column, Integer, Numeric, String, Text

from app.models.base import AuditMixin, Base


class Station(AuditMixin, Base):
    """Master record for a fuel station, addressed by id or station_code."""

    __tablename__ = "station_information"

    id = Column(Integer, primary_key=True, autoincrement=True)
    station_code = Column(String(50), nullable=False, unique=True, index=True)
    station_name = Column(String(255), nullable=False)
    area_region = Column(String(255), nullable=True)
    city = Column(String(255), nullable=True)
    district = Column(String(255), nullable=True)
    street = Column(String(255), nullable=True)
    geographic_location = Column(Text, nullable=True)
    station_type_code = Column(String(50), nullable=True)
    station_status_code = Column(String(50), nullable=True)


class Tank(AuditMixin, Base):
    __tablename__ = "tanks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tank_code = Column(String(50), nullable=False, unique=True, index=True)
    fuel_type = Column(String(50), nullable=True)
    vendor = Column(String(255), nullable=True)
    tank_capacity = Column(Numeric(12, 2), nullable=True)
    tank_size = Column(String(100), nullable=True)
    tank_manufacturer = Column(String(255), nullable=True)
    tank_warranty_certificate = Column(Text, nullable=True)
    station_code = Column(String(50), nullable=False, index=True)
    canopy_code = Column(String(50), nullable=True)


class Dispenser(AuditMixin, Base):
    __tablename__ = "dispensers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    dispenser_serial_number = Column(String(100), nullable=False, unique=True, index=True)
    dispenser_name = Column(String(255), nullable=True)
    model = Column(String(255), nullable=True)
    vendor = Column(String(255), nullable=True)
    number_of_nozzles = Column(Integer, nullable=True)
    status = Column(String(50), nullable=True)
    station_code = Column(String(50), nullable=False, index=True)
    canopy_code = Column(String(50), nullable=True)


class Nozzle(AuditMixin, Base):
    """Nozzle attached to a dispenser (addressed through the dispenser serial, not a station)."""

    __tablename__ = "nozzles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nozzle_serial_number = Column(String(100), nullable=False, unique=True, index=True)
    fuel_type = Column(String(50), nullable=True)
    vendor = Column(String(255), nullable=True)
    dispenser_serial_number = Column(String(100), nullable=False, index=True)


class Camera(AuditMixin, Base):
    __tablename__ = "cameras"

    id = Column(Integer, primary_key=True, autoincrement=True)
    serial_number = Column(String(100), nullable=False, unique=True, index=True)
    camera_type = Column(String(100), nullable=True)
    model = Column(String(255), nullable=True)
    size = Column(String(100), nullable=True)
    location = Column(String(255), nullable=True)
    status = Column(String(50), nullable=True)
    station_code = Column(String(50), nullable=False, index=True)
