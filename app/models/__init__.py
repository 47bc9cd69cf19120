"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.investment_project import InvestmentProject
from app.models.station import Camera, Dispenser, Nozzle, Station, Tank
from app.models.user import User

__all__ = [
    "Base",
    "Camera",
    "Dispenser",
    "InvestmentProject",
    "Nozzle",
    "Station",
    "Tank",
    "User",
]
