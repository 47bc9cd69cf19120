"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    ProfileResponse,
    RegisterRequest,
    TokenClaims,
    UserPublic,
)
from app.schemas.common import CamelRequest, DataResponse, ErrorResponse, ListResponse
from app.schemas.health import HealthResponse
from app.schemas.investment_project import (
    ContractStats,
    FeasibilityStats,
    InvestmentProjectCreate,
    InvestmentProjectRead,
    InvestmentProjectUpdate,
    ReviewUpdateRequest,
)
from app.schemas.station import (
    BulkStationResponse,
    StationCreate,
    StationRead,
    StationUpdate,
)

__all__ = [
    "AuthResponse",
    "BulkStationResponse",
    "CamelRequest",
    "ContractStats",
    "CurrentUser",
    "DataResponse",
    "ErrorResponse",
    "FeasibilityStats",
    "HealthResponse",
    "InvestmentProjectCreate",
    "InvestmentProjectRead",
    "InvestmentProjectUpdate",
    "ListResponse",
    "LoginRequest",
    "ProfileResponse",
    "RegisterRequest",
    "ReviewUpdateRequest",
    "StationCreate",
    "StationRead",
    "StationUpdate",
    "TokenClaims",
    "UserPublic",
]
