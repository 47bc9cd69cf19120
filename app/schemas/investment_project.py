"""Schemas for investment projects, their review workflow and stats."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from app.schemas.common import CamelRequest, ORMRead


class InvestmentProjectFields(CamelRequest):
    """Writable project fields shared by create and update bodies."""

    department_type: str | None = None
    request_type: str | None = None
    project_name: str | None = None
    project_code: str | None = None
    city: str | None = None
    district: str | None = None
    area: float | None = None
    project_status: str | None = None
    contract_type: str | None = None
    google_location: str | None = None
    priority_level: str | None = None
    order_date: date | None = None
    request_sender: str | None = None
    super_market: int | None = None
    fuel_station: int | None = None
    kiosks: int | None = None
    retail_shop: int | None = None
    drive_through: int | None = None
    element_area: float | None = None
    owner_name: str | None = None
    owner_contact_no: str | None = None
    id_no: str | None = None
    national_address: str | None = None
    email: str | None = None
    owner_type: str | None = None
    design_file_url: str | None = None
    documents_url: str | None = None
    autocad_url: str | None = None
    station_code: str | None = None
    feasibility_status: str | None = None
    contract_status: str | None = None


class InvestmentProjectCreate(InvestmentProjectFields):
    """Body of POST /investment-projects. projectName, projectCode and departmentType are required."""


class InvestmentProjectUpdate(InvestmentProjectFields):
    """Body of PUT /investment-projects/{id}; only keys present in the body are written."""


class ReviewUpdateRequest(CamelRequest):
    """Body of PATCH /investment-projects/{id}/review."""

    review_status: str | None = Field(default=None, description="Pending Review | Validated | Approved | Rejected")
    comment: str | None = None


class InvestmentProjectRead(ORMRead):
    id: int
    department_type: str
    request_type: str | None = None
    project_name: str
    project_code: str
    city: str | None = None
    district: str | None = None
    area: float | None = None
    project_status: str | None = None
    contract_type: str | None = None
    google_location: str | None = None
    priority_level: str | None = None
    order_date: date | None = None
    request_sender: str | None = None
    super_market: int | None = None
    fuel_station: int | None = None
    kiosks: int | None = None
    retail_shop: int | None = None
    drive_through: int | None = None
    element_area: float | None = None
    owner_name: str | None = None
    owner_contact_no: str | None = None
    id_no: str | None = None
    national_address: str | None = None
    email: str | None = None
    owner_type: str | None = None
    design_file_url: str | None = None
    documents_url: str | None = None
    autocad_url: str | None = None
    station_code: str | None = None
    feasibility_status: str | None = None
    contract_status: str | None = None
    review_status: str
    pm_comment: str | None = None
    ceo_comment: str | None = None
    created_by: int | None = None
    updated_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class FeasibilityStats(BaseModel):
    total: int
    approved: int
    signed_contract: int
    rejected: int


class ContractStats(BaseModel):
    total: int
    contracted: int
    need_contract: int
