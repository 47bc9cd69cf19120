"""Investment project routes: CRUD, dashboard stats and the PM/CEO review endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.common import DataResponse, ListResponse
from app.schemas.investment_project import (
    ContractStats,
    FeasibilityStats,
    InvestmentProjectCreate,
    InvestmentProjectRead,
    InvestmentProjectUpdate,
    ReviewUpdateRequest,
)
from app.services import investment_projects as projects
from app.services.review import update_review_status

router = APIRouter()

DB = Annotated[Session, Depends(get_db)]
User = Annotated[CurrentUser, Depends(get_current_user)]
DepartmentType = Annotated[str | None, Query(alias="departmentType")]


def _list(message: str, rows) -> ListResponse[InvestmentProjectRead]:
    data = [InvestmentProjectRead.model_validate(r) for r in rows]
    return ListResponse(message=message, data=data, count=len(data))


@router.post("", response_model=DataResponse[InvestmentProjectRead], status_code=status.HTTP_201_CREATED)
def create_project(body: InvestmentProjectCreate, db: DB, user: User) -> DataResponse[InvestmentProjectRead]:
    project = projects.create_project(db, body.model_dump(exclude_unset=True), user.id)
    return DataResponse(
        message="Investment project created successfully",
        data=InvestmentProjectRead.model_validate(project),
    )


@router.get("", response_model=ListResponse[InvestmentProjectRead])
def list_projects(db: DB, _user: User, department_type: DepartmentType = None) -> ListResponse[InvestmentProjectRead]:
    return _list("Projects retrieved", projects.list_projects(db, department_type=department_type))


@router.get("/station/{station_code}", response_model=ListResponse[InvestmentProjectRead])
def list_projects_by_station(
    station_code: str,
    db: DB,
    _user: User,
    department_type: DepartmentType = None,
) -> ListResponse[InvestmentProjectRead]:
    rows = projects.list_projects(db, department_type=department_type, station_code=station_code)
    return _list("Projects retrieved", rows)


@router.get("/feasibility-stats", response_model=DataResponse[FeasibilityStats])
def get_feasibility_stats(db: DB, _user: User, department_type: DepartmentType = None) -> DataResponse[FeasibilityStats]:
    """Counts of projects by feasibility_status (approved, signed_contract, rejected)."""
    stats = projects.feasibility_stats(db, department_type=department_type)
    return DataResponse(message="Stats retrieved", data=FeasibilityStats(**stats))


@router.get("/contract-stats", response_model=DataResponse[ContractStats])
def get_contract_stats(db: DB, _user: User, department_type: DepartmentType = None) -> DataResponse[ContractStats]:
    """Counts of projects by contract_status (contracted, need_contract)."""
    stats = projects.contract_stats(db, department_type=department_type)
    return DataResponse(message="Contract stats retrieved", data=ContractStats(**stats))


@router.get("/{project_id}", response_model=DataResponse[InvestmentProjectRead])
def get_project(project_id: int, db: DB, _user: User) -> DataResponse[InvestmentProjectRead]:
    project = projects.get_project(db, project_id)
    return DataResponse(message="Project retrieved", data=InvestmentProjectRead.model_validate(project))


@router.put("/{project_id}", response_model=DataResponse[InvestmentProjectRead])
def update_project(
    project_id: int,
    body: InvestmentProjectUpdate,
    db: DB,
    user: User,
) -> DataResponse[InvestmentProjectRead]:
    """Partial update: only keys present in the body are written."""
    project = projects.update_project(db, project_id, body.model_dump(exclude_unset=True), user.id)
    return DataResponse(message="Project updated", data=InvestmentProjectRead.model_validate(project))


@router.patch("/{project_id}/review", response_model=DataResponse[InvestmentProjectRead])
def review_project(
    project_id: int,
    body: ReviewUpdateRequest,
    db: DB,
    user: User,
) -> DataResponse[InvestmentProjectRead]:
    """
    Set review_status and record the caller's comment.

    A caller with role 'ceo' writes ceo_comment; any other role writes pm_comment.
    """
    project = update_review_status(db, project_id, body.review_status, body.comment, user)
    return DataResponse(
        message="Project review status updated",
        data=InvestmentProjectRead.model_validate(project),
    )


@router.delete("/{project_id}", response_model=DataResponse[InvestmentProjectRead])
def delete_project(project_id: int, db: DB, _user: User) -> DataResponse[InvestmentProjectRead]:
    project = projects.delete_project(db, project_id)
    return DataResponse(message="Project deleted", data=InvestmentProjectRead.model_validate(project))
