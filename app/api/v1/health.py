"""Health check endpoint with database connectivity check."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: Session = Depends(get_db)) -> JSONResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring; 503 when the database is unreachable.
    """
    connected = check_db_connected(db)
    body = HealthResponse(
        status="healthy" if connected else "unhealthy",
        environment=settings.APP_ENV,
        database="connected" if connected else "disconnected",
    )
    return JSONResponse(status_code=200 if connected else 503, content=body.model_dump())
