"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import auth, health, investment_projects, stations
from app.api.v1.equipment import cameras_router, dispensers_router, nozzles_router, tanks_router

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(stations.router, prefix="/stations", tags=["stations"])
router.include_router(tanks_router, prefix="/tanks", tags=["tanks"])
router.include_router(dispensers_router, prefix="/dispensers", tags=["dispensers"])
router.include_router(nozzles_router, prefix="/nozzles", tags=["nozzles"])
router.include_router(cameras_router, prefix="/cameras", tags=["cameras"])
router.include_router(
    investment_projects.router,
    prefix="/investment-projects",
    tags=["investment-projects"],
)
