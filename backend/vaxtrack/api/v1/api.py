"""Module: api."""

# backend/vaxtrack/api/v1/api.py
from fastapi import APIRouter

# Operational routes.
from vaxtrack.api.v1.routes.health import router as health_router

# Vaccination tracker routes consumed by the WhatsApp routing layer.
from vaxtrack.api.v1.routes.vaccinations import router as vaccinations_router
from vaxtrack.api.v1.routes.reminders import router as reminders_router
from vaxtrack.api.v1.routes.vaccines import router as vaccines_router
from vaxtrack.api.v1.routes.preferences import router as preferences_router


api_router = APIRouter()

# Register operational endpoints first for service-level concerns.
api_router.include_router(health_router, prefix="/health", tags=["health"])

# All vaccination endpoints share one prefix.
api_router.include_router(vaccinations_router, prefix="/vaccination", tags=["vaccination"])
api_router.include_router(reminders_router, prefix="/vaccination", tags=["reminders"])
api_router.include_router(vaccines_router, prefix="/vaccination", tags=["catalog"])
api_router.include_router(preferences_router, prefix="/vaccination", tags=["preferences"])
