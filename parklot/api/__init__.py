"""
API package for the parking-lot backend.

This package aggregates all API routers to be included in the FastAPI
application. Paths are unversioned; the kiosk and dashboard clients call
them directly.
"""

from fastapi import APIRouter, Depends
from .routes.admins import router as admins_router
from .routes.users import router as users_router
from .routes.slots import router as slots_router
from .routes.reservations import router as reservations_router
from .routes.gates import router as gates_router
from .routes.reports import router as reports_router
from .routes.health import router as health_router
from ..core.auth import require_admin
from ..core.rate_limit import rate_limit_dependency

api_router = APIRouter()
protected = [Depends(require_admin), Depends(rate_limit_dependency)]
public = [Depends(rate_limit_dependency)]
# Register/login and the per-admin endpoints resolve identity themselves.
api_router.include_router(admins_router, dependencies=public)
api_router.include_router(users_router, dependencies=protected)
api_router.include_router(slots_router, dependencies=protected)
api_router.include_router(reservations_router, dependencies=protected)
api_router.include_router(reports_router, dependencies=protected)
api_router.include_router(gates_router, dependencies=public)
api_router.include_router(health_router)
