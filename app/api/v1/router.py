"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import admin, athletes, auth, logs

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    logs.router, prefix="/logs", tags=["Training logs"]
)
api_router.include_router(
    athletes.router, prefix="/athletes", tags=["Athletes"]
)
api_router.include_router(
    admin.router, prefix="/admin", tags=["Administration"]
)
