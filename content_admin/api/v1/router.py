"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags.
"""

from fastapi import APIRouter

from content_admin.api.v1.endpoints import admin, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
