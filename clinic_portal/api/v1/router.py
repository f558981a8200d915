"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from clinic_portal.api.v1.dependencies.
"""

from fastapi import APIRouter

from clinic_portal.api.v1.endpoints import health, people, search

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(people.router, prefix="/people", tags=["people"])
