"""
Main API router that includes all endpoint routers
"""

from fastapi import APIRouter

from category_api.api.api_v1.endpoints import categories

# Create main API router
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(categories.router, prefix="/source-search", tags=["source-search"])
