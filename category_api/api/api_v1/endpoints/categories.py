"""
Source category endpoints
"""

from fastapi import APIRouter, Depends
import logging
from typing import Optional

from category_api.core.auth import require_identity
from category_api.schemas.category import CategoryListResponse, ErrorResponse, Identity
from category_api.services.category_service import CategoryResolutionService, get_category_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/health")
async def source_search_health():
    """Health check for source search endpoints"""
    return {"status": "healthy", "service": "source-search"}

@router.get(
    "/categories",
    response_model=CategoryListResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_source_categories(
    identity: Identity = Depends(require_identity),
    source: Optional[str] = None,
    service: CategoryResolutionService = Depends(get_category_service),
):
    """
    Get the category list of a content source

    Errors are raised as CategoryResolutionError and rendered by the
    application's exception handler as {"error": message}.
    """
    categories = await service.resolve(identity, source)
    return CategoryListResponse(categories=categories)
