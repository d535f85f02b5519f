"""
Category listing endpoint.

Endpoints:
- GET /categories - List category keys available in the data directory

Categories are defined by the filesystem: a key is listed when both
<key>.txt and <key>.csv exist. The listing is recomputed per request.
"""

from fastapi import APIRouter, status

from localguide.config import settings
from localguide.schemas.categories import CategoryListResponse
from localguide.services.knowledge_service import list_categories
from localguide.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get(
    "",
    response_model=CategoryListResponse,
    status_code=status.HTTP_200_OK,
    summary="List available categories",
)
async def list_categories_endpoint() -> CategoryListResponse:
    categories = list_categories(settings.DATA_DIR)
    logger.info(f"Listing {len(categories)} categories")
    return CategoryListResponse(categories=categories)
