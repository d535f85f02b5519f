"""
Liveness probe for the guide backend.

GET /health answers {"status": "ok"} whenever the process is serving
requests. It does not touch the knowledge files or the model.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from localguide.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["system"])


class HealthResponse(BaseModel):
    status: str = "ok"


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
async def health_check() -> HealthResponse:
    logger.debug("Health check endpoint called")
    return HealthResponse()
