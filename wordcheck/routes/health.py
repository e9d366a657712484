"""
Health check endpoint for monitoring.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from wordcheck.routes import get_spellcheck_context
from wordcheck.schemas.spellcheck import HealthResponse
from wordcheck.services.context import SpellCheckContext
from wordcheck.utils.logger import get_logger

logger = get_logger("health")
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check that the dictionary is loaded",
    responses={
        200: {"description": "Service is healthy"},
        503: {"description": "Dictionary is not loaded"}
    }
)
async def health_check(
    context: SpellCheckContext = Depends(get_spellcheck_context)
) -> HealthResponse:
    logger.debug("Health check: dictionary loaded")
    return HealthResponse(
        status="healthy",
        dictionary_words=context.word_count,
        timestamp=datetime.now(timezone.utc)
    )
