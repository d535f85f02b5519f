"""
Chat Service - retrieval -> augmentation -> generation -> backlinks.

Per request:
1. Load the category template and knowledge table (fresh from disk)
2. Merge table + user question into the template
3. Generate the answer with Gemini (503 retry + timeout)
4. Extract source links for entities mentioned in the answer
5. Return {text, sources}

There is no partial success. Any failure in any stage is logged with the
category and stage, and converted into an apologetic text with empty
sources and a 500 status.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fastapi import status

from localguide.agents.guide.agent import GeminiGenerator, run_generation
from localguide.config import settings
from localguide.errors import (
    STAGE_AUGMENT,
    STAGE_EXTRACT,
    STAGE_GENERATE,
    STAGE_LOAD,
)
from localguide.schemas.chat import ChatResponse
from localguide.services.backlink_service import DEFAULT_MATCHER, EntityMatcher, extract_sources
from localguide.services.knowledge_service import KnowledgeCache, load_knowledge
from localguide.services.prompt_service import augment_prompt
from localguide.utils.constants import APOLOGY_TEMPLATE

logger = logging.getLogger(__name__)

# Shared generator (lazy Gemini client) and opt-in knowledge cache
_generator: Optional[GeminiGenerator] = None
knowledge_cache = KnowledgeCache()


def get_generator() -> GeminiGenerator:
    global _generator

    if _generator is None:
        _generator = GeminiGenerator()
    return _generator


@dataclass
class ChatResult:
    """HTTP status code plus the response body for one chat request."""
    status_code: int
    response: ChatResponse


def build_error_response(error: BaseException) -> ChatResponse:
    return ChatResponse(text=APOLOGY_TEMPLATE.format(error=error), sources=[])


async def handle_chat(
    category: str,
    user_query: str,
    generator: Optional[GeminiGenerator] = None,
    data_dir: Optional[Path] = None,
    matcher: EntityMatcher = DEFAULT_MATCHER,
    use_cache: Optional[bool] = None,
) -> ChatResult:
    """
    Answer one user question for a category.

    Args:
        category: Category key selecting <category>.txt / <category>.csv
        user_query: The user's question
        generator: Model wrapper (defaults to the shared Gemini generator)
        data_dir: Knowledge directory (defaults to settings.DATA_DIR)
        matcher: Entity name matching strategy for backlinks
        use_cache: Use the knowledge cache (defaults to settings.KNOWLEDGE_CACHE_ENABLED)

    Returns:
        ChatResult with status 200 and the answer, or 500 and the apology
    """
    logger.info(f"Received message about '{category}': {user_query[:100]}")

    generator = generator or get_generator()
    data_dir = data_dir if data_dir is not None else settings.DATA_DIR
    if use_cache is None:
        use_cache = settings.KNOWLEDGE_CACHE_ENABLED

    stage = STAGE_LOAD
    try:
        # === RETRIEVAL ===
        if use_cache:
            knowledge = await knowledge_cache.load(category, data_dir, settings.PRICE_TIER_COLUMN)
        else:
            knowledge = await load_knowledge(category, data_dir, settings.PRICE_TIER_COLUMN)

        # === AUGMENTATION ===
        stage = STAGE_AUGMENT
        prompt = augment_prompt(knowledge.template, knowledge.rows, user_query)
        logger.info(f"Final prompt ready ({len(prompt)} chars)")

        # === GENERATION ===
        stage = STAGE_GENERATE
        answer = await run_generation(
            prompt,
            generator,
            max_attempts=settings.MAX_GENERATION_ATTEMPTS,
            initial_delay_ms=settings.INITIAL_RETRY_DELAY_MS,
            timeout_seconds=settings.REQUEST_TIMEOUT_SECONDS,
        )
        logger.info(f"AI response received ({len(answer)} chars)")

        # === BACKLINKS ===
        stage = STAGE_EXTRACT
        sources = extract_sources(answer, knowledge.rows, matcher=matcher)

    except Exception as e:
        failed_stage = getattr(e, "stage", None) or stage
        logger.error(
            f"Error in chat pipeline (category='{category}', stage={failed_stage}): {e}",
            exc_info=True,
        )
        return ChatResult(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            response=build_error_response(e),
        )

    return ChatResult(
        status_code=status.HTTP_200_OK,
        response=ChatResponse(text=answer, sources=sources),
    )
