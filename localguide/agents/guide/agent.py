"""
Guide generation step.

Single-shot text generation: one augmented prompt in, one answer out.
The prompt already carries the full knowledge table, so no tools or
grounding are configured.
"""

import asyncio
import logging
from typing import Optional

from google import genai

from localguide.agents.guide.retry import (
    DEFAULT_INITIAL_DELAY_MS,
    DEFAULT_MAX_ATTEMPTS,
    generate_with_retry,
)
from localguide.config import settings
from localguide.errors import GenerationError, GenerationTimeoutError

logger = logging.getLogger(__name__)


class GeminiGenerator:
    """
    Thin wrapper over the Google Gen AI SDK async client.

    The client is created lazily on the first call so importing the app
    never needs network access.
    """

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self._api_key = api_key if api_key is not None else settings.GOOGLE_API_KEY
        self.model = model or settings.GEMINI_MODEL
        self._client: Optional[genai.Client] = None

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self._api_key:
                raise GenerationError(
                    "GOOGLE_API_KEY is not configured. "
                    "Please set it in your .env file."
                )
            self._client = genai.Client(api_key=self._api_key)
            logger.info(f"Gemini client initialized successfully (model={self.model})")
        return self._client

    async def generate(self, prompt: str) -> str:
        """Make one generation call and return the response text."""
        client = self._get_client()
        response = await client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
        )

        text = response.text
        if not text:
            raise GenerationError("Model returned an empty response")
        return text


async def run_generation(
    prompt: str,
    generator: GeminiGenerator,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    initial_delay_ms: int = DEFAULT_INITIAL_DELAY_MS,
    timeout_seconds: Optional[float] = None,
) -> str:
    """
    Generate an answer with retry and an optional overall timeout.

    The timeout covers every attempt plus the backoff waits.

    Raises:
        GenerationTimeoutError: No answer within timeout_seconds
        Exception: Provider errors after retry handling
    """
    call = generate_with_retry(
        generator.generate,
        prompt,
        max_attempts=max_attempts,
        initial_delay_ms=initial_delay_ms,
    )

    if not timeout_seconds:
        return await call

    try:
        return await asyncio.wait_for(call, timeout=timeout_seconds)
    except asyncio.TimeoutError as e:
        logger.error(f"Generation timed out after {timeout_seconds:g}s")
        raise GenerationTimeoutError(timeout_seconds) from e
