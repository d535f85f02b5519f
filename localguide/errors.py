"""
Exception types raised by the chat pipeline.

Every error carries the pipeline stage it was raised in so the request
handler can log it with enough context to diagnose.
"""

from typing import Optional

STAGE_LOAD = "load"
STAGE_AUGMENT = "augment"
STAGE_GENERATE = "generate"
STAGE_EXTRACT = "extract"


class GuideError(Exception):
    """Base class for chat pipeline failures."""

    stage: Optional[str] = None

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class CategoryNotFoundError(GuideError):
    """The category key does not resolve to a template + table pair."""

    stage = STAGE_LOAD

    def __init__(self, category: str, reason: str):
        super().__init__(f"Knowledge for category '{category}' is unavailable: {reason}")
        self.category = category


class GenerationError(GuideError):
    """The model provider returned no usable text."""

    stage = STAGE_GENERATE


class GenerationTimeoutError(GenerationError):
    """The model provider did not answer within the request timeout."""

    def __init__(self, timeout_seconds: float):
        super().__init__(f"Model did not respond within {timeout_seconds:g} seconds")
        self.timeout_seconds = timeout_seconds
