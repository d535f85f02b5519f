"""
Guide answer generation (Gemini, single-shot with retry).
"""

from localguide.agents.guide.agent import GeminiGenerator, run_generation
from localguide.agents.guide.retry import (
    RetryState,
    generate_with_retry,
    is_transient_overload,
)

__all__ = [
    "GeminiGenerator",
    "run_generation",
    "RetryState",
    "generate_with_retry",
    "is_transient_overload",
]
