"""
AI components for the Local Guide backend.

GuideAgent (single-shot text generation)
   - The augmented prompt already embeds the category's knowledge table
   - Uses the Google Gen AI SDK directly, wrapped in a 503 retry loop
   - Located in: localguide/agents/guide/
"""

from localguide.agents.guide import GeminiGenerator, generate_with_retry, run_generation

__all__ = [
    "GeminiGenerator",
    "generate_with_retry",
    "run_generation",
]
