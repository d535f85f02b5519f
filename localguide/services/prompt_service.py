"""
Prompt Augmenter.

Merges a category template with its knowledge table and the user's question.
"""

import json
import logging
from typing import List

from localguide.services.knowledge_service import KnowledgeRow
from localguide.utils.constants import CSV_DATA_PLACEHOLDER, USER_QUERY_PLACEHOLDER

logger = logging.getLogger(__name__)


def serialize_rows(rows: List[KnowledgeRow]) -> str:
    """Serialize rows as a pretty-printed JSON array (column and file order kept)."""
    return json.dumps(rows, indent=2, ensure_ascii=False)


def augment_prompt(template: str, rows: List[KnowledgeRow], user_query: str) -> str:
    """
    Build the final prompt sent to the model.

    Replaces the first occurrence of the data placeholder with the serialized
    rows, then the first occurrence of the query placeholder with the raw user
    query. The query is inserted as-is (no escaping).

    Args:
        template: Raw template text for the category
        rows: Knowledge rows in file order
        user_query: The user's question

    Returns:
        Prompt text ready for generation
    """
    if CSV_DATA_PLACEHOLDER not in template:
        logger.warning(f"Template has no {CSV_DATA_PLACEHOLDER} placeholder")
    if USER_QUERY_PLACEHOLDER not in template:
        logger.warning(f"Template has no {USER_QUERY_PLACEHOLDER} placeholder")

    prompt = template.replace(CSV_DATA_PLACEHOLDER, serialize_rows(rows), 1)
    prompt = prompt.replace(USER_QUERY_PLACEHOLDER, user_query, 1)

    logger.debug(f"Augmented prompt built ({len(prompt)} chars, {len(rows)} rows)")
    return prompt
