"""
Backlink Extractor.

Finds which knowledge rows the generated answer talks about and turns their
Website / Social_Media columns into source links.

Matching rule (kept for compatibility with existing frontends):
- A row matches when its Name occurs in the answer, case-insensitively
- Website is preferred over Social_Media for the same Name
- At most one link per distinct Name, across all rows
- Only values starting with "http" become links

The matcher is pluggable so a stricter rule can replace plain substring
containment without touching the pipeline.
"""

import logging
import re
from typing import List, Optional, Protocol, Set

from localguide.schemas.chat import SourceLink
from localguide.services.knowledge_service import KnowledgeRow
from localguide.utils.constants import (
    LINK_SCHEME_PREFIX,
    NAME_COLUMN,
    SOCIAL_MEDIA_COLUMN,
    SOCIAL_MEDIA_LINK_LABEL,
    WEBSITE_COLUMN,
    WEBSITE_LINK_LABEL,
)

logger = logging.getLogger(__name__)


class EntityMatcher(Protocol):
    """Decides whether an entity name is mentioned in a text."""

    def matches(self, name: str, text: str) -> bool:
        ...


class SubstringMatcher:
    """Case-insensitive substring containment (default)."""

    def matches(self, name: str, text: str) -> bool:
        return name.lower() in text.lower()


class WordBoundaryMatcher:
    """Case-insensitive match that refuses partial-word hits ("Ark" in "Park")."""

    def matches(self, name: str, text: str) -> bool:
        pattern = r"(?<!\w)" + re.escape(name) + r"(?!\w)"
        return re.search(pattern, text, re.IGNORECASE) is not None


DEFAULT_MATCHER: EntityMatcher = SubstringMatcher()


def _link_value(row: KnowledgeRow, column: str) -> Optional[str]:
    value = row.get(column)
    if value and value.startswith(LINK_SCHEME_PREFIX):
        return value
    return None


def extract_sources(
    response_text: str,
    rows: List[KnowledgeRow],
    matcher: EntityMatcher = DEFAULT_MATCHER,
) -> List[SourceLink]:
    """
    Build the source links for a generated answer.

    Rows are visited in file order. Rows are not modified.

    Args:
        response_text: Text returned by the model
        rows: Knowledge rows for the category
        matcher: Name matching strategy

    Returns:
        Source links in row order, at most one per Name
    """
    sources: List[SourceLink] = []
    found_names: Set[str] = set()

    for row in rows:
        name = row.get(NAME_COLUMN)
        if not name or not matcher.matches(name, response_text):
            continue

        if name in found_names:
            continue

        website = _link_value(row, WEBSITE_COLUMN)
        if website:
            sources.append(SourceLink(title=f"{name} - {WEBSITE_LINK_LABEL}", uri=website))
            found_names.add(name)
            continue

        social_media = _link_value(row, SOCIAL_MEDIA_COLUMN)
        if social_media:
            sources.append(SourceLink(title=f"{name} - {SOCIAL_MEDIA_LINK_LABEL}", uri=social_media))
            found_names.add(name)

    logger.info(f"Found {len(sources)} relevant links.")
    return sources
