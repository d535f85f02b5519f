"""
Service layer for the Local Guide backend.

Contains the chat pipeline stages and their orchestration:
- knowledge_service: category template + table loading
- prompt_service: template augmentation
- backlink_service: source link extraction
- chat_service: per-request orchestration and error shaping
"""

from .backlink_service import SubstringMatcher, WordBoundaryMatcher, extract_sources
from .chat_service import ChatResult, handle_chat
from .knowledge_service import KnowledgeBundle, KnowledgeCache, list_categories, load_knowledge
from .price_tier import normalize_price_tier
from .prompt_service import augment_prompt

__all__ = [
    "augment_prompt",
    "ChatResult",
    "extract_sources",
    "handle_chat",
    "KnowledgeBundle",
    "KnowledgeCache",
    "list_categories",
    "load_knowledge",
    "normalize_price_tier",
    "SubstringMatcher",
    "WordBoundaryMatcher",
]
