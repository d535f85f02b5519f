"""
Schemas for the category listing endpoint.
"""

from typing import List

from pydantic import BaseModel, Field


class CategoryListResponse(BaseModel):
    """Categories that currently have both a template and a table on disk."""
    categories: List[str] = Field(
        default_factory=list,
        description="Category keys accepted by POST /chat",
        examples=[["food", "sights"]]
    )
