"""
Pydantic schemas for the chat endpoint.

These models define the JSON contract consumed by the guide frontend:
request {query, category} and response {text, sources}.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

# ============================================================================
# REQUEST MODELS
# ============================================================================

class ChatRequest(BaseModel):
    """
    A user question about one topic category.

    The category key selects which template/table pair answers the question.
    """
    query: str = Field(
        ...,
        description="The user's question, passed to the model as-is (may be empty)",
        examples=["Πού μπορώ να φάω παραδοσιακή πίτα;"]
    )
    category: str = Field(
        ...,
        description=(
            "Topic category key (e.g. 'food', 'sights'). Unknown or malformed "
            "keys are answered with the 500 apology response, not a validation error."
        ),
        examples=["food", "sights"]
    )


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class SourceLink(BaseModel):
    """A citation link for an entity mentioned in the generated answer."""
    title: str = Field(
        ...,
        description="'<Name> - Website' or '<Name> - Social Media'",
        examples=["Taverna X - Website"]
    )
    uri: str = Field(
        ...,
        description="Link target taken from the knowledge table",
        examples=["http://x.example"]
    )


class ChatResponse(BaseModel):
    """
    Response for POST /chat.

    On failure the same shape is returned with an apologetic text and an
    empty sources list.
    """
    text: str = Field(..., description="Generated answer (or apology on failure)")
    sources: List[SourceLink] = Field(
        default_factory=list,
        description="Links for entities mentioned in the answer, in table order"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "Δοκιμάστε την Taverna X για παραδοσιακή πίτα.",
                "sources": [
                    {"title": "Taverna X - Website", "uri": "http://x.example"}
                ]
            }
        }
    )
