"""
Chat endpoint.

Endpoints:
- POST /chat: answer a question for a topic category

Body: {"query": str, "category": str}
Response: {"text": str, "sources": [{"title": str, "uri": str}]}

Pipeline failures return the same shape with an apologetic text, empty
sources and status 500.
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from localguide.schemas.chat import ChatRequest, ChatResponse
from localguide.services.chat_service import handle_chat

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post(
    "/chat",
    response_model=ChatResponse,
    status_code=status.HTTP_200_OK,
    summary="Ask the guide a question",
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "model": ChatResponse,
            "description": "Pipeline failure; text holds an apology and the error description",
        }
    },
    description="""
    Answers a question about one topic category.

    **Flow:**
    1. Load <category>.txt template and <category>.csv table
    2. Merge table and question into the prompt
    3. Generate the answer with Gemini (retries on 503 overload)
    4. Attach Website / Social Media links for places named in the answer
    """
)
async def chat_endpoint(request: ChatRequest):
    result = await handle_chat(category=request.category, user_query=request.query)

    if result.status_code != status.HTTP_200_OK:
        return JSONResponse(
            status_code=result.status_code,
            content=result.response.model_dump(),
        )

    logger.info(f"Returning answer with {len(result.response.sources)} sources")
    return result.response
