"""Chat route that proxies a single message to the completion API."""
import logging
from typing import Annotated, Any

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel

from .completion_client import CompletionClient
from .dependencies import parse_json_body, require_completion_client, require_session
from .prompt import build_system_prompt
from .security import SessionClaims


logger = logging.getLogger(__name__)

CHAT_MODEL = "gpt-3.5-turbo"
MAX_TOKENS = 150
TEMPERATURE = 0.7

router = APIRouter(prefix="/api", tags=["chat"])


class ChatRequest(BaseModel):
    message: str


class ChatResponse(BaseModel):
    response: str


def build_completion_payload(message: str) -> dict[str, Any]:
    """Build the completion request for one user message.

    The system prompt is sent in full on every call; no history is kept.
    """
    return {
        "model": CHAT_MODEL,
        "messages": [
            {"role": "system", "content": build_system_prompt()},
            {"role": "user", "content": message},
        ],
        "max_tokens": MAX_TOKENS,
        "temperature": TEMPERATURE,
    }


def extract_reply(data: dict[str, Any]) -> str:
    """Return ``choices[0].message.content`` or an empty string."""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""
    choice = choices[0]
    if not isinstance(choice, dict):
        return ""
    message = choice.get("message")
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    return content if isinstance(content, str) else ""


def _fail(status_code: int, detail: str) -> HTTPException:
    return HTTPException(status_code=status_code, detail=detail)


@router.post("/chat", response_model=ChatResponse)
async def chat(
    claims: Annotated[SessionClaims, Depends(require_session)],
    client: Annotated[CompletionClient, Depends(require_completion_client)],
    http_request: Request,
):
    """Forward the caller's message to the completion API and return the reply.

    The session and the API key are checked before the body is parsed.
    """
    logger.info("/api/chat called by %s", claims.username)
    request = await parse_json_body(http_request, ChatRequest)

    payload = build_completion_payload(request.message)

    try:
        status_code, data = await client.create(payload)
    except httpx.InvalidURL as exc:
        logger.error("Failed to create OpenAI request: %s", exc)
        raise _fail(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create OpenAI request")
    except httpx.HTTPError as exc:
        logger.error("OpenAI API request failed: %s: %s", type(exc).__name__, exc)
        raise _fail(status.HTTP_502_BAD_GATEWAY, "Failed to contact OpenAI API")

    if status_code != 200:
        logger.error("OpenAI API returned status: %d", status_code)
        raise _fail(status.HTTP_502_BAD_GATEWAY, "OpenAI API error")

    if data is None:
        logger.error("Failed to decode OpenAI response")
        raise _fail(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to decode OpenAI response")

    reply = extract_reply(data)
    if not reply:
        logger.error("OpenAI response missing content")
        raise _fail(status.HTTP_500_INTERNAL_SERVER_ERROR, "No response from OpenAI")

    logger.info("OpenAI chat response sent")
    return ChatResponse(response=reply)
