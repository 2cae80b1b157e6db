"""Authentication route issuing session tokens."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel

from .config import Settings
from .dependencies import get_settings, get_token_service, parse_json_body
from .security import TokenService, credentials_match


logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


class AuthRequest(BaseModel):
    username: str = ""
    password: str = ""


class AuthResponse(BaseModel):
    token: str


@router.post("/auth", response_model=AuthResponse)
async def authenticate(
    http_request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
):
    """Check the submitted credentials and return a signed session token.

    Both fields must equal the configured admin username and password.
    The response does not say which of the two was wrong.
    """
    request = await parse_json_body(http_request, AuthRequest)
    client = http_request.client.host if http_request.client else "unknown"
    logger.info("Authentication attempt for username %r from %s", request.username, client)

    if not credentials_match(
        request.username,
        request.password,
        settings.auth_username,
        settings.auth_password,
    ):
        logger.warning("Authentication failed: invalid credentials for username %r", request.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )

    try:
        token = tokens.issue(request.username)
    except (TypeError, ValueError) as exc:
        logger.error("Authentication failed: token generation error - %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate token"
        )

    logger.info("Authentication successful for username %r", request.username)
    return AuthResponse(token=token)
