"""FastAPI dependencies for configuration, services and the token gate."""
import logging
from typing import Annotated, TypeVar

from fastapi import Depends, Header, HTTPException, Request, status
from pydantic import BaseModel, ValidationError

from .completion_client import CompletionClient
from .config import Settings
from .errors import INVALID_BODY_MESSAGE
from .secret_store import SecretStore
from .security import BEARER_PREFIX, InvalidToken, SessionClaims, TokenService


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_secret_store(request: Request) -> SecretStore:
    return request.app.state.secret_store


def get_completion_client(request: Request) -> CompletionClient:
    return request.app.state.completion_client


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def require_session(
    request: Request,
    tokens: Annotated[TokenService, Depends(get_token_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> SessionClaims:
    """Validate the bearer token on protected routes.

    Raises:
        HTTPException: 401 if the header is missing, lacks the bearer
            prefix, or carries an invalid or expired token

    Returns:
        The claims of the verified session
    """
    logger.info("Token validation for request: %s %s", request.method, request.url.path)

    if not authorization:
        logger.info("Token validation failed: missing authorization header")
        raise _unauthorized("Authorization header required")

    if not authorization.startswith(BEARER_PREFIX):
        logger.info("Token validation failed: invalid bearer token format")
        raise _unauthorized("Bearer token required")

    try:
        claims = tokens.validate_bearer(authorization)
    except InvalidToken as exc:
        logger.info("Token validation failed: %s", exc)
        raise _unauthorized("Invalid token")

    logger.info(
        "Token validation successful for user: %s (expires %s)",
        claims.username,
        claims.expires_at.isoformat(),
    )
    return claims


async def require_completion_client(
    client: Annotated[CompletionClient, Depends(get_completion_client)],
) -> CompletionClient:
    """Return the completion client, failing fast when no API key is set."""
    if not client.configured:
        logger.error("OpenAI API key not configured")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="OpenAI API key not configured"
        )
    return client


async def parse_json_body(request: Request, model: type[ModelT]) -> ModelT:
    """Decode the request body as JSON into ``model``.

    Called from handlers after their dependencies have passed, so gate and
    precondition failures win over a bad body. The Content-Type header is
    not checked.

    Raises:
        HTTPException: 400 if the body is not valid JSON of the right shape
    """
    body = await request.body()
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        logger.info(
            "Invalid request body for %s %s: %s",
            request.method,
            request.url.path,
            [error.get("type") for error in exc.errors()],
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_BODY_MESSAGE
        )
