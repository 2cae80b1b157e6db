"""Protected routes returning configured secrets."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from .dependencies import get_secret_store, require_session
from .secret_store import SecretNotAllowed, SecretNotConfigured, SecretStore
from .security import SessionClaims


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/secrets", tags=["secrets"])


class SecretResponse(BaseModel):
    secret: str


def _lookup(store: SecretStore, name: str) -> SecretResponse:
    try:
        value = store.get(name)
    except SecretNotAllowed:
        logger.warning("Forbidden secret requested: %s", name)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Secret not allowed"
        )
    except SecretNotConfigured:
        logger.error("Secret %s not configured", name)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Secret not configured"
        )

    logger.info("Secret '%s' successfully provided", name)
    return SecretResponse(secret=value)


@router.get("/openai", response_model=SecretResponse)
async def get_openai_key(
    store: Annotated[SecretStore, Depends(get_secret_store)],
    claims: Annotated[SessionClaims, Depends(require_session)],
):
    """Return the completion-API key."""
    logger.info("OpenAI key requested by %s", claims.username)
    return _lookup(store, "openai")


@router.get("/{secret_name}", response_model=SecretResponse)
async def get_secret(
    secret_name: str,
    store: Annotated[SecretStore, Depends(get_secret_store)],
    claims: Annotated[SessionClaims, Depends(require_session)],
):
    """Return one of the allowed secrets by name."""
    logger.info("Secret '%s' requested by %s", secret_name, claims.username)
    return _lookup(store, secret_name)
