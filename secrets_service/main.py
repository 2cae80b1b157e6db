"""Main FastAPI application for the secrets service."""
import logging
import time

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from . import __version__, auth, chat, secrets_api
from .completion_client import CompletionClient
from .config import Settings, get_settings
from .errors import register_error_handlers
from .secret_store import SecretStore
from .security import TokenService


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr with timestamps."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)


def log_configuration(settings: Settings, store: SecretStore) -> None:
    """Log a summary of the configuration without any secret values."""
    logger.info("Configuration loaded:")
    logger.info("  Port: %s", settings.port)
    logger.info("  Auth Username: %s", settings.auth_username)
    logger.info("  JWT Secret configured: %s", bool(settings.jwt_secret))
    for name in store.names:
        logger.info("  Secret '%s' configured: %s", name, store.is_configured(name))

    if settings.uses_default_secret:
        logger.warning("Using default JWT secret. This is insecure for production!")
    if not settings.openai_api_key:
        logger.warning(
            "OPENAI_API_KEY environment variable is not set. Chat functionality will be disabled."
        )

    logger.info("CORS configured with origins: %s", settings.cors_origins)


def _log_response(request: Request, status_code: int, start: float) -> None:
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "Response: %s %s - Status: %d - Duration: %.1fms",
        request.method,
        request.url.path,
        status_code,
        duration_ms,
    )


def create_app(
    settings: Settings | None = None,
    completion_transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the application around an immutable settings object.

    Args:
        settings: Configuration; read from the environment when omitted
        completion_transport: Optional httpx transport for the upstream
            completion API, used to stub the network in tests
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="Portfolio Secrets Service",
        description="Issues session tokens, serves configured secrets and proxies chat completions",
        version=__version__,
    )

    app.state.settings = settings
    app.state.token_service = TokenService(
        settings.jwt_secret,
        lifetime_seconds=settings.token_lifetime_hours * 60 * 60,
    )
    app.state.secret_store = SecretStore(settings)
    app.state.completion_client = CompletionClient(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        transport=completion_transport,
    )

    log_configuration(settings, app.state.secret_store)

    register_error_handlers(app)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        client = request.client.host if request.client else "unknown"
        logger.info("Request: %s %s from %s", request.method, request.url.path, client)

        try:
            response = await call_next(request)
        except Exception:
            _log_response(request, 500, start)
            raise

        _log_response(request, response.status_code, start)
        return response

    # Mount routers
    app.include_router(auth.router)
    app.include_router(secrets_api.router)
    app.include_router(chat.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("Server starting on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
