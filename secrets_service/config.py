"""Configuration for the secrets service."""
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_JWT_SECRET = "your-jwt-secret-change-this"

# Development origins appended to whatever ALLOWED_ORIGINS holds
DEV_ORIGINS = ("http://localhost:3000", "http://localhost:5173")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    # Security settings
    jwt_secret: str = DEFAULT_JWT_SECRET
    token_lifetime_hours: int = 24

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # CORS settings (comma-separated)
    allowed_origins: str = "https://ethanmerrill.com"

    # Static admin credentials
    auth_username: str = Field(
        default="admin",
        validation_alias=AliasChoices(
            "VITE_SECRETS_SERVICE_USERNAME", "AUTH_USERNAME"
        ),
    )
    auth_password: str = Field(
        default="changeme",
        validation_alias=AliasChoices(
            "VITE_SECRETS_SERVICE_PASSWORD", "AUTH_PASSWORD"
        ),
    )

    # Upstream keys
    openai_api_key: str = ""
    firebase_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.allowed_origins.split(",") if o.strip()]
        return origins + list(DEV_ORIGINS)

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET


@lru_cache
def get_settings() -> Settings:
    """Build the process-wide settings once."""
    return Settings()
