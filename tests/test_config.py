import pytest
from pydantic import ValidationError

from secrets_service.config import DEFAULT_JWT_SECRET, Settings, get_settings


def test_defaults_without_environment():
    settings = Settings(_env_file=None)

    assert settings.jwt_secret == DEFAULT_JWT_SECRET
    assert settings.uses_default_secret
    assert settings.port == 8080
    assert settings.auth_username == "admin"
    assert settings.auth_password == "changeme"
    assert settings.openai_api_key == ""
    assert settings.firebase_api_key == ""
    assert settings.token_lifetime_hours == 24


def test_reads_environment_variables(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "s3cret")
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("VITE_SECRETS_SERVICE_USERNAME", "alice")
    monkeypatch.setenv("VITE_SECRETS_SERVICE_PASSWORD", "wonderland")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-live")
    monkeypatch.setenv("FIREBASE_API_KEY", "fb-live")

    settings = Settings(_env_file=None)

    assert settings.jwt_secret == "s3cret"
    assert not settings.uses_default_secret
    assert settings.port == 9090
    assert settings.auth_username == "alice"
    assert settings.auth_password == "wonderland"
    assert settings.openai_api_key == "sk-live"
    assert settings.firebase_api_key == "fb-live"


def test_short_credential_variable_names(monkeypatch):
    monkeypatch.setenv("AUTH_USERNAME", "bob")
    monkeypatch.setenv("AUTH_PASSWORD", "builder")

    settings = Settings(_env_file=None)

    assert settings.auth_username == "bob"
    assert settings.auth_password == "builder"


def test_empty_variables_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("PORT", "")
    monkeypatch.setenv("JWT_SECRET", "")
    monkeypatch.setenv("VITE_SECRETS_SERVICE_USERNAME", "")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.jwt_secret == DEFAULT_JWT_SECRET
    assert settings.auth_username == "admin"


def test_reads_dotenv_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("OPENAI_API_KEY=sk-from-file\nPORT=7070\n", encoding="utf-8")

    settings = Settings(_env_file=str(env_file))

    assert settings.openai_api_key == "sk-from-file"
    assert settings.port == 7070


def test_cors_origins_append_development_hosts():
    settings = Settings(_env_file=None, allowed_origins="https://a.test, https://b.test,")

    assert settings.cors_origins == [
        "https://a.test",
        "https://b.test",
        "http://localhost:3000",
        "http://localhost:5173",
    ]


def test_default_cors_origins():
    assert Settings(_env_file=None).cors_origins == [
        "https://ethanmerrill.com",
        "http://localhost:3000",
        "http://localhost:5173",
    ]


def test_settings_are_immutable():
    settings = Settings(_env_file=None)

    with pytest.raises(ValidationError):
        settings.port = 1


def test_get_settings_is_built_once(monkeypatch):
    monkeypatch.setenv("PORT", "8181")
    first = get_settings()
    monkeypatch.setenv("PORT", "8282")

    assert get_settings() is first
    assert first.port == 8181
