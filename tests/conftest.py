"""Shared fixtures: isolated settings, a stubbed upstream and a test client."""
import json

import httpx
import pytest
from fastapi.testclient import TestClient

from secrets_service.config import Settings, get_settings
from secrets_service.main import create_app


TEST_USERNAME = "testuser"
TEST_PASSWORD = "testpass"

ENV_VARS = (
    "JWT_SECRET",
    "TOKEN_LIFETIME_HOURS",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "ALLOWED_ORIGINS",
    "VITE_SECRETS_SERVICE_USERNAME",
    "VITE_SECRETS_SERVICE_PASSWORD",
    "AUTH_USERNAME",
    "AUTH_PASSWORD",
    "OPENAI_API_KEY",
    "FIREBASE_API_KEY",
    "OPENAI_BASE_URL",
)


def make_settings(**overrides) -> Settings:
    values = {
        "jwt_secret": "test-secret",
        "auth_username": TEST_USERNAME,
        "auth_password": TEST_PASSWORD,
        "openai_api_key": "sk-test-key",
        "firebase_api_key": "firebase-test-key",
        "openai_base_url": "https://llm.test/v1",
        "allowed_origins": "https://portfolio.test",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeUpstream:
    """Stand-in for the completion API behind an httpx.MockTransport."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = {
            "id": "chatcmpl-1",
            "choices": [{"index": 0, "message": {"role": "assistant", "content": "Hello there!"}}],
        }
        self.raw: bytes | None = None
        self.exception: type[Exception] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exception is not None:
            raise self.exception("upstream unavailable", request=request)
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keep the developer's environment and .env file out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def app(settings, upstream):
    return create_app(settings, completion_transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def token(client):
    response = client.post("/auth", json={"username": TEST_USERNAME, "password": TEST_PASSWORD})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
