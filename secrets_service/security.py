"""Session token signing and verification using itsdangerous."""
import secrets
import time
from dataclasses import dataclass
from datetime import datetime, timezone

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer


TOKEN_SALT = "session-token"
BEARER_PREFIX = "Bearer "


class InvalidToken(Exception):
    """Raised when a session token cannot be accepted.

    The message describes the reason and is meant for logs only.
    """


@dataclass(frozen=True)
class SessionClaims:
    """Claims carried inside a session token."""

    username: str
    exp: int

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)


class TokenService:
    """Issues and validates signed, time-limited session tokens.

    Tokens are stateless: validity depends only on the signing secret,
    the embedded expiration and the current time.
    """

    def __init__(self, secret_key: str, lifetime_seconds: int = 24 * 60 * 60):
        self.lifetime_seconds = lifetime_seconds
        self._serializer = URLSafeTimedSerializer(secret_key, salt=TOKEN_SALT)

    def issue(self, username: str) -> str:
        """Sign a token for ``username`` expiring ``lifetime_seconds`` from now."""
        exp = int(time.time()) + self.lifetime_seconds
        return self._serializer.dumps({"username": username, "exp": exp})

    def validate(self, token: str) -> SessionClaims:
        """Verify a raw token and return its claims.

        Raises:
            InvalidToken: if the token is malformed, tampered with or expired
        """
        if not token:
            raise InvalidToken("empty token")

        try:
            payload = self._serializer.loads(token, max_age=self.lifetime_seconds)
        except SignatureExpired:
            raise InvalidToken("token expired")
        except BadSignature:
            raise InvalidToken("signature verification failed")

        if not isinstance(payload, dict):
            raise InvalidToken("malformed claims")
        username = payload.get("username")
        exp = payload.get("exp")
        if not isinstance(username, str) or not username or not isinstance(exp, int):
            raise InvalidToken("malformed claims")

        if exp <= time.time():
            raise InvalidToken("token expired")

        return SessionClaims(username=username, exp=exp)

    def validate_bearer(self, authorization: str | None) -> SessionClaims:
        """Validate the value of an ``Authorization: Bearer <token>`` header."""
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            raise InvalidToken("missing bearer prefix")
        return self.validate(authorization[len(BEARER_PREFIX):].strip())


def credentials_match(
    username: str, password: str, expected_username: str, expected_password: str
) -> bool:
    """Compare a submitted credential pair against the configured one.

    Both comparisons always run so timing does not reveal which field
    was wrong. Empty submissions never match.
    """
    if not username or not password:
        return False
    username_ok = secrets.compare_digest(
        username.encode("utf-8"), expected_username.encode("utf-8")
    )
    password_ok = secrets.compare_digest(
        password.encode("utf-8"), expected_password.encode("utf-8")
    )
    return username_ok and password_ok
