"""Lookup of the small, fixed set of named secrets."""
from .config import Settings


# Secret name -> Settings field. Nothing outside this mapping is retrievable.
SECRET_FIELDS = {
    "openai": "openai_api_key",
    "firebase": "firebase_api_key",
}


class SecretNotAllowed(LookupError):
    """The requested name is not one of the retrievable secrets."""


class SecretNotConfigured(LookupError):
    """The secret is known but has no configured value."""


class SecretStore:
    """Read-only view of the configured secrets."""

    def __init__(self, settings: Settings):
        self._values = {
            name: getattr(settings, field) for name, field in SECRET_FIELDS.items()
        }

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._values)

    def is_configured(self, name: str) -> bool:
        return bool(self._values.get(name))

    def get(self, name: str) -> str:
        """Return the value of secret ``name``.

        Raises:
            SecretNotAllowed: if ``name`` is not a retrievable secret
            SecretNotConfigured: if the secret is empty
        """
        if name not in self._values:
            raise SecretNotAllowed(name)
        value = self._values[name]
        if not value:
            raise SecretNotConfigured(name)
        return value
