"""Token-gated secrets service with a chat-completion proxy."""

__version__ = "1.0.0"
