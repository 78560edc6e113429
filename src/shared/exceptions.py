"""Error taxonomy shared by every context.

Domain and service code raise these; ``shared.api.register_exception_handlers``
turns them into HTTP responses.
"""


class StoreError(Exception):
    """Base class for errors raised by the store's domain and services."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(StoreError):
    """Malformed input or a violated business rule, keyed by offending field.

    ``messages`` follows the ``{"field": ["message", ...]}`` shape.
    """

    def __init__(self, messages: dict[str, list[str]]):
        self.messages = messages
        flat = "; ".join(f"{key}: {', '.join(values)}" for key, values in messages.items())
        super().__init__(flat)


class ObjectNotFoundError(StoreError):
    """Unknown id for a product, order, wilaya, admin or category."""


class ConflictError(StoreError):
    """The requested resource already exists."""


class AuthenticationError(StoreError):
    """Missing, expired or invalid admin session, or bad credentials."""


class StorageError(StoreError):
    """A persistence failure; the message is safe to show to clients."""
