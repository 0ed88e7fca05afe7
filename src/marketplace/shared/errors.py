"""Errors raised by marketplace handlers beyond Protean's own exceptions.

Protean covers validation (``ValidationError``) and lookups
(``ObjectNotFoundError``). The classes here map to the remaining HTTP
outcomes: 409 for conflicts, 401/403 for authentication and authorization,
and 500 for broken invariants.
"""


class MarketplaceError(Exception):
    """Base class for marketplace-specific errors."""

    def __init__(self, message: str, **context):
        super().__init__(message)
        self.message = message
        self.context = context


class ConflictError(MarketplaceError):
    """The write clashes with data that already exists."""


class InvariantViolation(MarketplaceError):
    """An internal consistency check failed. Should be unreachable."""


class AuthenticationError(MarketplaceError):
    """Credentials are missing, invalid or expired."""


class PermissionDenied(MarketplaceError):
    """The caller is authenticated but not allowed to do this."""
