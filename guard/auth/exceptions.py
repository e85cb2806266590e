"""
guard.auth.exceptions

Custom exceptions for the auth provider package.
"""


class AuthProviderError(Exception):
    """Base exception for auth provider errors."""

    pass


class ConfigurationError(AuthProviderError):
    """Raised when provider options or the target Deployment are invalid."""

    pass


class ProviderNotFoundError(AuthProviderError):
    """Raised when no auth provider matches the requested name."""

    pass
