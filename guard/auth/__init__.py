"""
guard.auth

Auth provider options for the guard webhook authenticator.

Each provider turns its options into Secrets and an append-only patch of the
guard Deployment, so several providers can be applied to the same Deployment.
"""

from .options import AuthOptions
from .google_provider import GoogleOptions
from .token_provider import TokenAuthOptions
from .factory import get_auth_options, list_providers
from .installer import add_flags, load_args, validate_options, apply_options
from .exceptions import (
    AuthProviderError,
    ConfigurationError,
    ProviderNotFoundError,
)

__all__ = [
    # Abstract classes
    "AuthOptions",
    # Providers
    "GoogleOptions",
    "TokenAuthOptions",
    # Factory functions
    "get_auth_options",
    "list_providers",
    # Composition
    "add_flags",
    "load_args",
    "validate_options",
    "apply_options",
    # Exceptions
    "AuthProviderError",
    "ConfigurationError",
    "ProviderNotFoundError",
]
