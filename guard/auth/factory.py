"""
guard.auth.factory

Factory for creating auth provider options.
"""

import os
from typing import Callable, Dict, List, Optional

from .options import AuthOptions
from .google_provider import GoogleOptions
from .token_provider import TokenAuthOptions
from .exceptions import ProviderNotFoundError

_PROVIDERS: Dict[str, Callable[[], AuthOptions]] = {
    "google": GoogleOptions,
    "token-auth": TokenAuthOptions,
}


def list_providers() -> List[str]:
    """Return the names of all known auth providers."""
    return sorted(_PROVIDERS)


def get_auth_options(provider_name: Optional[str] = None) -> AuthOptions:
    """
    Get zero-valued options for an auth provider.

    Args:
        provider_name: Provider name ("google" or "token-auth")

    Returns:
        AuthOptions instance

    Raises:
        ProviderNotFoundError: If provider is not specified or invalid
    """
    # Get provider name from parameter or environment variable
    if provider_name is None:
        provider_name = os.environ.get("GUARD_AUTH_PROVIDER")

    if not provider_name:
        raise ProviderNotFoundError(
            "Auth provider must be explicitly specified. "
            "Set GUARD_AUTH_PROVIDER environment variable to one of: "
            + ", ".join(list_providers())
        )

    provider_name = provider_name.lower().strip()
    factory = _PROVIDERS.get(provider_name)
    if factory is None:
        raise ProviderNotFoundError(
            f"Invalid auth provider name: '{provider_name}'. "
            "Valid options are: " + ", ".join(list_providers())
        )
    return factory()
