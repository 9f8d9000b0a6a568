"""Provider registry: key lookup, validation and the active provider set."""

import inspect
from typing import Dict, Optional, Tuple, Type

from ..exceptions import InvalidProviderError, UnknownProviderError
from ..utils import get_logger
from .base import BaseProvider
from .celery import CeleryProvider
from .database import DatabaseProvider
from .redis import RedisProvider

logger = get_logger(__name__)


BUILTIN_PROVIDERS: Dict[str, Type[BaseProvider]] = {
    "database": DatabaseProvider,
    "redis": RedisProvider,
    "celery": CeleryProvider,
}


def validate_provider(provider) -> None:
    """
    Check that a provider type satisfies the probe contract.

    A provider must be a concrete class with a string ``name``, a callable
    ``check`` and a constructor that accepts a ``request`` keyword.
    Subclassing BaseProvider is the usual way to get all three, but is not
    required.

    Raises:
        InvalidProviderError: If the contract is not met
    """
    if not inspect.isclass(provider):
        raise InvalidProviderError(f"Provider must be a class, got {provider!r}")
    if inspect.isabstract(provider):
        raise InvalidProviderError(f"{provider.__name__} is abstract and cannot be checked")
    if not callable(getattr(provider, "check", None)):
        raise InvalidProviderError(f"{provider.__name__} does not define check()")
    if not isinstance(getattr(provider, "name", None), str):
        raise InvalidProviderError(f"{provider.__name__} does not define a string name")

    try:
        signature = inspect.signature(provider)
    except (TypeError, ValueError):
        # No introspectable signature, e.g. some extension types
        return
    try:
        signature.bind(request=None)
    except TypeError:
        raise InvalidProviderError(
            f"{provider.__name__} must accept a request argument"
        ) from None


class ProviderRegistry:
    """Resolves provider keys and keeps the ordered set of active providers."""

    def __init__(self, types: Optional[Dict[str, type]] = None):
        self._types: Dict[str, type] = dict(BUILTIN_PROVIDERS if types is None else types)
        # Insertion-ordered set of active providers, mapped to their output names
        self._active: Dict[type, str] = {}

    def register(self, key: str) -> type:
        """
        Activate the provider registered under ``key``.

        Args:
            key: Provider key, e.g. "redis"

        Returns:
            The provider type

        Raises:
            UnknownProviderError: If no provider is registered under key
        """
        provider = self.resolve(key)
        self._activate(provider, key)
        return provider

    def add_custom(self, provider: type) -> type:
        """
        Validate and activate a custom provider type.

        Returns:
            The provider type, unchanged

        Raises:
            InvalidProviderError: If the type does not satisfy the probe contract
        """
        validate_provider(provider)
        self._activate(provider, provider.name)
        return provider

    def define(self, key: str, provider: type) -> type:
        """Register ``provider`` under ``key`` without activating it."""
        validate_provider(provider)
        self._types[key] = provider
        logger.debug(f"Defined provider key '{key}' -> {provider.__name__}")
        return provider

    def resolve(self, key: str) -> type:
        """Look up the provider type for a key."""
        if key not in self._types:
            raise UnknownProviderError(
                f"Unknown provider: {key}. Available: {self.known_keys()}"
            )
        return self._types[key]

    def known_keys(self) -> list:
        """Keys that can be passed to register()."""
        return list(self._types.keys())

    def active(self) -> Tuple[type, ...]:
        """Active providers in registration order."""
        return tuple(self._active)

    def names(self) -> Dict[type, str]:
        """Output name for each active provider.

        Providers activated by key report under that key. Custom providers
        report under their own ``name``.
        """
        return dict(self._active)

    def clear(self) -> None:
        """Deactivate every provider."""
        self._active.clear()

    def _activate(self, provider: type, name: str) -> None:
        if provider not in self._active:
            self._active[provider] = name
            logger.debug(f"Activated provider '{name}'")

    def __contains__(self, provider) -> bool:
        return provider in self._active

    def __len__(self) -> int:
        return len(self._active)


def list_providers() -> list:
    """Get list of built-in provider keys."""
    return list(BUILTIN_PROVIDERS.keys())
