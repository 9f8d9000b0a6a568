"""Health probes and the provider registry."""

from .base import BaseProvider
from .celery import CeleryProvider
from .database import DatabaseProvider
from .redis import RedisProvider
from .registry import (
    BUILTIN_PROVIDERS,
    ProviderRegistry,
    list_providers,
    validate_provider,
)

__all__ = [
    # Probe classes
    "BaseProvider",
    "DatabaseProvider",
    "RedisProvider",
    "CeleryProvider",
    # Registry
    "BUILTIN_PROVIDERS",
    "ProviderRegistry",
    "list_providers",
    "validate_provider",
]
