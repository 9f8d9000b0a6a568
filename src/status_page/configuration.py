"""Process-wide monitor configuration."""

import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from .providers import ProviderRegistry


@dataclass(frozen=True)
class ConfigurationSnapshot:
    """Immutable view of the configuration taken at the start of a check cycle."""

    providers: Tuple[type, ...]
    names: Dict[type, str]
    error_callback: Optional[Callable[[BaseException], Any]]
    probe_timeout: Optional[float]


class Configuration:
    """Providers, error callback and credentials shared by every check.

    Usage:
        def setup(config):
            config.use("database")
            config.use("redis")
            config.error_callback = alert

        monitor.configure(setup)
    """

    def __init__(self, registry: Optional[ProviderRegistry] = None):
        self._lock = threading.RLock()
        self._registry = registry if registry is not None else ProviderRegistry()
        self._configured = False
        self.error_callback: Optional[Callable[[BaseException], Any]] = None
        self.basic_auth_credentials: Any = None
        self.probe_timeout: Optional[float] = None

    @property
    def providers(self) -> Tuple[type, ...]:
        """Active provider types in registration order."""
        with self._lock:
            return self._registry.active()

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    @property
    def configured(self) -> bool:
        """True once configure() has been called since creation or the last reset."""
        return self._configured

    def use(self, key: str) -> type:
        """
        Enable a provider by key.

        Args:
            key: Provider key, e.g. "database" or "redis"

        Returns:
            The provider type

        Raises:
            UnknownProviderError: If no provider is registered under key
        """
        with self._lock:
            return self._registry.register(key)

    def add_custom_service(self, provider: type) -> type:
        """
        Enable a custom provider type.

        Returns:
            The provider type, unchanged

        Raises:
            InvalidProviderError: If the type does not satisfy the probe contract
        """
        with self._lock:
            return self._registry.add_custom(provider)

    def define_service(self, key: str, provider: type) -> type:
        """Make a custom provider available to use() under ``key``."""
        with self._lock:
            return self._registry.define(key, provider)

    def snapshot(self) -> ConfigurationSnapshot:
        """Consistent copy of the fields a check cycle reads."""
        with self._lock:
            return ConfigurationSnapshot(
                providers=self._registry.active(),
                names=self._registry.names(),
                error_callback=self.error_callback,
                probe_timeout=self.probe_timeout,
            )

    def apply(self, fn: Callable[["Configuration"], Any]) -> None:
        """Run ``fn`` against this configuration while holding the lock."""
        with self._lock:
            try:
                fn(self)
            finally:
                # Mutations made before a failure are kept
                self._configured = True

    def reset(self) -> None:
        """Return to the unconfigured state."""
        with self._lock:
            self._registry.clear()
            self.error_callback = None
            self.basic_auth_credentials = None
            self.probe_timeout = None
            self._configured = False
