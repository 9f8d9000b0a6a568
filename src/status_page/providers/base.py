"""Base class for health probes."""

from abc import ABC, abstractmethod
from typing import Any

from ..config import get_settings
from ..utils import get_logger


class BaseProvider(ABC):
    """Base class for health probes.

    A probe is instantiated once per check cycle with the request context of
    the caller. ``check()`` returns normally when the dependency is healthy
    and raises otherwise. Raise ``ProbeFailure`` (or a subclass) for
    conditions worth showing to the reader of the status page.
    """

    name: str = "base"
    description: str = "Base health probe"

    def __init__(self, request: Any = None):
        self.request = request
        self.settings = get_settings()
        self.logger = get_logger(f"status_page.provider.{self.name}")

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Subclasses without an explicit name report as their class name
        if "name" not in cls.__dict__:
            cls.name = cls.__name__.lower()

    @abstractmethod
    def check(self) -> None:
        """
        Run the probe.

        Raises:
            ProbeFailure: If the dependency is unhealthy
        """
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
