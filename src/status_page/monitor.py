"""Monitor: the public entry point for configuring and running checks."""

from datetime import datetime
from typing import Any, Callable, Optional

from .config import Settings, get_settings
from .configuration import Configuration
from .monitoring import CheckRunner, StatusReport, aggregate_status
from .notifications import WebhookNotifier
from .utils import get_logger

logger = get_logger(__name__)


class Monitor:
    """Owns a Configuration and runs check cycles against it."""

    def __init__(
        self,
        configuration: Optional[Configuration] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.configuration = configuration or Configuration()
        self._clock = clock or datetime.now

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "Monitor":
        """
        Build a monitor configured from application settings.

        Enables the providers listed in ``settings.providers``, copies the
        basic auth pair and probe timeout, and alerts ``settings.webhook_url``
        on probe failures when it is set.

        Raises:
            UnknownProviderError: If a listed provider key is unknown
        """
        settings = settings or get_settings()
        monitor = cls(**kwargs)

        def apply_settings(config: Configuration) -> None:
            for key in settings.providers:
                config.use(key)
            config.basic_auth_credentials = settings.basic_auth_credentials
            config.probe_timeout = settings.probe_timeout
            if settings.webhook_url:
                config.error_callback = WebhookNotifier(settings.webhook_url)

        monitor.configure(apply_settings)
        return monitor

    def configure(self, fn: Callable[[Configuration], Any]) -> Configuration:
        """
        Apply ``fn`` to the live configuration.

        Changes persist for every later check and merge with earlier
        configure calls.

        Usage:
            monitor.configure(lambda config: config.use("redis"))
        """
        self.configuration.apply(fn)
        logger.debug(
            f"Configured providers: {[p.name for p in self.configuration.providers]}"
        )
        return self.configuration

    def check(self, request: Any = None) -> StatusReport:
        """
        Run every active provider and aggregate the results.

        Args:
            request: Opaque request context handed to each probe

        Returns:
            StatusReport for this cycle. Probe failures are reported in the
            results, never raised.
        """
        timestamp = self._clock()
        snapshot = self.configuration.snapshot()

        runner = CheckRunner(
            error_callback=snapshot.error_callback,
            timeout=snapshot.probe_timeout,
        )
        results = runner.run(snapshot.providers, request=request, names=snapshot.names)
        status = aggregate_status(results)

        report = StatusReport(status=status, results=results, timestamp=timestamp)
        logger.info(
            f"Check complete: {status.value} "
            f"({len(report.passed_checks)}/{len(results)} passed)"
        )
        return report

    def reset(self) -> None:
        """Return the configuration to its unconfigured state."""
        self.configuration.reset()


# Process-wide default monitor
_default_monitor = Monitor()


def get_monitor() -> Monitor:
    """Get the process-wide default monitor."""
    return _default_monitor


def configure(fn: Callable[[Configuration], Any]) -> Configuration:
    """Configure the default monitor."""
    return _default_monitor.configure(fn)


def check(request: Any = None) -> StatusReport:
    """Run a check cycle on the default monitor."""
    return _default_monitor.check(request=request)


def get_configuration() -> Configuration:
    """Get the default monitor's configuration."""
    return _default_monitor.configuration


def reset_configuration() -> None:
    """Reset the default monitor's configuration."""
    _default_monitor.reset()
