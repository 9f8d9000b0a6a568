"""Pluggable health-check aggregator.

Usage:
    import status_page

    def setup(config):
        config.use("database")
        config.use("redis")

    status_page.configure(setup)
    report = status_page.check()
    print(report.to_dict())
"""

from .configuration import Configuration, ConfigurationSnapshot
from .exceptions import (
    InvalidProviderError,
    ProbeFailure,
    ProbeTimeout,
    StatusPageError,
    UnknownProviderError,
)
from .monitor import (
    Monitor,
    check,
    configure,
    get_configuration,
    get_monitor,
    reset_configuration,
)
from .monitoring import (
    CheckResult,
    CheckRunner,
    CheckStatus,
    OverallStatus,
    StatusReport,
    aggregate_status,
)
from .providers import BaseProvider, ProviderRegistry

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "Monitor",
    "check",
    "configure",
    "get_configuration",
    "get_monitor",
    "reset_configuration",
    # Configuration
    "Configuration",
    "ConfigurationSnapshot",
    # Providers
    "BaseProvider",
    "ProviderRegistry",
    # Results
    "CheckResult",
    "CheckRunner",
    "CheckStatus",
    "OverallStatus",
    "StatusReport",
    "aggregate_status",
    # Errors
    "StatusPageError",
    "UnknownProviderError",
    "InvalidProviderError",
    "ProbeFailure",
    "ProbeTimeout",
]
