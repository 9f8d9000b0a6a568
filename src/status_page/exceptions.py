"""Exception hierarchy for the status page.

Registration errors are raised to whoever configures the monitor. Probe
failures are raised inside ``check()`` and turned into ERROR results by the
runner; they never reach the caller of ``Monitor.check``.
"""


class StatusPageError(Exception):
    """Base exception for the status page."""
    pass


class UnknownProviderError(StatusPageError, ValueError):
    """Raised when a provider key has no registered provider type."""
    pass


class InvalidProviderError(StatusPageError, TypeError):
    """Raised when a custom provider does not satisfy the probe contract."""
    pass


class ProbeFailure(StatusPageError):
    """Expected, diagnosable probe failure.

    The message is shown verbatim in the check result. Any other exception
    raised by a probe is reported as ``"Exception"``.
    """
    pass


class ProbeTimeout(ProbeFailure):
    """Probe did not finish within the configured timeout."""
    pass


class DatabaseProbeError(ProbeFailure):
    """Database query failed or could not connect."""
    pass


class RedisProbeError(ProbeFailure):
    """Redis round trip failed or returned a different value."""
    pass


class CeleryProbeError(ProbeFailure):
    """Celery broker unreachable or no workers replied."""
    pass
