"""Check execution and result aggregation."""

from .results import (
    CheckResult,
    CheckStatus,
    OverallStatus,
    StatusReport,
    aggregate_status,
)
from .runner import CheckRunner, failure_message

__all__ = [
    "CheckResult",
    "CheckStatus",
    "CheckRunner",
    "OverallStatus",
    "StatusReport",
    "aggregate_status",
    "failure_message",
]
