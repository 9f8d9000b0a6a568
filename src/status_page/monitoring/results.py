"""Check results and the aggregate status report."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Iterable, List


class CheckStatus(Enum):
    """Outcome of a single probe."""

    OK = "OK"
    ERROR = "ERROR"


class OverallStatus(Enum):
    """Aggregate outcome of a check cycle."""

    OK = "ok"
    SERVICE_UNAVAILABLE = "service_unavailable"


HTTP_STATUS_CODES = {
    OverallStatus.OK: 200,
    OverallStatus.SERVICE_UNAVAILABLE: 503,
}


@dataclass(frozen=True)
class CheckResult:
    """Result of a single probe."""

    name: str
    message: str
    status: CheckStatus

    @property
    def passed(self) -> bool:
        return self.status == CheckStatus.OK

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "message": self.message,
            "status": self.status.value,
        }


def aggregate_status(results: Iterable[CheckResult]) -> OverallStatus:
    """Reduce probe results to an overall status.

    The status is OK only when every result is OK, which includes the case
    of no results at all.
    """
    if all(r.status == CheckStatus.OK for r in results):
        return OverallStatus.OK
    return OverallStatus.SERVICE_UNAVAILABLE


@dataclass
class StatusReport:
    """Aggregate result of one check cycle."""

    status: OverallStatus
    results: List[CheckResult] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def http_status(self) -> int:
        """HTTP status code matching the overall status."""
        return HTTP_STATUS_CODES[self.status]

    @property
    def passed_checks(self) -> List[CheckResult]:
        """Get all passing results."""
        return [r for r in self.results if r.passed]

    @property
    def failed_checks(self) -> List[CheckResult]:
        """Get all failing results."""
        return [r for r in self.results if not r.passed]

    def summary(self) -> str:
        """Generate a summary string."""
        lines = [
            f"Status: {self.status.value.upper()}",
            f"Time: {self.timestamp.strftime('%Y-%m-%d %H:%M:%S')}",
            f"Passed: {len(self.passed_checks)}/{len(self.results)}",
        ]

        for result in self.failed_checks:
            lines.append(f"  ✗ {result.name}: {result.message}")

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Envelope mapping handed to the transport layer."""
        return {
            "results": [r.to_dict() for r in self.results],
            "status": self.status.value,
            "timestamp": self.timestamp,
        }
