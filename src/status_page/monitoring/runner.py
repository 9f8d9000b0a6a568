"""Runs probes and turns their outcomes into check results."""

import threading
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..exceptions import ProbeFailure, ProbeTimeout
from ..utils import get_logger
from .results import CheckResult, CheckStatus

logger = get_logger(__name__)

ErrorCallback = Callable[[BaseException], Any]

# Reported for unexpected errors and for failures without a message
GENERIC_FAILURE_MESSAGE = "Exception"


def failure_message(error: BaseException) -> str:
    """Message shown for a failed probe."""
    if isinstance(error, ProbeFailure):
        return str(error) or GENERIC_FAILURE_MESSAGE
    return GENERIC_FAILURE_MESSAGE


class CheckRunner:
    """Runs each provider's probe in turn, isolating failures.

    A failing probe becomes an ERROR result and never stops the probes
    after it. When ``timeout`` is set each probe runs on its own daemon
    thread and is abandoned once the timeout expires, so a hung dependency
    cannot keep the process alive.
    """

    def __init__(
        self,
        error_callback: Optional[ErrorCallback] = None,
        timeout: Optional[float] = None,
    ):
        self.error_callback = error_callback
        self.timeout = timeout

    def run(
        self,
        providers: Iterable[type],
        request: Any = None,
        names: Optional[Dict[type, str]] = None,
    ) -> List[CheckResult]:
        """
        Run all providers in order.

        Args:
            providers: Provider types, in the order results should appear
            request: Opaque request context passed to each probe
            names: Output name per provider. Providers missing from it
                report under their own ``name``.

        Returns:
            One CheckResult per provider, in the same order
        """
        names = names or {}
        return [
            self._run_provider(provider, request, names.get(provider, provider.name))
            for provider in providers
        ]

    def _run_provider(self, provider: type, request: Any, name: str) -> CheckResult:
        try:
            if self.timeout:
                self._probe_with_timeout(provider, request, name)
            else:
                self._probe(provider, request)
        except Exception as e:
            logger.warning(f"Probe '{name}' failed: {type(e).__name__}: {e}")
            self._notify(name, e)
            return CheckResult(name=name, message=failure_message(e), status=CheckStatus.ERROR)

        logger.debug(f"Probe '{name}' passed")
        return CheckResult(name=name, message="", status=CheckStatus.OK)

    @staticmethod
    def _probe(provider: type, request: Any) -> None:
        provider(request=request).check()

    def _probe_with_timeout(self, provider: type, request: Any, name: str) -> None:
        errors: List[Exception] = []

        def target() -> None:
            try:
                self._probe(provider, request)
            except Exception as e:
                errors.append(e)

        thread = threading.Thread(
            target=target,
            name=f"status-page-{name}",
            daemon=True,
        )
        thread.start()
        thread.join(self.timeout)

        if thread.is_alive():
            logger.debug(f"Abandoning probe thread {thread.name}")
            raise ProbeTimeout(f"timed out after {self.timeout:g}s")
        if errors:
            raise errors[0]

    def _notify(self, name: str, error: Exception) -> None:
        if self.error_callback is None:
            return

        try:
            self.error_callback(error)
        except Exception:
            logger.error(f"Error callback failed for probe '{name}'", exc_info=True)
