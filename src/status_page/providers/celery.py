"""Celery worker probe."""

from ..exceptions import CeleryProbeError
from .base import BaseProvider


class CeleryProvider(BaseProvider):
    """Pings Celery workers through the configured broker."""

    name = "celery"
    description = "Ping Celery workers over the broker"

    # Seconds to wait for worker replies
    ping_timeout: float = 1.0

    def app(self):
        """Create a Celery app bound to the configured broker."""
        # celery is an optional extra
        from celery import Celery

        return Celery(broker=self.settings.celery_broker_url)

    def check(self) -> None:
        try:
            replies = self.app().control.ping(timeout=self.ping_timeout)
        except Exception as e:
            raise CeleryProbeError(str(e)) from e

        if not replies:
            raise CeleryProbeError("no celery workers replied to ping")

        self.logger.debug(f"{len(replies)} celery workers replied")
