"""Webhook alerts for failing probes.

A WebhookNotifier is callable with the exception raised by a probe, so it can
be installed directly as the monitor's error callback:

    config.error_callback = WebhookNotifier("https://hooks.example.com/...")
"""

import socket
from datetime import datetime
from typing import Optional

import requests

from ..config import get_settings
from ..utils.logging import get_logger
from ..utils.retry import retry_with_backoff

logger = get_logger(__name__)


class WebhookNotifier:
    """Posts probe failures to a webhook as JSON."""

    def __init__(
        self,
        webhook_url: Optional[str] = None,
        timeout: float = 10,
        max_retries: int = 3,
    ):
        """Initialize webhook notifier.

        Args:
            webhook_url: Webhook URL. If None, uses settings.
            timeout: Request timeout in seconds
            max_retries: Delivery retries after the first attempt
        """
        self.webhook_url = webhook_url or get_settings().webhook_url
        self.timeout = timeout
        self.max_retries = max_retries
        # Retries spent across all alerts sent by this notifier
        self.retry_count = 0

        if not self.webhook_url:
            logger.warning("Webhook URL not configured")

    @property
    def enabled(self) -> bool:
        """Check if webhook alerts are enabled."""
        return bool(self.webhook_url)

    def _post(self, payload: dict) -> None:
        response = requests.post(
            self.webhook_url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        response.raise_for_status()

    def _record_retry(self, error: Exception, attempt: int) -> None:
        self.retry_count += 1

    def build_payload(self, error: BaseException) -> dict:
        """Build the alert payload for a probe failure."""
        return {
            "event": "probe_failure",
            "error": type(error).__name__,
            "message": str(error),
            "host": socket.gethostname(),
            "timestamp": datetime.now().isoformat(),
        }

    def send_alert(self, error: BaseException) -> bool:
        """
        Send an alert for a probe failure, retrying with backoff.

        Args:
            error: Exception raised by the probe

        Returns:
            True if sent successfully, False when disabled or delivery failed
        """
        if not self.enabled:
            logger.debug("Webhook alerts disabled, skipping")
            return False

        post = retry_with_backoff(
            max_retries=self.max_retries,
            initial_delay=1.0,
            exceptions=(requests.exceptions.RequestException,),
            on_retry=self._record_retry,
        )(self._post)

        try:
            post(self.build_payload(error))
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to send webhook alert: {e}")
            return False

        logger.info("Webhook alert sent")
        return True

    def __call__(self, error: BaseException) -> bool:
        return self.send_alert(error)
