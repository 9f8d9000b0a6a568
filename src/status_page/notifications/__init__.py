"""Notifications module for probe failure alerts."""

from .webhook import WebhookNotifier

__all__ = ["WebhookNotifier"]
