"""Outbound booking notifications.

Bookings and cancellations are handed to a notifier. By default the event is
only logged; when ``CLINIC_NOTIFY_WEBHOOK_URL`` is set the event is POSTed as
JSON to that URL using a retrying HTTP session.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Protocol

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from clinic import Appointment

__all__ = [
    "APPOINTMENT_CANCELLED",
    "APPOINTMENT_CREATED",
    "BookingNotifier",
    "LoggingNotifier",
    "NotificationError",
    "WebhookNotifier",
    "build_notifier",
]

logger = logging.getLogger(__name__)

APPOINTMENT_CREATED = "appointment.created"
APPOINTMENT_CANCELLED = "appointment.cancelled"

DEFAULT_WEBHOOK_URL = os.getenv("CLINIC_NOTIFY_WEBHOOK_URL")
DEFAULT_TIMEOUT_SECONDS = float(os.getenv("CLINIC_NOTIFY_TIMEOUT", "10"))
DEFAULT_MAX_RETRIES = 3
DEFAULT_BACKOFF_FACTOR = 0.5


class NotificationError(RuntimeError):
    """Raised when a booking notification cannot be delivered."""


class BookingNotifier(Protocol):
    """Receives booking lifecycle events."""

    def notify(self, event: str, appointment: Appointment) -> None:
        """Deliver ``event`` for ``appointment``."""


def build_payload(event: str, appointment: Appointment) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"event": event}
    payload.update(appointment.to_dict())
    return payload


class LoggingNotifier:
    """Notifier that only writes the event to the log."""

    def notify(self, event: str, appointment: Appointment) -> None:
        patient = appointment.patient
        logger.info(
            "Notification %s for patient %s at %s",
            event,
            patient.name if patient is not None else "N/A",
            appointment.time_slot,
        )


class WebhookNotifier:
    """POSTs booking events to an HTTP endpoint."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        max_retries: int = DEFAULT_MAX_RETRIES,
        backoff_factor: float = DEFAULT_BACKOFF_FACTOR,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not url:
            raise ValueError("url is required for WebhookNotifier")
        self.url = url
        self.timeout = timeout
        self._session = session or self._build_session(
            max_retries=max_retries, backoff_factor=backoff_factor
        )

    @staticmethod
    def _build_session(*, max_retries: int, backoff_factor: float) -> requests.Session:
        session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            connect=max_retries,
            read=max_retries,
            status=max_retries,
            backoff_factor=backoff_factor,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=("POST",),
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def notify(self, event: str, appointment: Appointment) -> None:
        payload = build_payload(event, appointment)
        try:
            response = self._session.post(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Webhook request to %s failed: %s", self.url, exc)
            raise NotificationError(f"Webhook request failed: {exc}") from exc

        if not response.ok:
            logger.error(
                "Webhook responded with status=%s body=%s",
                response.status_code,
                response.text[:2048],
            )
            raise NotificationError(
                f"Webhook responded with unexpected status {response.status_code}"
            )
        logger.debug("Delivered %s notification to %s", event, self.url)


def build_notifier(url: Optional[str] = DEFAULT_WEBHOOK_URL) -> BookingNotifier:
    """Return a webhook notifier when ``url`` is configured, else a logging one."""

    if url:
        return WebhookNotifier(url)
    return LoggingNotifier()
