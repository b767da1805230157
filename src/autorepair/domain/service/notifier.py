"""Notification port.

Notifications are advisory: a failed delivery is reported back as a
``NotificationOutcome`` value which callers are free to ignore.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Notifier(ABC):

    @abstractmethod
    def send_email(self, to: str, subject: str, body: str) -> None:
        """Deliver a message. Raises NotificationError on failure."""


@dataclass(frozen=True)
class NotificationOutcome:
    """What happened to the notification that followed a status change."""

    delivered: bool
    recipient: str | None = None
    subject: str | None = None
    error: str | None = None

    @staticmethod
    def sent(recipient: str, subject: str) -> NotificationOutcome:
        return NotificationOutcome(delivered=True, recipient=recipient, subject=subject)

    @staticmethod
    def failed(error: str, recipient: str | None = None, subject: str | None = None) -> NotificationOutcome:
        return NotificationOutcome(
            delivered=False, recipient=recipient, subject=subject, error=error
        )
