"""Notifier that writes emails to the log instead of sending them."""

from __future__ import annotations

import logging

from autorepair.domain.exceptions import NotificationError
from autorepair.domain.service.notifier import Notifier

logger = logging.getLogger(__name__)


class ConsoleNotifier(Notifier):

    def __init__(self, sender: str) -> None:
        self._sender = sender

    def send_email(self, to: str, subject: str, body: str) -> None:
        if not to:
            raise NotificationError("Recipient address is empty")
        logger.info(
            "EMAIL from=%s to=%s subject=%r body=%r",
            self._sender, to, subject, body,
        )
