"""Notifier that only writes to the log, used when no channel is configured."""

import logging

from ....core.ports import NotifierPort

logger = logging.getLogger(__name__)


class LogNotifierAdapter(NotifierPort):
    """Logs notifications at INFO level."""

    def notify(self, message: str) -> None:
        logger.info(f"Notification: {message}")
