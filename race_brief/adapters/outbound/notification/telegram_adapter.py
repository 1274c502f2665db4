"""Telegram Bot API adapter for run notifications."""

import logging
from typing import Any

import requests

from ....core.ports import NotifierPort

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30
MESSAGE_PREFIX = "NEXT_RACE_INFO: "


class TelegramNotifierAdapter(NotifierPort):
    """Sends notifications to a Telegram chat through the Bot API."""

    BASE_URL = "https://api.telegram.org"

    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        prefix: str = MESSAGE_PREFIX,
        timeout: int = REQUEST_TIMEOUT,
    ) -> None:
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.prefix = prefix
        self.timeout = timeout
        self.session = requests.Session()

    def __enter__(self) -> "TelegramNotifierAdapter":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()

    def notify(self, message: str) -> None:
        url = f"{self.BASE_URL}/bot{self.bot_token}/sendMessage"
        try:
            response = self.session.post(
                url,
                json={"chat_id": self.chat_id, "text": f"{self.prefix}{message}"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            # The token is part of the URL, so only the exception type is logged
            logger.error(f"Failed to send Telegram message: {type(e).__name__}")
