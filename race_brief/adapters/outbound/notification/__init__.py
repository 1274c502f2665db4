"""Notification adapters."""

from .log_adapter import LogNotifierAdapter
from .telegram_adapter import TelegramNotifierAdapter

__all__ = ["LogNotifierAdapter", "TelegramNotifierAdapter"]
