"""Logging setup for the race brief pipeline.

Everything logs under the ``race_brief`` namespace to stderr, leaving stdout
for the JSON document printed by ``race-brief run``.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

from ..core.domain.exceptions import RaceBriefError

ROOT_LOGGER = "race_brief"
TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(module)s:%(funcName)s | %(message)s"

# HTTP and SDK clients log every request at INFO/DEBUG
NOISY_LOGGERS = ("urllib3", "botocore", "boto3", "google_genai", "httpx")


class JSONExceptionFormatter(logging.Formatter):
    """One JSON object per record, for scheduled runs feeding a log collector.

    Pipeline errors attached with ``exc_info`` also contribute their error
    code and the step that raised them.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": {
                "file": record.filename,
                "function": record.funcName,
                "line": record.lineno,
            },
        }

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            entry["exception"] = {
                "type": type(exc).__name__,
                "message": str(exc),
                "traceback": self.formatException(record.exc_info),
            }
            if isinstance(exc, RaceBriefError):
                entry["exception"]["code"] = exc.error_code
                entry["exception"]["step"] = exc.location.step

        return json.dumps(entry, ensure_ascii=False)


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_format: bool = False,
) -> logging.Logger:
    """Configure the ``race_brief`` logger tree.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional file receiving the same records as stderr.
        json_format: Emit JSON records instead of text lines.

    Returns:
        The configured root logger of the pipeline.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    formatter: logging.Formatter
    if json_format:
        formatter = JSONExceptionFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logger
