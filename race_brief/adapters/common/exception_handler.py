"""Structured JSON rendering of exceptions for the CLI and the logs."""

import json
import logging
import traceback
from pathlib import Path
from typing import Any

from ...core.domain.exceptions import RaceBriefError

logger = logging.getLogger(__name__)

UNHANDLED_ERROR_CODE = "RB_UNHANDLED"


def _describe_unhandled(exc: BaseException) -> dict[str, Any]:
    frames = traceback.extract_tb(exc.__traceback__)
    innermost = frames[-1] if frames else None
    return {
        "error": {
            "type": type(exc).__name__,
            "code": UNHANDLED_ERROR_CODE,
            "message": str(exc),
        },
        "location": {
            "class": "<unknown>",
            "method": innermost.name if innermost else "<unknown>",
            "file": Path(innermost.filename).name if innermost else "<unknown>",
            "line": innermost.lineno if innermost else 0,
        },
    }


def format_exception_json(
    exc: BaseException,
    include_trace: bool = False,
    extra_context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Render an exception as a JSON-ready dict.

    Pipeline errors report their own code and raise site. Anything else is
    reported as unhandled and located at the innermost traceback frame.

    Args:
        exc: The exception to render.
        include_trace: Add the formatted traceback, cause chain included.
        extra_context: Merged over the error's own context.
    """
    if isinstance(exc, RaceBriefError):
        result = exc.to_dict()
    else:
        result = _describe_unhandled(exc)

    if extra_context:
        result["context"] = {**result.get("context", {}), **extra_context}

    if include_trace and exc.__traceback__ is not None:
        result["stack_trace"] = [
            line.rstrip() for line in traceback.format_exception(exc) if line.strip()
        ]
    return result


def log_exception(
    exc: BaseException,
    log: logging.Logger | None = None,
    level: int = logging.ERROR,
    extra_context: dict[str, Any] | None = None,
) -> None:
    """Log an exception as one JSON document, traceback included."""
    data = format_exception_json(exc, include_trace=True, extra_context=extra_context)
    (log or logger).log(level, json.dumps(data, indent=2, default=str))
