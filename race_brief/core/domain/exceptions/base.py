"""Base exception for the race brief pipeline.

Every pipeline error carries an error code and the step (class and method)
that raised it. Failure notifications name that step, so the raise site is
recorded when the error is constructed rather than when it is reported.
"""

import inspect
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class RaiseSite:
    """The code location that constructed a pipeline error."""

    class_name: str
    method_name: str
    file_name: str
    line_number: int
    timestamp: str = field(default_factory=lambda: datetime.now(UTC).isoformat())

    @property
    def step(self) -> str:
        """``Class.method`` for methods, the bare function name otherwise."""
        if self.class_name == "<module>":
            return self.method_name
        return f"{self.class_name}.{self.method_name}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "class": self.class_name,
            "method": self.method_name,
            "file": self.file_name,
            "line": self.line_number,
            "timestamp": self.timestamp,
        }


UNKNOWN_SITE = RaiseSite("<unknown>", "<unknown>", "<unknown>", 0)


class RaceBriefError(Exception):
    """Base exception for all race brief errors.

    Example:
        try:
            response = session.get(url, timeout=timeout)
        except requests.RequestException as e:
            raise UpstreamUnavailableError(
                "Failed to fetch current/next",
                cause=e,
                context={"url": url},
            ) from e
    """

    error_code: str = "RB_ERR_001"

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message.
            cause: The underlying exception, usually the transport or parse error.
            context: Key/value details (URL, season, circuit) for the logs.
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.extra_context = context or {}
        self.location = self._find_raise_site()

    def _find_raise_site(self) -> RaiseSite:
        # Frames whose ``self`` is this error belong to its own constructors,
        # however many subclass __init__ methods are chained.
        frame = inspect.currentframe()
        try:
            while frame is not None and frame.f_locals.get("self") is self:
                frame = frame.f_back
            if frame is None:
                return UNKNOWN_SITE

            owner = frame.f_locals.get("self")
            return RaiseSite(
                class_name=type(owner).__name__ if owner is not None else "<module>",
                method_name=frame.f_code.co_name,
                file_name=Path(frame.f_code.co_filename).name,
                line_number=frame.f_lineno,
            )
        finally:
            del frame

    def to_dict(self) -> dict[str, Any]:
        """Structured form used by the CLI, the JSON logs and notifications."""
        result: dict[str, Any] = {
            "error": {
                "type": type(self).__name__,
                "code": self.error_code,
                "message": self.message,
            },
            "location": self.location.to_dict(),
        }
        if self.extra_context:
            result["context"] = self.extra_context
        if self.cause:
            result["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}
        return result
