"""Data Source Port Interfaces."""

from abc import ABC, abstractmethod
from typing import Any


class ScheduleSourcePort(ABC):
    """Abstract interface for the schedule and results provider (Jolpica, Ergast).

    Implementations raise ``UpstreamUnavailableError`` on transport failure
    or a non-success status.
    """

    @abstractmethod
    def get_next_races(self) -> list[dict[str, Any]]:
        """Get the race table entries for the next race of the current season."""
        ...

    @abstractmethod
    def get_sprint_races(self, season: int, round_num: int) -> list[dict[str, Any]]:
        """Get the sprint race table entries for a round."""
        ...

    @abstractmethod
    def get_circuit_races(self, season: int, circuit_id: str) -> list[dict[str, Any]]:
        """Get race table entries, with results, for a circuit in a season."""
        ...


class TelemetrySourcePort(ABC):
    """Abstract interface for the telemetry provider (OpenF1).

    Implementations raise ``UpstreamUnavailableError`` on transport failure
    or a non-success status. A query with no rows returns an empty list.
    """

    @abstractmethod
    def get_meetings(self, year: int) -> list[dict[str, Any]]:
        """Get all meetings (event weekends) for a year."""
        ...

    @abstractmethod
    def get_sessions(self, meeting_key: int) -> list[dict[str, Any]]:
        """Get all sessions of a meeting."""
        ...

    @abstractmethod
    def get_race_control(self, session_key: int, **filters: str) -> list[dict[str, Any]]:
        """Get race control messages of a session, filtered by field values."""
        ...


class OvertakeSheetPort(ABC):
    """Abstract interface for the community overtake spreadsheet."""

    @abstractmethod
    def fetch_csv(self) -> str:
        """Download the published CSV export as text."""
        ...
