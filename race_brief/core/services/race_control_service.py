"""Safety car and red flag lookup through the telemetry provider.

The telemetry provider does not share keys with the schedule provider. A race
is located by finding the first meeting of the year whose name contains the
schedule race name, then the race session of that meeting. This is a lossy
substring join: a race name contained in an unrelated meeting name can match
the wrong event.

Every step fails soft and returns None, so a missing meeting or session
produces unknown stats instead of an error.
"""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from ..domain import InterruptionStats
from ..domain.exceptions import UpstreamUnavailableError
from ..ports import TelemetrySourcePort

logger = logging.getLogger(__name__)

RACE_SESSION_TYPE = "Race"
SAFETY_CAR_CATEGORY = "SafetyCar"
RED_FLAG = "RED"
DEPLOYED_MARKER = "DEPLOYED"


def _well_formed(rows: list[Any], what: str) -> list[dict[str, Any]] | None:
    """Return the rows if every one is an object, else log and return None."""
    if all(isinstance(row, dict) for row in rows):
        return rows
    logger.warning(f"Malformed {what} payload from telemetry provider, ignoring it")
    return None


class RaceControlService:
    """Resolves interruption stats for a (year, race name) pair."""

    def __init__(self, telemetry: TelemetrySourcePort) -> None:
        self.telemetry = telemetry

    def resolve_meeting_key(self, year: int, race_name: str) -> int | None:
        """Find the meeting whose name contains the race name (case-insensitive)."""
        try:
            meetings = self.telemetry.get_meetings(year)
        except UpstreamUnavailableError as e:
            logger.warning(f"Meeting lookup failed for {year}: {e.message}")
            return None

        meetings = _well_formed(meetings, f"meetings for {year}")
        if meetings is None:
            return None

        needle = race_name.lower()
        for meeting in meetings:
            if needle in str(meeting.get("meeting_name", "")).lower():
                return meeting.get("meeting_key")

        logger.debug(f"No meeting matching '{race_name}' in {year}")
        return None

    def resolve_session_key(self, meeting_key: int) -> int | None:
        """Find the race session of a meeting.

        Sprint sessions share the "Race" session type, so an entry also named
        "Race" is preferred over the first "Race"-typed entry.
        """
        try:
            sessions = self.telemetry.get_sessions(meeting_key)
        except UpstreamUnavailableError as e:
            logger.warning(f"Session lookup failed for meeting {meeting_key}: {e.message}")
            return None

        sessions = _well_formed(sessions, f"sessions for meeting {meeting_key}")
        if sessions is None:
            return None

        races = [s for s in sessions if s.get("session_type") == RACE_SESSION_TYPE]
        if not races:
            logger.debug(f"No race session for meeting {meeting_key}")
            return None

        for session in races:
            if session.get("session_name") == RACE_SESSION_TYPE:
                return session.get("session_key")
        return races[0].get("session_key")

    def count_safety_cars(self, session_key: int) -> int | None:
        """Count safety car and virtual safety car deployments."""
        try:
            messages = self.telemetry.get_race_control(session_key, category=SAFETY_CAR_CATEGORY)
        except UpstreamUnavailableError as e:
            logger.warning(f"Safety car lookup failed for session {session_key}: {e.message}")
            return None

        messages = _well_formed(messages, f"safety car messages for session {session_key}")
        if messages is None:
            return None
        return sum(
            1 for m in messages if DEPLOYED_MARKER in str(m.get("message") or "").upper()
        )

    def count_red_flags(self, session_key: int) -> int | None:
        """Count red flag messages."""
        try:
            messages = self.telemetry.get_race_control(session_key, flag=RED_FLAG)
        except UpstreamUnavailableError as e:
            logger.warning(f"Red flag lookup failed for session {session_key}: {e.message}")
            return None

        messages = _well_formed(messages, f"red flag messages for session {session_key}")
        if messages is None:
            return None
        return len(messages)

    def fetch_interruptions(self, session_key: int) -> InterruptionStats:
        """Run both message lookups concurrently, each failing independently."""
        lookups: dict[str, Callable[[int], int | None]] = {
            "safety_cars": self.count_safety_cars,
            "red_flags": self.count_red_flags,
        }
        with ThreadPoolExecutor(max_workers=len(lookups)) as executor:
            futures = {name: executor.submit(fn, session_key) for name, fn in lookups.items()}
            counts = {name: future.result() for name, future in futures.items()}

        return InterruptionStats(**counts)

    def resolve(self, year: int, race_name: str) -> InterruptionStats:
        """Resolve interruption stats, stopping at the first missing step."""
        meeting_key = self.resolve_meeting_key(year, race_name)
        if meeting_key is None:
            return InterruptionStats()

        session_key = self.resolve_session_key(meeting_key)
        if session_key is None:
            return InterruptionStats()

        return self.fetch_interruptions(session_key)
