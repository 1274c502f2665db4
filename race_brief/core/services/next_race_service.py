"""Next race resolution and weekend format classification."""

import logging
from typing import Any

from ..domain import (
    RACE_SESSION_LABEL,
    SESSION_LABELS,
    Location,
    RaceSchedule,
    WeekendFormat,
)
from ..domain.exceptions import NoUpcomingRaceError, UpstreamUnavailableError
from ..ports import ScheduleSourcePort

logger = logging.getLogger(__name__)


def _session_timestamp(session: dict[str, Any]) -> str:
    """Join a provider date/time pair into one ISO-8601 timestamp."""
    date = session["date"]
    time = session.get("time")
    return f"{date}T{time}" if time else date


class NextRaceService:
    """Resolves the upcoming race and whether it is a sprint weekend."""

    def __init__(self, schedule: ScheduleSourcePort) -> None:
        self.schedule = schedule

    def resolve_next_race(self) -> RaceSchedule:
        """Fetch the next race of the current season.

        Returns:
            The race schedule with every session the provider lists.

        Raises:
            UpstreamUnavailableError: If the provider failed or returned a
                malformed race table.
            NoUpcomingRaceError: If nothing is scheduled.
        """
        races = self.schedule.get_next_races()
        if not races:
            raise NoUpcomingRaceError("No next race data available")

        race = races[0]
        try:
            sessions: dict[str, str] = {}
            for key, label in SESSION_LABELS.items():
                if race.get(key):
                    sessions[label] = _session_timestamp(race[key])
            sessions[RACE_SESSION_LABEL] = _session_timestamp(race)

            circuit = race["Circuit"]
            location = circuit.get("Location", {})
            schedule = RaceSchedule(
                circuit_id=circuit["circuitId"],
                race_name=race["raceName"],
                round=int(race["round"]),
                season=int(race["season"]),
                circuit_name=circuit.get("circuitName", ""),
                location=Location(
                    lat=location.get("lat", ""),
                    long=location.get("long", ""),
                    locality=location.get("locality", ""),
                    country=location.get("country", ""),
                ),
                sessions=sessions,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamUnavailableError(
                "Malformed next race data",
                cause=e,
                context={"race": race.get("raceName") if isinstance(race, dict) else None},
            ) from e

        logger.info(
            f"Next race: {schedule.race_name} (season {schedule.season}, round {schedule.round})"
        )
        return schedule

    def classify_weekend(self, season: int, round_num: int) -> WeekendFormat:
        """Classify a round as a sprint or regular weekend.

        Raises:
            UpstreamUnavailableError: If the provider failed.
        """
        sprint_races = self.schedule.get_sprint_races(season, round_num)
        weekend_format = WeekendFormat.SPRINT if sprint_races else WeekendFormat.REGULAR
        logger.info(f"Season {season} round {round_num} is a {weekend_format.value} weekend")
        return weekend_format
