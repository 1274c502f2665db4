"""Domain models for the race brief pipeline.

- race: RaceSchedule, Location, WeekendFormat, SeasonResult,
  InterruptionStats and AggregateReport

All models are re-exported here for convenient importing:

    from race_brief.core.domain import RaceSchedule, SeasonResult
"""

from .race import (
    RACE_SESSION_LABEL,
    SESSION_LABELS,
    AggregateReport,
    InterruptionStats,
    Location,
    RaceSchedule,
    SeasonResult,
    WeekendFormat,
)

__all__ = [
    "RACE_SESSION_LABEL",
    "SESSION_LABELS",
    "AggregateReport",
    "InterruptionStats",
    "Location",
    "RaceSchedule",
    "SeasonResult",
    "WeekendFormat",
]
