"""Race schedule, history and report models.

All models are frozen: they are built once from provider data and never
mutated afterwards. Unknown values are ``None`` and are left out of the
serialized output rather than written as zero.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Provider session key -> output label, in weekend order
SESSION_LABELS: dict[str, str] = {
    "FirstPractice": "firstPractice",
    "SecondPractice": "secondPractice",
    "ThirdPractice": "thirdPractice",
    "Sprint": "sprint",
    "SprintQualifying": "sprintQualifying",
    "Qualifying": "qualifying",
}
RACE_SESSION_LABEL = "race"


class WeekendFormat(Enum):
    """Whether the weekend runs a sprint race in addition to the main race."""

    SPRINT = "sprint"
    REGULAR = "regular"


@dataclass(frozen=True)
class Location:
    """Circuit location.

    Latitude and longitude are kept as the strings the schedule provider
    returns.
    """

    lat: str
    long: str
    locality: str
    country: str

    def to_dict(self) -> dict[str, str]:
        return {
            "lat": self.lat,
            "long": self.long,
            "locality": self.locality,
            "country": self.country,
        }


@dataclass(frozen=True)
class RaceSchedule:
    """The upcoming race and its session start times.

    Attributes:
        circuit_id: Schedule provider circuit identifier (e.g. "monza").
        race_name: Official race name (e.g. "Italian Grand Prix").
        round: Round number within the season.
        season: Season year.
        circuit_name: Full circuit name.
        location: Circuit location.
        sessions: Session label -> ISO-8601 start time. Only sessions present
            in the provider response are included; "race" is always present.
    """

    circuit_id: str
    race_name: str
    round: int
    season: int
    circuit_name: str
    location: Location
    sessions: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "circuitId": self.circuit_id,
            "raceName": self.race_name,
            "round": self.round,
            "season": self.season,
            "circuitName": self.circuit_name,
            "location": self.location.to_dict(),
            "sessions": dict(self.sessions),
        }


@dataclass(frozen=True)
class InterruptionStats:
    """Safety car and red flag counts for one race. Each may be unknown."""

    safety_cars: int | None = None
    red_flags: int | None = None


@dataclass(frozen=True)
class SeasonResult:
    """Outcome of one past edition of the race at a circuit."""

    season: int
    winner: str
    constructor: str
    cars_finished: int
    safety_cars: int | None = None
    red_flags: int | None = None
    overtakes: int | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "season": self.season,
            "winner": self.winner,
            "constructor": self.constructor,
            "carsFinished": self.cars_finished,
        }
        if self.safety_cars is not None:
            result["safetyCars"] = self.safety_cars
        if self.red_flags is not None:
            result["redFlags"] = self.red_flags
        if self.overtakes is not None:
            result["overtakes"] = self.overtakes
        return result


@dataclass(frozen=True)
class AggregateReport:
    """The published document: next race, weekend format, history and narrative."""

    schedule: RaceSchedule
    weekend_format: WeekendFormat
    historical_data: tuple[SeasonResult, ...] = ()
    historical_info: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result = self.schedule.to_dict()
        result["weekendFormat"] = self.weekend_format.value
        result["historicalData"] = [season.to_dict() for season in self.historical_data]
        if self.historical_info:
            result["historicalInfo"] = self.historical_info
        return result
