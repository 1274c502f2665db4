"""Historical results backfill for a circuit."""

import logging
from datetime import datetime
from typing import Any

from ..domain import InterruptionStats, SeasonResult
from ..domain.exceptions import UpstreamUnavailableError
from ..ports import ScheduleSourcePort
from .name_reconciler import to_spreadsheet_name
from .overtake_lookup import OvertakeLookup
from .race_control_service import RaceControlService

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = 10
FINISHED_STATUS = "Finished"
LAPPED_MARKER = "Lap"


def count_finished(results: list[dict[str, Any]]) -> int:
    """Count classified finishers, including lapped cars ("+1 Lap", "+2 Laps").

    Entries that are not objects are not counted.
    """
    return sum(
        1
        for r in results
        if isinstance(r, dict)
        and (r.get("status") == FINISHED_STATUS or LAPPED_MARKER in str(r.get("status", "")))
    )


class BackfillService:
    """Builds one SeasonResult per past season raced at a circuit.

    Seasons with no results are skipped. Optional enrichments (overtakes,
    safety cars, red flags) are left unset when their lookup fails.
    """

    def __init__(
        self,
        schedule: ScheduleSourcePort,
        race_control: RaceControlService | None = None,
        overtakes: OvertakeLookup | None = None,
        window: int = DEFAULT_WINDOW,
    ) -> None:
        self.schedule = schedule
        self.race_control = race_control
        self.overtakes = overtakes
        self.window = window

    def seasons(self, current_year: int | None = None) -> range:
        """The lookback seasons, oldest first, excluding the current season."""
        year = current_year or datetime.now().year
        return range(year - self.window, year)

    def backfill(self, circuit_id: str, current_year: int | None = None) -> list[SeasonResult]:
        """Collect past results for a circuit.

        Args:
            circuit_id: Schedule provider circuit identifier.
            current_year: Override for the current calendar year.

        Returns:
            Season results sorted by season, newest first.
        """
        results: list[SeasonResult] = []
        for season in self.seasons(current_year):
            season_result = self.build_season(circuit_id, season)
            if season_result is not None:
                results.append(season_result)

        results.sort(key=lambda r: r.season, reverse=True)
        logger.info(f"Backfilled {len(results)} seasons for circuit '{circuit_id}'")
        return results

    def build_season(self, circuit_id: str, season: int) -> SeasonResult | None:
        """Build the record for one season, or None if it has no usable results."""
        try:
            races = self.schedule.get_circuit_races(season, circuit_id)
        except UpstreamUnavailableError as e:
            logger.warning(f"No data available for {season}: {e.message}")
            return None

        try:
            race = races[0] if races else {}
            results = race.get("Results") or []
            if not results:
                logger.debug(f"No results for '{circuit_id}' in {season}")
                return None
            winner_entry = results[0]
            driver = winner_entry["Driver"]
            winner = f"{driver['givenName']} {driver['familyName']}"
            constructor = winner_entry.get("Constructor", {}).get("name", "")
            cars_finished = count_finished(results)
            race_name = str(race.get("raceName") or "")
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Skipping {season}: malformed result entry ({e})")
            return None

        overtakes = self._lookup_overtakes(season, race_name)
        stats = InterruptionStats()
        # An empty name would match every meeting
        if self.race_control and race_name:
            stats = self.race_control.resolve(season, race_name)

        return SeasonResult(
            season=season,
            winner=winner,
            constructor=constructor,
            cars_finished=cars_finished,
            safety_cars=stats.safety_cars,
            red_flags=stats.red_flags,
            overtakes=overtakes,
        )

    def _lookup_overtakes(self, season: int, race_name: str) -> int | None:
        if self.overtakes is None:
            return None
        sheet_name = to_spreadsheet_name(race_name)
        if sheet_name is None:
            logger.debug(f"No overtake sheet mapping for '{race_name}'")
            return None
        return self.overtakes.find_overtakes(season, sheet_name)
