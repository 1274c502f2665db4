"""Use-case service assembling the next race report."""

from __future__ import annotations

import logging

from ..domain import AggregateReport, RaceSchedule
from ..ports import NarrativePort
from .backfill_service import BackfillService
from .next_race_service import NextRaceService

logger = logging.getLogger(__name__)


class ReportService:
    """Orchestrates next race lookup, weekend classification, backfill and narrative.

    Next race resolution and weekend classification are required: their
    errors propagate and no report is produced. Backfill and narrative only
    ever degrade the report.
    """

    def __init__(
        self,
        next_race: NextRaceService,
        backfill: BackfillService,
        narrative: NarrativePort | None = None,
    ) -> None:
        self.next_race = next_race
        self.backfill = backfill
        self.narrative = narrative

    def _historical_info(self, schedule: RaceSchedule) -> str | None:
        if self.narrative is None:
            logger.info("No narrative generator configured, skipping circuit history")
            return None
        return self.narrative.generate_history(
            schedule.circuit_name,
            schedule.race_name,
            schedule.location.locality,
            schedule.location.country,
        )

    def produce_report(self, current_year: int | None = None) -> AggregateReport:
        schedule = self.next_race.resolve_next_race()
        weekend_format = self.next_race.classify_weekend(schedule.season, schedule.round)
        history = self.backfill.backfill(schedule.circuit_id, current_year=current_year)

        return AggregateReport(
            schedule=schedule,
            weekend_format=weekend_format,
            historical_data=tuple(history),
            historical_info=self._historical_info(schedule),
        )
