"""Core services of the race brief pipeline."""

from .backfill_service import BackfillService, count_finished
from .name_reconciler import all_mappings, has_mapping, to_spreadsheet_name
from .next_race_service import NextRaceService
from .overtake_lookup import OvertakeLookup, parse_overtakes
from .publish_service import PublishService, serialize_report
from .race_control_service import RaceControlService
from .report_service import ReportService

__all__ = [
    "BackfillService",
    "NextRaceService",
    "OvertakeLookup",
    "PublishService",
    "RaceControlService",
    "ReportService",
    "all_mappings",
    "count_finished",
    "has_mapping",
    "parse_overtakes",
    "serialize_report",
    "to_spreadsheet_name",
]
