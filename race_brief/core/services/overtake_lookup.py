"""Overtake counts from the community-maintained overtake spreadsheet.

The sheet has no fixed schema. Columns are located by loose header matches and
rows by year plus a case-insensitive substring match on the race name, so a
short sheet name can match an unrelated row.
"""

import csv
import io
import logging

from ..domain.exceptions import UpstreamUnavailableError
from ..ports import OvertakeSheetPort

logger = logging.getLogger(__name__)

YEAR_HEADERS = ("year", "season")
RACE_HEADERS = ("race", "grand prix", "gp")
OVERTAKE_HEADERS = ("overtake",)


def _find_column(headers: list[str], patterns: tuple[str, ...]) -> int | None:
    """Return the index of the first header containing any of the patterns."""
    for index, header in enumerate(headers):
        text = header.strip().lower()
        if any(pattern in text for pattern in patterns):
            return index
    return None


def parse_overtakes(csv_text: str, year: int, sheet_race_name: str) -> int | None:
    """Find the overtake count for a race in the sheet's CSV export.

    Args:
        csv_text: The CSV export, header row first.
        year: Season to match exactly.
        sheet_race_name: Spreadsheet race name, matched as a substring.

    Returns:
        The first matching row's overtake count, or None.
    """
    try:
        rows = list(csv.reader(io.StringIO(csv_text)))
    except csv.Error as e:
        logger.warning(f"Overtake sheet is not valid CSV: {e}")
        return None
    if not rows:
        return None

    headers = rows[0]
    year_col = _find_column(headers, YEAR_HEADERS)
    race_col = _find_column(headers, RACE_HEADERS)
    overtake_col = _find_column(headers, OVERTAKE_HEADERS)
    if year_col is None or race_col is None or overtake_col is None:
        logger.warning(f"Overtake sheet is missing required columns: {headers}")
        return None

    needle = sheet_race_name.lower()
    last_col = max(year_col, race_col, overtake_col)
    for row in rows[1:]:
        if len(row) <= last_col:
            continue
        try:
            row_year = int(row[year_col].strip())
        except ValueError:
            continue
        if row_year != year or needle not in row[race_col].lower():
            continue

        try:
            return int(float(row[overtake_col].strip()))
        except ValueError:
            logger.debug(f"Unparseable overtake count '{row[overtake_col]}' for {year} {sheet_race_name}")
            return None

    return None


class OvertakeLookup:
    """Looks up overtake counts, downloading the sheet once per lookup."""

    def __init__(self, sheet: OvertakeSheetPort) -> None:
        self.sheet = sheet

    def find_overtakes(self, year: int, sheet_race_name: str) -> int | None:
        """Return the overtake count for a race, or None if unavailable."""
        try:
            csv_text = self.sheet.fetch_csv()
        except UpstreamUnavailableError as e:
            logger.warning(f"Overtake sheet unavailable: {e.message}")
            return None
        return parse_overtakes(csv_text, year, sheet_race_name)
