"""Tests for the schedule -> spreadsheet race name table."""

import pytest

from race_brief.core.services.name_reconciler import (
    RACE_NAME_MAPPING,
    all_mappings,
    has_mapping,
    to_spreadsheet_name,
)

pytestmark = pytest.mark.unit


class TestToSpreadsheetName:
    """Tests for to_spreadsheet_name."""

    def test_maps_known_race(self):
        """A known race name should map to its sheet name."""
        assert to_spreadsheet_name("Italian Grand Prix") == "Italy"
        assert to_spreadsheet_name("British Grand Prix") == "Great Britain"

    def test_relocated_events_share_venue_name(self):
        """Styrian and Austrian GPs were both held at the Red Bull Ring."""
        assert to_spreadsheet_name("Styrian Grand Prix") == "Austria"
        assert to_spreadsheet_name("Austrian Grand Prix") == "Austria"
        assert to_spreadsheet_name("70th Anniversary Grand Prix") == "Great Britain"
        assert to_spreadsheet_name("Tuscan Grand Prix") == "Italy"

    def test_unknown_race_returns_none(self):
        """An unknown race name should map to None."""
        assert to_spreadsheet_name("Unknown Grand Prix") is None

    @pytest.mark.parametrize("value", ["", None, 42])
    def test_invalid_input_returns_none(self, value):
        """Empty or non-string input should map to None."""
        assert to_spreadsheet_name(value) is None

    def test_match_is_exact(self):
        """Lookups should not match partial or differently cased names."""
        assert to_spreadsheet_name("italian grand prix") is None


class TestMappingHelpers:
    """Tests for has_mapping and all_mappings."""

    def test_has_mapping(self):
        """has_mapping should reflect table membership."""
        assert has_mapping("Monaco Grand Prix") is True
        assert has_mapping("Unknown Grand Prix") is False

    def test_all_mappings_returns_copy(self):
        """all_mappings should return a copy of the table."""
        mappings = all_mappings()
        mappings["Italian Grand Prix"] = "changed"

        assert RACE_NAME_MAPPING["Italian Grand Prix"] == "Italy"
        assert len(all_mappings()) == len(RACE_NAME_MAPPING)
