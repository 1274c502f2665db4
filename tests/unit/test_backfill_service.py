"""Tests for BackfillService."""

from unittest.mock import MagicMock

import pytest

from race_brief.core.domain import InterruptionStats, SeasonResult
from race_brief.core.domain.exceptions import UpstreamUnavailableError
from race_brief.core.services import BackfillService, count_finished

pytestmark = pytest.mark.unit

CURRENT_YEAR = 2024
WINNER = ("Finished", "Max", "Verstappen", "Red Bull")


@pytest.fixture
def schedule():
    return MagicMock()


@pytest.fixture
def race_control():
    race_control = MagicMock()
    race_control.resolve.return_value = InterruptionStats()
    return race_control


@pytest.fixture
def overtakes():
    overtakes = MagicMock()
    overtakes.find_overtakes.return_value = None
    return overtakes


@pytest.fixture
def service(schedule, race_control, overtakes):
    return BackfillService(schedule, race_control=race_control, overtakes=overtakes)


class TestCountFinished:
    """Tests for count_finished."""

    def test_counts_finished_and_lapped(self):
        """Finished and lapped cars should both count as finishers."""
        statuses = ["Finished", "+1 Lap", "Retired", "Accident"]

        assert count_finished([{"status": s} for s in statuses]) == 2

    def test_counts_multiple_laps(self):
        """Any status mentioning laps should count."""
        assert count_finished([{"status": "+2 Laps"}, {"status": "Lapped"}]) == 2

    def test_missing_status_not_counted(self):
        """Entries without a status should not count."""
        assert count_finished([{}, {"status": None}]) == 0

    def test_non_object_entries_not_counted(self):
        """Null or scalar result entries should be ignored, not raise."""
        assert count_finished([{"status": "Finished"}, None, "Finished"]) == 1


class TestSeasons:
    """Tests for the lookback window."""

    def test_window_excludes_current_season(self, service):
        """The window should cover the ten seasons before the current one."""
        seasons = list(service.seasons(CURRENT_YEAR))

        assert seasons == list(range(2014, 2024))

    def test_custom_window(self, schedule):
        """The window size should be configurable."""
        assert list(BackfillService(schedule, window=3).seasons(2024)) == [2021, 2022, 2023]


class TestBackfill:
    """Tests for backfill."""

    def test_single_season_record(self, service, schedule, make_circuit_race):
        """A monza 2023 win with no telemetry or sheet match has only the required fields."""
        monza_2023 = make_circuit_race(results=[WINNER])
        schedule.get_circuit_races.side_effect = (
            lambda season, circuit_id: [monza_2023] if season == 2023 else []
        )

        results = service.backfill("monza", current_year=CURRENT_YEAR)

        assert len(results) == 1
        assert results[0].to_dict() == {
            "season": 2023,
            "winner": "Max Verstappen",
            "constructor": "Red Bull",
            "carsFinished": 1,
        }
        schedule.get_circuit_races.assert_any_call(2023, "monza")

    def test_results_sorted_descending_and_unique(self, service, schedule, make_circuit_race):
        """Results should be newest first with one record per season."""
        schedule.get_circuit_races.side_effect = lambda season, circuit_id: [
            make_circuit_race(results=[WINNER])
        ]

        results = service.backfill("monza", current_year=CURRENT_YEAR)
        seasons = [r.season for r in results]

        assert seasons == list(range(2023, 2013, -1))
        assert len(set(seasons)) == len(seasons)
        assert all(CURRENT_YEAR - 10 <= s <= CURRENT_YEAR - 1 for s in seasons)

    def test_season_without_results_is_omitted(self, service, schedule, make_circuit_race):
        """A season with no result entries should be left out."""
        def _races(season, circuit_id):
            if season == 2020:
                return [make_circuit_race(results=[])]
            return [make_circuit_race(results=[WINNER])]

        schedule.get_circuit_races.side_effect = _races

        seasons = [r.season for r in service.backfill("monza", current_year=CURRENT_YEAR)]

        assert len(seasons) == 9
        assert 2020 not in seasons

    def test_upstream_failure_skips_only_that_season(self, service, schedule, make_circuit_race):
        """An upstream error should skip only the affected season."""
        def _races(season, circuit_id):
            if season == 2021:
                raise UpstreamUnavailableError("404")
            return [make_circuit_race(results=[WINNER])]

        schedule.get_circuit_races.side_effect = _races

        seasons = [r.season for r in service.backfill("monza", current_year=CURRENT_YEAR)]

        assert len(seasons) == 9
        assert 2021 not in seasons

    def test_malformed_winner_skips_season(self, service, schedule):
        """A winner entry without a driver should skip the season."""
        schedule.get_circuit_races.side_effect = lambda season, circuit_id: [
            {"raceName": "Italian Grand Prix", "Results": [{"status": "Finished"}]}
        ]

        assert service.backfill("monza", current_year=CURRENT_YEAR) == []

    def test_null_result_entry_does_not_abort_backfill(self, service, schedule, make_circuit_race):
        """A null entry in one season's results should not stop the other seasons."""

        def _races(season, circuit_id):
            if season not in (2021, 2022, 2023):
                return []
            race = make_circuit_race(results=[WINNER])
            if season == 2022:
                race["Results"].append(None)
            return [race]

        schedule.get_circuit_races.side_effect = _races

        results = service.backfill("monza", current_year=CURRENT_YEAR)

        assert [r.season for r in results] == [2023, 2022, 2021]
        assert results[1].cars_finished == 1

    def test_malformed_race_entry_skips_season(self, service, schedule, make_circuit_race):
        """A race entry that is not an object should skip only its season."""
        schedule.get_circuit_races.side_effect = lambda season, circuit_id: (
            [None] if season == 2022 else [make_circuit_race(results=[WINNER])]
        )

        seasons = [r.season for r in service.backfill("monza", current_year=CURRENT_YEAR)]

        assert len(seasons) == 9
        assert 2022 not in seasons

    def test_enrichment_attached(self, service, schedule, race_control, overtakes, make_circuit_race):
        """Overtakes and interruption counts should be attached when found."""
        schedule.get_circuit_races.side_effect = lambda season, circuit_id: (
            [make_circuit_race(results=[WINNER, ("+1 Lap", "Lando", "Norris", "McLaren")])]
            if season == 2023
            else []
        )
        race_control.resolve.return_value = InterruptionStats(safety_cars=2, red_flags=0)
        overtakes.find_overtakes.return_value = 45

        [result] = service.backfill("monza", current_year=CURRENT_YEAR)

        assert result == SeasonResult(
            season=2023,
            winner="Max Verstappen",
            constructor="Red Bull",
            cars_finished=2,
            safety_cars=2,
            red_flags=0,
            overtakes=45,
        )
        race_control.resolve.assert_called_once_with(2023, "Italian Grand Prix")
        overtakes.find_overtakes.assert_called_once_with(2023, "Italy")

    def test_partial_interruption_stats(self, service, schedule, race_control, make_circuit_race):
        """Unknown stats should be omitted while known ones are kept."""
        schedule.get_circuit_races.side_effect = lambda season, circuit_id: (
            [make_circuit_race(results=[WINNER])] if season == 2023 else []
        )
        race_control.resolve.return_value = InterruptionStats(safety_cars=None, red_flags=1)

        row = service.backfill("monza", current_year=CURRENT_YEAR)[0].to_dict()

        assert "safetyCars" not in row
        assert row["redFlags"] == 1

    def test_unmapped_race_skips_overtake_lookup(
        self, service, schedule, overtakes, make_circuit_race
    ):
        """Races without a sheet name should not hit the spreadsheet."""
        schedule.get_circuit_races.side_effect = lambda season, circuit_id: (
            [make_circuit_race(race_name="Unknown Grand Prix", results=[WINNER])]
            if season == 2023
            else []
        )

        [result] = service.backfill("nowhere", current_year=CURRENT_YEAR)

        assert result.overtakes is None
        overtakes.find_overtakes.assert_not_called()

    def test_relocated_event_uses_venue_sheet_name(
        self, service, schedule, overtakes, make_circuit_race
    ):
        """Relocated events should use the venue's sheet name."""
        schedule.get_circuit_races.side_effect = lambda season, circuit_id: (
            [make_circuit_race(race_name="Styrian Grand Prix", results=[WINNER])]
            if season == 2020
            else []
        )

        service.backfill("red_bull_ring", current_year=CURRENT_YEAR)

        overtakes.find_overtakes.assert_called_once_with(2020, "Austria")

    def test_works_without_enrichment_sources(self, schedule, make_circuit_race):
        """Backfill should work with no telemetry or spreadsheet configured."""
        schedule.get_circuit_races.side_effect = lambda season, circuit_id: (
            [make_circuit_race(results=[WINNER])] if season == 2023 else []
        )

        [result] = BackfillService(schedule).backfill("monza", current_year=CURRENT_YEAR)

        assert result.safety_cars is None
        assert result.red_flags is None
        assert result.overtakes is None
