"""Tests for RaceControlService meeting/session/message resolution."""

import threading
from unittest.mock import MagicMock

import pytest

from race_brief.core.domain import InterruptionStats
from race_brief.core.domain.exceptions import UpstreamUnavailableError
from race_brief.core.services import RaceControlService

pytestmark = pytest.mark.unit


@pytest.fixture
def telemetry():
    return MagicMock()


@pytest.fixture
def service(telemetry):
    return RaceControlService(telemetry)


def _race_control(safety_car=None, red_flag=None):
    """Fake get_race_control answering by filter."""

    def _fake(session_key, **filters):
        if "category" in filters:
            if isinstance(safety_car, Exception):
                raise safety_car
            return safety_car or []
        if isinstance(red_flag, Exception):
            raise red_flag
        return red_flag or []

    return _fake


class TestResolveMeetingKey:
    """Tests for resolve_meeting_key."""

    def test_case_insensitive_substring_match(self, service, telemetry):
        """Meeting names should match case-insensitively by containment."""
        telemetry.get_meetings.return_value = [
            {"meeting_key": 1, "meeting_name": "Bahrain Grand Prix"},
            {"meeting_key": 2, "meeting_name": "ITALIAN GRAND PRIX"},
        ]

        assert service.resolve_meeting_key(2023, "Italian Grand Prix") == 2
        telemetry.get_meetings.assert_called_once_with(2023)

    def test_first_match_wins(self, service, telemetry):
        """The first matching meeting should win."""
        telemetry.get_meetings.return_value = [
            {"meeting_key": 10, "meeting_name": "Italian Grand Prix Testing"},
            {"meeting_key": 11, "meeting_name": "Italian Grand Prix"},
        ]

        assert service.resolve_meeting_key(2023, "Italian Grand Prix") == 10

    def test_no_match_returns_none(self, service, telemetry):
        """No matching meeting should return None."""
        telemetry.get_meetings.return_value = [{"meeting_key": 1, "meeting_name": "Monaco Grand Prix"}]

        assert service.resolve_meeting_key(2023, "British Grand Prix") is None

    def test_transport_error_returns_none(self, service, telemetry):
        """A failed meeting lookup should return None."""
        telemetry.get_meetings.side_effect = UpstreamUnavailableError("down")

        assert service.resolve_meeting_key(2023, "British Grand Prix") is None

    def test_malformed_meeting_returns_none(self, service, telemetry):
        """A non-object meeting record should make the lookup fail soft."""
        telemetry.get_meetings.return_value = [None, {"meeting_key": 1, "meeting_name": "British Grand Prix"}]

        assert service.resolve_meeting_key(2023, "British Grand Prix") is None


class TestResolveSessionKey:
    """Tests for resolve_session_key."""

    def test_selects_race_session(self, service, telemetry):
        """The session typed Race should be selected."""
        telemetry.get_sessions.return_value = [
            {"session_key": 1, "session_type": "Practice", "session_name": "Practice 1"},
            {"session_key": 2, "session_type": "Qualifying", "session_name": "Qualifying"},
            {"session_key": 3, "session_type": "Race", "session_name": "Race"},
        ]

        assert service.resolve_session_key(99) == 3
        telemetry.get_sessions.assert_called_once_with(99)

    def test_prefers_race_over_sprint(self, service, telemetry):
        """The session named Race should win over a sprint."""
        telemetry.get_sessions.return_value = [
            {"session_key": 5, "session_type": "Race", "session_name": "Sprint"},
            {"session_key": 6, "session_type": "Race", "session_name": "Race"},
        ]

        assert service.resolve_session_key(99) == 6

    def test_type_must_match_exactly(self, service, telemetry):
        """The session type should match exactly."""
        telemetry.get_sessions.return_value = [
            {"session_key": 5, "session_type": "race", "session_name": "Race"},
        ]

        assert service.resolve_session_key(99) is None

    def test_error_returns_none(self, service, telemetry):
        """A failed session lookup should return None."""
        telemetry.get_sessions.side_effect = UpstreamUnavailableError("down")

        assert service.resolve_session_key(99) is None

    def test_malformed_session_returns_none(self, service, telemetry):
        """A non-object session record should make the lookup fail soft."""
        telemetry.get_sessions.return_value = ["Race"]

        assert service.resolve_session_key(99) is None


class TestFetchInterruptions:
    """Tests for fetch_interruptions."""

    def test_counts_deployments_and_red_flags(self, service, telemetry):
        """Only deployments should count as safety cars."""
        telemetry.get_race_control.side_effect = _race_control(
            safety_car=[
                {"message": "SAFETY CAR DEPLOYED"},
                {"message": "SAFETY CAR IN THIS LAP"},
                {"message": "Virtual Safety Car Deployed"},
                {"message": "VIRTUAL SAFETY CAR ENDING"},
            ],
            red_flag=[{"message": "RED FLAG"}],
        )

        stats = service.fetch_interruptions(123)

        assert stats == InterruptionStats(safety_cars=2, red_flags=1)

    def test_queries_by_category_and_flag(self, service, telemetry):
        """Both lookups should use the provider's filters."""
        telemetry.get_race_control.return_value = []

        service.fetch_interruptions(123)

        telemetry.get_race_control.assert_any_call(123, category="SafetyCar")
        telemetry.get_race_control.assert_any_call(123, flag="RED")

    def test_zero_counts_are_known(self, service, telemetry):
        """No messages should mean zero, not unknown."""
        telemetry.get_race_control.return_value = []

        assert service.fetch_interruptions(123) == InterruptionStats(safety_cars=0, red_flags=0)

    def test_safety_car_failure_keeps_red_flags(self, service, telemetry):
        """A failed safety car lookup should keep the red flag count."""
        telemetry.get_race_control.side_effect = _race_control(
            safety_car=UpstreamUnavailableError("down"),
            red_flag=[{"message": "RED FLAG"}, {"message": "RED FLAG"}],
        )

        assert service.fetch_interruptions(123) == InterruptionStats(safety_cars=None, red_flags=2)

    def test_red_flag_failure_keeps_safety_cars(self, service, telemetry):
        """A failed red flag lookup should keep the safety car count."""
        telemetry.get_race_control.side_effect = _race_control(
            safety_car=[{"message": "SAFETY CAR DEPLOYED"}],
            red_flag=UpstreamUnavailableError("down"),
        )

        assert service.fetch_interruptions(123) == InterruptionStats(safety_cars=1, red_flags=None)

    def test_malformed_messages_fail_only_their_lookup(self, service, telemetry):
        """A malformed safety car payload should leave the red flag count intact."""
        telemetry.get_race_control.side_effect = _race_control(
            safety_car=[None], red_flag=[{"flag": "RED"}]
        )

        assert service.fetch_interruptions(123) == InterruptionStats(safety_cars=None, red_flags=1)

    def test_malformed_red_flags_return_none(self, service, telemetry):
        """A red flag payload with non-object rows should count as unknown."""
        telemetry.get_race_control.side_effect = _race_control(
            safety_car=[{"message": "SAFETY CAR DEPLOYED"}], red_flag=["RED"]
        )

        assert service.fetch_interruptions(123) == InterruptionStats(safety_cars=1, red_flags=None)

    def test_lookups_run_concurrently(self, service, telemetry):
        """Each lookup waits for the other to start, which deadlocks if run in sequence."""
        barrier = threading.Barrier(2, timeout=5)

        def _fake(session_key, **filters):
            barrier.wait()
            return []

        telemetry.get_race_control.side_effect = _fake

        assert service.fetch_interruptions(123) == InterruptionStats(safety_cars=0, red_flags=0)


class TestResolve:
    """Tests for the full resolution chain."""

    def test_full_chain(self, service, telemetry):
        """Meeting, session and messages should resolve to counts."""
        telemetry.get_meetings.return_value = [{"meeting_key": 7, "meeting_name": "British Grand Prix"}]
        telemetry.get_sessions.return_value = [
            {"session_key": 70, "session_type": "Race", "session_name": "Race"}
        ]
        telemetry.get_race_control.side_effect = _race_control(
            safety_car=[{"message": "SAFETY CAR DEPLOYED"}], red_flag=[]
        )

        stats = service.resolve(2022, "British Grand Prix")

        assert stats == InterruptionStats(safety_cars=1, red_flags=0)
        telemetry.get_sessions.assert_called_once_with(7)

    def test_missing_meeting_short_circuits(self, service, telemetry):
        """No meeting should stop the chain before any further call."""
        telemetry.get_meetings.return_value = []

        stats = service.resolve(2022, "British Grand Prix")

        assert stats.safety_cars is None
        assert stats.red_flags is None
        telemetry.get_sessions.assert_not_called()
        telemetry.get_race_control.assert_not_called()

    def test_missing_session_short_circuits(self, service, telemetry):
        """No race session should stop the chain before message lookups."""
        telemetry.get_meetings.return_value = [{"meeting_key": 7, "meeting_name": "British Grand Prix"}]
        telemetry.get_sessions.return_value = []

        assert service.resolve(2022, "British Grand Prix") == InterruptionStats()
        telemetry.get_race_control.assert_not_called()
