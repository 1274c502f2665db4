"""
Pytest configuration and shared fixtures.
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")


@pytest.fixture
def next_race_payload():
    """A Jolpica race table entry for a regular weekend."""
    return {
        "season": "2025",
        "round": "16",
        "raceName": "Italian Grand Prix",
        "Circuit": {
            "circuitId": "monza",
            "circuitName": "Autodromo Nazionale di Monza",
            "Location": {
                "lat": "45.6156",
                "long": "9.28111",
                "locality": "Monza",
                "country": "Italy",
            },
        },
        "date": "2025-09-07",
        "time": "13:00:00Z",
        "FirstPractice": {"date": "2025-09-05", "time": "11:30:00Z"},
        "SecondPractice": {"date": "2025-09-05", "time": "15:00:00Z"},
        "ThirdPractice": {"date": "2025-09-06", "time": "10:30:00Z"},
        "Qualifying": {"date": "2025-09-06", "time": "14:00:00Z"},
    }


@pytest.fixture
def make_circuit_race():
    """Build a Jolpica race entry with results from a list of (status, given, family, team)."""

    def _make(race_name="Italian Grand Prix", results=None):
        entries = [
            {
                "status": status,
                "Driver": {"givenName": given, "familyName": family},
                "Constructor": {"name": team},
            }
            for status, given, family, team in (results or [])
        ]
        return {"raceName": race_name, "Results": entries}

    return _make
