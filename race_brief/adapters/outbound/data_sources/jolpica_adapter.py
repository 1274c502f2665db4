"""Jolpica API client for schedule and results data (Ergast successor)."""

import logging
from typing import Any

import requests

from ....core.domain.exceptions import UpstreamUnavailableError
from ....core.ports import ScheduleSourcePort

logger = logging.getLogger(__name__)

# Constants
REQUEST_TIMEOUT = 30
USER_AGENT = "F1-Race-Brief/1.0"


class JolpicaAdapter(ScheduleSourcePort):
    """Client for the Jolpica API (Ergast successor)."""

    BASE_URL = "https://api.jolpi.ca/ergast/f1"

    def __init__(self, base_url: str | None = None, timeout: int = REQUEST_TIMEOUT) -> None:
        """Initialize the client.

        Args:
            base_url: Override for the API root.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def __enter__(self) -> "JolpicaAdapter":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close session."""
        self.close()

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()

    def _get(self, endpoint: str) -> dict[str, Any]:
        """Make a GET request to the API.

        Args:
            endpoint: API endpoint path, without the ``.json`` suffix.

        Returns:
            JSON response as dict.

        Raises:
            UpstreamUnavailableError: On transport error, non-success status
                or a body that is not JSON.
        """
        url = f"{self.base_url}/{endpoint}.json"
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()  # type: ignore[no-any-return]
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Jolpica API error for {endpoint}: {e}")
            raise UpstreamUnavailableError(
                f"Failed to fetch {endpoint}", cause=e, context={"url": url}
            ) from e

    def _races(self, endpoint: str) -> list[dict[str, Any]]:
        """Fetch an endpoint and return its race table entries."""
        data = self._get(endpoint)
        try:
            return data["MRData"]["RaceTable"]["Races"]  # type: ignore[no-any-return]
        except (KeyError, TypeError) as e:
            raise UpstreamUnavailableError(
                f"Malformed race table from {endpoint}", cause=e, context={"endpoint": endpoint}
            ) from e

    def get_next_races(self) -> list[dict[str, Any]]:
        """Get the next race of the current season.

        Returns:
            Race table entries (at most one).
        """
        return self._races("current/next")

    def get_sprint_races(self, season: int, round_num: int) -> list[dict[str, Any]]:
        """Get sprint results for a round.

        Args:
            season: The F1 season year.
            round_num: Round number of the race.

        Returns:
            Race table entries; empty for a regular weekend.
        """
        return self._races(f"{season}/{round_num}/sprint")

    def get_circuit_races(self, season: int, circuit_id: str) -> list[dict[str, Any]]:
        """Get race results at a circuit for one season.

        Args:
            season: The F1 season year.
            circuit_id: Circuit identifier (e.g. "monza").

        Returns:
            Race table entries, each with a ``Results`` list.
        """
        return self._races(f"{season}/circuits/{circuit_id}/results")
