"""OpenF1 API client for meetings, sessions and race control messages.

OpenF1 API docs: https://openf1.org
No auth required. A 404 means the query matched no rows.
"""

import logging
from typing import Any

import requests

from ....core.domain.exceptions import UpstreamUnavailableError
from ....core.ports import TelemetrySourcePort

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30


class OpenF1Adapter(TelemetrySourcePort):
    """HTTP client for the OpenF1 REST API."""

    BASE_URL = "https://api.openf1.org/v1"

    def __init__(self, base_url: str | None = None, timeout: int = REQUEST_TIMEOUT) -> None:
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def __enter__(self) -> "OpenF1Adapter":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()

    def _get(self, endpoint: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        """Fetch records from an OpenF1 endpoint.

        Args:
            endpoint: Endpoint name (e.g. "sessions").
            params: Query parameters.

        Returns:
            List of records; empty when nothing matched.

        Raises:
            UpstreamUnavailableError: On transport error or non-success status.
        """
        url = f"{self.base_url}/{endpoint}"
        logger.debug(f"Fetching: {url} params={params}")
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            if response.status_code == 404:
                return []
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"OpenF1 {endpoint} request failed: {e}")
            raise UpstreamUnavailableError(
                f"Failed to fetch OpenF1 {endpoint}",
                cause=e,
                context={"url": url, "params": params},
            ) from e

        if not isinstance(data, list):
            raise UpstreamUnavailableError(
                f"Unexpected OpenF1 {endpoint} payload", context={"url": url, "params": params}
            )
        return data

    def get_meetings(self, year: int) -> list[dict[str, Any]]:
        return self._get("meetings", {"year": year})

    def get_sessions(self, meeting_key: int) -> list[dict[str, Any]]:
        return self._get("sessions", {"meeting_key": meeting_key})

    def get_race_control(self, session_key: int, **filters: str) -> list[dict[str, Any]]:
        return self._get("race_control", {"session_key": session_key, **filters})
