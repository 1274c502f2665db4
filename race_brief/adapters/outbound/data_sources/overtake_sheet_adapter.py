"""Downloader for the published CSV export of the overtake spreadsheet."""

import logging
from typing import Any

import requests

from ....core.domain.exceptions import UpstreamUnavailableError
from ....core.ports import OvertakeSheetPort

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30


class OvertakeSheetAdapter(OvertakeSheetPort):
    """Fetches the overtake spreadsheet as CSV text."""

    def __init__(self, csv_url: str, timeout: int = REQUEST_TIMEOUT) -> None:
        """Initialize the downloader.

        Args:
            csv_url: Published CSV export URL of the spreadsheet.
            timeout: Per-request timeout in seconds.
        """
        self.csv_url = csv_url
        self.timeout = timeout
        self.session = requests.Session()

    def __enter__(self) -> "OvertakeSheetAdapter":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()

    def fetch_csv(self) -> str:
        try:
            response = self.session.get(self.csv_url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Overtake sheet download failed: {e}")
            raise UpstreamUnavailableError(
                "Failed to fetch overtake spreadsheet", cause=e, context={"url": self.csv_url}
            ) from e

        # Published sheets are UTF-8, sometimes with a BOM
        response.encoding = "utf-8-sig"
        return response.text
