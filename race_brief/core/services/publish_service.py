"""Use-case service publishing the next race report."""

from __future__ import annotations

import json
import logging
import traceback

from ..domain import AggregateReport
from ..domain.exceptions import RaceBriefError
from ..ports import BlobPublisherPort, NotifierPort
from .report_service import ReportService

logger = logging.getLogger(__name__)


def serialize_report(report: AggregateReport) -> str:
    """Serialize a report to the published JSON document."""
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)


def describe_failure(exc: Exception) -> str:
    """One-line failure summary naming the error code and the failing step.

    Unexpected exceptions have no error code, so their type and the innermost
    frame of their traceback stand in.
    """
    if isinstance(exc, RaceBriefError):
        return f"Run failed [{exc.error_code}] in {exc.location.step}: {exc.message}"
    frames = traceback.extract_tb(exc.__traceback__)
    step = frames[-1].name if frames else "<unknown>"
    return f"Run failed [{type(exc).__name__}] in {step}: {exc}"


class PublishService:
    """Produces the report, hands it to every publisher and reports the outcome.

    A report is only published once every required step succeeded. Any
    failure is announced through the notifier and re-raised.
    """

    def __init__(
        self,
        reports: ReportService,
        publishers: list[BlobPublisherPort],
        notifier: NotifierPort,
        blob_name: str,
    ) -> None:
        self.reports = reports
        self.publishers = publishers
        self.notifier = notifier
        self.blob_name = blob_name

    def publish(self, report: AggregateReport) -> list[str]:
        """Publish an already produced report.

        Returns:
            One confirmation message per publisher.

        Raises:
            PublishError: If any publisher failed.
        """
        document = serialize_report(report)
        confirmations = []
        for publisher in self.publishers:
            confirmation = publisher.publish(document, self.blob_name)
            logger.info(confirmation)
            confirmations.append(confirmation)
        return confirmations

    def run(self, current_year: int | None = None) -> AggregateReport:
        """Produce and publish the report, notifying success or failure."""
        try:
            report = self.reports.produce_report(current_year=current_year)
            self.publish(report)
        except Exception as e:
            message = describe_failure(e)
            logger.error(message)
            self.notifier.notify(message)
            raise

        schedule = report.schedule
        self.notifier.notify(
            f"Published {self.blob_name}: {schedule.race_name} {schedule.season} "
            f"({report.weekend_format.value} weekend, "
            f"{len(report.historical_data)} past seasons)"
        )
        return report
