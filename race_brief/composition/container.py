"""Composition root wiring adapters to the application services."""

from __future__ import annotations

import logging
from functools import lru_cache

from ..adapters.outbound.data_sources import JolpicaAdapter, OpenF1Adapter, OvertakeSheetAdapter
from ..adapters.outbound.llm import GeminiNarrativeAdapter
from ..adapters.outbound.notification import LogNotifierAdapter, TelegramNotifierAdapter
from ..adapters.outbound.storage import LocalFilePublisherAdapter, S3PublisherAdapter
from ..config import settings
from ..core.domain.exceptions import MissingConfigurationError
from ..core.ports import BlobPublisherPort, NarrativePort, NotifierPort
from ..core.services import (
    BackfillService,
    NextRaceService,
    OvertakeLookup,
    PublishService,
    RaceControlService,
    ReportService,
)

logger = logging.getLogger(__name__)


@lru_cache
def get_schedule_source() -> JolpicaAdapter:
    logger.debug("Initializing JolpicaAdapter...")
    return JolpicaAdapter(base_url=settings.jolpica_base_url, timeout=settings.request_timeout)


@lru_cache
def get_race_control() -> RaceControlService:
    logger.debug("Initializing RaceControlService...")
    telemetry = OpenF1Adapter(base_url=settings.openf1_base_url, timeout=settings.request_timeout)
    return RaceControlService(telemetry)


@lru_cache
def get_overtake_lookup() -> OvertakeLookup | None:
    if not settings.overtake_sheet_csv_url:
        logger.info("OVERTAKE_SHEET_CSV_URL not set, overtake counts disabled")
        return None
    sheet = OvertakeSheetAdapter(settings.overtake_sheet_csv_url, timeout=settings.request_timeout)
    return OvertakeLookup(sheet)


@lru_cache
def get_narrative() -> NarrativePort | None:
    if not settings.google_api_key:
        logger.info("GOOGLE_API_KEY not set, circuit history disabled")
        return None

    from google import genai

    logger.info(f"Initializing Gemini client for model: {settings.llm_model}")
    client = genai.Client(api_key=settings.google_api_key)
    return GeminiNarrativeAdapter(client, model=settings.llm_model)


@lru_cache
def get_publishers() -> tuple[BlobPublisherPort, ...]:
    publishers: list[BlobPublisherPort] = [LocalFilePublisherAdapter(settings.output_dir)]
    if settings.aws_s3_bucket:
        import boto3

        publishers.append(
            S3PublisherAdapter(
                boto3.client("s3"), settings.aws_s3_bucket, prefix=settings.aws_s3_prefix
            )
        )
    else:
        logger.info("AWS_S3_BUCKET not set, publishing to the local file only")
    return tuple(publishers)


@lru_cache
def get_notifier() -> NotifierPort:
    if settings.telegram_bot_token and settings.telegram_chat_id:
        return TelegramNotifierAdapter(settings.telegram_bot_token, settings.telegram_chat_id)
    if settings.telegram_bot_token or settings.telegram_chat_id:
        raise MissingConfigurationError(
            "TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID must be set together",
            context={
                "has_bot_token": bool(settings.telegram_bot_token),
                "has_chat_id": bool(settings.telegram_chat_id),
            },
        )
    logger.info("Telegram not configured, notifications go to the log")
    return LogNotifierAdapter()


@lru_cache
def get_next_race_service() -> NextRaceService:
    return NextRaceService(get_schedule_source())


@lru_cache
def get_backfill_service() -> BackfillService:
    return BackfillService(
        get_schedule_source(),
        race_control=get_race_control(),
        overtakes=get_overtake_lookup(),
        window=settings.history_window,
    )


@lru_cache
def get_report_service() -> ReportService:
    logger.debug("Initializing ReportService...")
    return ReportService(get_next_race_service(), get_backfill_service(), get_narrative())


@lru_cache
def get_publish_service() -> PublishService:
    return PublishService(
        get_report_service(),
        list(get_publishers()),
        get_notifier(),
        blob_name=settings.blob_name,
    )
