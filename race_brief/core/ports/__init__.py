"""Port interfaces implemented by the outbound adapters."""

from .data_source_port import OvertakeSheetPort, ScheduleSourcePort, TelemetrySourcePort
from .narrative_port import NarrativePort
from .publisher_port import BlobPublisherPort, NotifierPort

__all__ = [
    "BlobPublisherPort",
    "NarrativePort",
    "NotifierPort",
    "OvertakeSheetPort",
    "ScheduleSourcePort",
    "TelemetrySourcePort",
]
