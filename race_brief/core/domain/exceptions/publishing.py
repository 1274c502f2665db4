"""Publishing and narrative exceptions."""

from .base import RaceBriefError


class PublishError(RaceBriefError):
    """Failed to write or upload the report document.

    Common causes:
    - Bucket does not exist or credentials lack write access
    - Output directory is not writable
    """

    error_code = "RB_PUB_001"


class NarrativeError(RaceBriefError):
    """The LLM provider failed to produce a narrative."""

    error_code = "RB_LLM_001"
