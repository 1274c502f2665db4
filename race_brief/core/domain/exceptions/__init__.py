"""Custom exception hierarchy for the race brief pipeline.

Import from this package directly:

    from race_brief.core.domain.exceptions import RaceBriefError, UpstreamUnavailableError
"""

from .base import RaceBriefError, RaiseSite
from .configuration import ConfigurationError, MissingConfigurationError
from .publishing import NarrativeError, PublishError
from .upstream import NoUpcomingRaceError, UpstreamUnavailableError

__all__ = [
    # Base
    "RaiseSite",
    "RaceBriefError",
    # Upstream
    "UpstreamUnavailableError",
    "NoUpcomingRaceError",
    # Configuration
    "ConfigurationError",
    "MissingConfigurationError",
    # Publishing
    "PublishError",
    "NarrativeError",
]
