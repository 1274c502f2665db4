"""Upstream data provider exceptions."""

from .base import RaceBriefError


class UpstreamUnavailableError(RaceBriefError):
    """A required upstream call failed.

    Raised on transport errors, non-success HTTP status codes and
    responses that do not have the expected shape.
    """

    error_code = "RB_UPS_001"


class NoUpcomingRaceError(UpstreamUnavailableError):
    """The schedule provider has no race scheduled."""

    error_code = "RB_UPS_002"
