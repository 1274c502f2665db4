"""Configuration-related exceptions."""

from .base import RaceBriefError


class ConfigurationError(RaceBriefError):
    """Configuration or environment variable errors."""

    error_code = "RB_CFG_001"


class MissingConfigurationError(ConfigurationError):
    """A setting required by the selected adapter is not configured."""

    error_code = "RB_CFG_002"
