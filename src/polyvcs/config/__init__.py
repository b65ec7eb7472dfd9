"""Configuration management for polyvcs."""

from polyvcs.config.exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
)
from polyvcs.config.models import PolyVCSConfig

__all__ = [
    "ConfigurationError",
    "InvalidConfigurationError",
    "PolyVCSConfig",
]
