"""
Settings validation for sitefeed.
"""

from typing import List

import pytz

from .settings import PluginSettings


class ConfigValidator:
    """Validates plugin settings."""

    @staticmethod
    def validate_settings(settings: PluginSettings) -> List[str]:
        """Validate the ambient plugin settings."""
        errors = []

        errors.extend(ConfigValidator._validate_public_dir(settings))
        errors.extend(ConfigValidator._validate_timezone(settings.timezone))

        return errors

    @staticmethod
    def _validate_public_dir(settings: PluginSettings) -> List[str]:
        """The output directory may be missing but must not be a file."""
        errors = []

        if settings.public_dir.exists() and not settings.public_dir.is_dir():
            errors.append(f"Public output path {settings.public_dir} is not a directory")

        return errors

    @staticmethod
    def _validate_timezone(timezone: str) -> List[str]:
        errors = []

        if timezone not in pytz.all_timezones_set:
            errors.append(f"Unknown timezone: {timezone}")

        return errors
