"""
Environment variable handling for sitefeed settings.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from .settings import PluginSettings, LogLevel, DEFAULT_PUBLIC_DIR, DEFAULT_TIMEZONE


class EnvironmentLoader:
    """Loads settings from environment variables."""

    @staticmethod
    def load_config() -> PluginSettings:
        """Load settings from environment variables."""
        # .env next to the site wins over the shell environment
        load_dotenv(override=True)

        public_dir = os.getenv('SITEFEED_PUBLIC_DIR', DEFAULT_PUBLIC_DIR)
        timezone = os.getenv('SITEFEED_TIMEZONE', DEFAULT_TIMEZONE)

        log_level_str = os.getenv('SITEFEED_LOG_LEVEL', 'INFO').upper()
        log_level = LogLevel.INFO  # default
        try:
            log_level = LogLevel(log_level_str)
        except ValueError:
            pass  # Use default

        return PluginSettings(
            public_dir=Path(public_dir or DEFAULT_PUBLIC_DIR),
            timezone=timezone,
            log_level=log_level,
        )
