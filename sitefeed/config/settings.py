"""
Settings dataclasses for sitefeed.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class LogLevel(Enum):
    """Log levels accepted from the environment."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


DEFAULT_PUBLIC_DIR = "public"
DEFAULT_TIMEZONE = "UTC"


@dataclass
class PluginSettings:
    """Ambient settings shared by every feed configuration of a build."""
    public_dir: Path = Path(DEFAULT_PUBLIC_DIR)
    timezone: str = DEFAULT_TIMEZONE
    log_level: LogLevel = LogLevel.INFO
