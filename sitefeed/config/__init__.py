"""
Configuration for sitefeed: environment-backed settings and their validation.
"""

from .settings import PluginSettings, LogLevel
from .environment import EnvironmentLoader
from .validation import ConfigValidator

__all__ = [
    'PluginSettings',
    'LogLevel',
    'EnvironmentLoader',
    'ConfigValidator',
]
