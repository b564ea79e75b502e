"""
sitefeed: Atom, RSS and JSON feeds for static sites, generated at build time.
"""

from .plugin import on_post_build, generate_feed
from .exceptions import SiteFeedError, ConfigurationError, QueryError
from .feeds import Feed, FeedItem
from .models import FeedOptions, OutputFiles

__version__ = '1.0.0'

__all__ = [
    'on_post_build',
    'generate_feed',
    'SiteFeedError',
    'ConfigurationError',
    'QueryError',
    'Feed',
    'FeedItem',
    'FeedOptions',
    'OutputFiles',
]
