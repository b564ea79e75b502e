"""
Atom, RSS and JSON feed generation for sitefeed.
"""

from .feed import Feed, FeedItem
from .builder import build_feed, parse_publish_date
from .query import build_query, run_query, parse_result
from .writer import FeedWriter

__all__ = [
    'Feed',
    'FeedItem',
    'build_feed',
    'parse_publish_date',
    'build_query',
    'run_query',
    'parse_result',
    'FeedWriter',
]
