"""
Data models for sitefeed.
"""

from .content import SiteMetadata, ContentDocument
from .options import FeedOptions, OutputFiles, DEFAULT_OPTIONS, DEFAULT_OUTPUT

__all__ = [
    'SiteMetadata',
    'ContentDocument',
    'FeedOptions',
    'OutputFiles',
    'DEFAULT_OPTIONS',
    'DEFAULT_OUTPUT',
]
