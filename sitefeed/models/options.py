"""
Per-feed plugin options and their defaults.
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT: Dict[str, str] = {
    'atom': 'atom.xml',
    'rss2': 'rss.xml',
    'json': 'feed.json',
}

DEFAULT_OPTIONS: Dict[str, Any] = {
    'match': '/blog/',
    'limit': 10,
    'output': DEFAULT_OUTPUT,
}


@dataclass
class OutputFiles:
    """Filenames of the three serialized feeds, relative to the public dir."""
    atom: str = DEFAULT_OUTPUT['atom']
    rss2: str = DEFAULT_OUTPUT['rss2']
    json: str = DEFAULT_OUTPUT['json']

    @classmethod
    def resolve(cls, output: Optional[Mapping[str, Any]] = None) -> "OutputFiles":
        """Merge caller filenames over the defaults, key by key."""
        merged = {**DEFAULT_OUTPUT, **(output or {})}
        return cls(atom=merged['atom'], rss2=merged['rss2'], json=merged['json'])


@dataclass
class FeedOptions:
    """Resolved options for one feed configuration.

    Every override is optional; unset values fall back to site metadata when
    the feed is built.
    """
    match: str = DEFAULT_OPTIONS['match']
    limit: int = DEFAULT_OPTIONS['limit']
    output: OutputFiles = field(default_factory=OutputFiles)
    title: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    id: Optional[str] = None
    copyright: Optional[str] = None
    author: Optional[str] = None
    # False is accepted as an explicit "no email"
    email: Optional[Union[str, bool]] = None

    @property
    def has_email(self) -> bool:
        """Whether an email override was supplied."""
        return self.email is not None and self.email is not False

    @classmethod
    def resolve(cls, feed_options: Optional[Mapping[str, Any]] = None) -> "FeedOptions":
        """Shallow-merge caller options over DEFAULT_OPTIONS.

        The nested ``output`` mapping is merged on its own so a caller can
        override a single filename.
        """
        feed_options = dict(feed_options or {})
        merged = {**DEFAULT_OPTIONS, **feed_options}

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(merged) - known)
        if unknown:
            logger.debug(f"Ignoring unknown feed option(s): {', '.join(unknown)}")

        values = {key: value for key, value in merged.items() if key in known}
        values['output'] = OutputFiles.resolve(feed_options.get('output'))
        return cls(**values)
