"""
Writes serialized feeds into the site's public output directory.
"""

import logging
from pathlib import Path
from typing import Dict

from ..models.options import OutputFiles
from .feed import Feed

logger = logging.getLogger(__name__)


class FeedWriter:
    """
    Writes feed files to the public directory.

    Each write stands alone: a failure propagates without undoing files
    already written.
    """

    def __init__(self, public_dir: Path):
        """
        Initialize feed writer.

        Args:
            public_dir: Directory the host serves as the site root
        """
        self.public_dir = Path(public_dir)

    def write_atom(self, feed: Feed, name: str) -> Path:
        return self._write(name, feed.atom1())

    def write_rss(self, feed: Feed, name: str) -> Path:
        return self._write(name, feed.rss2())

    def write_json(self, feed: Feed, name: str) -> Path:
        return self._write(name, feed.json1())

    def write_all(self, feed: Feed, output: OutputFiles) -> Dict[str, Path]:
        """Write all three formats, in atom, rss2, json order."""
        return {
            'atom': self.write_atom(feed, output.atom),
            'rss2': self.write_rss(feed, output.rss2),
            'json': self.write_json(feed, output.json),
        }

    def _write(self, name: str, content: str) -> Path:
        path = self.public_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
        logger.info(f"Wrote feed: {path}")
        return path
