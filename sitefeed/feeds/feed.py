"""
Feed object and its Atom 1.0, RSS 2.0 and JSON Feed encoders.

Atom and RSS are rendered by feedgen. feedgen has no JSON Feed writer, so
``json1`` encodes the same data as JSON Feed version 1.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from feedgen.feed import FeedGenerator

GENERATOR = 'sitefeed'
JSON_FEED_VERSION = 'https://jsonfeed.org/version/1'

# A person is a plain mapping with ``name``, ``link`` and, only when one was
# supplied, ``email``. An absent key and an empty value are different things.
Person = Dict[str, Any]


@dataclass
class FeedItem:
    """One entry of a feed."""
    title: str
    id: str
    link: str
    date: Optional[datetime] = None
    content: Optional[str] = None
    author: List[Person] = field(default_factory=list)

    @property
    def display_title(self) -> str:
        """Title to render; untitled documents fall back to their link."""
        return self.title or self.link


class Feed:
    """A syndication feed that can be encoded as Atom, RSS or JSON Feed."""

    def __init__(
        self,
        title: str,
        description: str,
        link: str,
        id: str,
        copyright: Optional[str] = None,
        feed_links: Optional[Dict[str, str]] = None,
        author: Optional[Person] = None,
    ):
        """Initialize a feed.

        Args:
            title: Feed title
            description: Feed description (RSS) / subtitle (Atom)
            link: Canonical link to the site
            id: Feed identifier
            copyright: Rights statement
            feed_links: Self links keyed by format (``atom``, ``rss2``, ``json``)
            author: Primary author
        """
        self.title = title
        self.description = description
        self.link = link
        self.id = id
        self.copyright = copyright
        self.feed_links = dict(feed_links or {})
        self.author = author
        self.items: List[FeedItem] = []
        self.contributors: List[Person] = []

    @property
    def display_description(self) -> str:
        """Description to render; RSS requires one, so the title stands in."""
        return self.description or self.title

    def add_item(self, item: FeedItem) -> None:
        self.items.append(item)

    def add_contributor(self, contributor: Person) -> None:
        self.contributors.append(contributor)

    def atom1(self) -> str:
        """Render as Atom 1.0 XML."""
        fg = self._feed_generator(self.feed_links.get('atom'))
        return fg.atom_str(pretty=True).decode('utf-8')

    def rss2(self) -> str:
        """Render as RSS 2.0 XML."""
        fg = self._feed_generator(self.feed_links.get('rss2'))
        return fg.rss_str(pretty=True).decode('utf-8')

    def json1(self) -> str:
        """Render as JSON Feed version 1."""
        document: Dict[str, Any] = {
            'version': JSON_FEED_VERSION,
            'title': self.title,
        }
        if self.link:
            document['home_page_url'] = self.link
        if self.feed_links.get('json'):
            document['feed_url'] = self.feed_links['json']
        if self.display_description:
            document['description'] = self.display_description
        if self.author:
            document['author'] = _json_author(self.author)

        document['items'] = [self._json_item(item) for item in self.items]
        return json.dumps(document, indent=4, ensure_ascii=False)

    def _json_item(self, item: FeedItem) -> Dict[str, Any]:
        entry: Dict[str, Any] = {
            'id': item.id,
            'content_html': item.content,
        }
        if item.link:
            entry['url'] = item.link
        if item.display_title:
            entry['title'] = item.display_title
        if item.date:
            entry['date_modified'] = item.date.astimezone(timezone.utc).isoformat()
        # JSON Feed 1 has a single author per item
        if item.author:
            entry['author'] = _json_author(item.author[0])
        return entry

    def _feed_generator(self, self_link: Optional[str]) -> FeedGenerator:
        """Build a feedgen generator whose self link points at one format."""
        fg = FeedGenerator()
        fg.id(self.id)
        fg.title(self.title)
        fg.description(self.display_description)
        fg.link(href=self.link, rel='alternate')
        if self_link:
            fg.link(href=self_link, rel='self')
        if self.copyright:
            fg.rights(self.copyright)
        fg.generator(GENERATOR)

        if self.author:
            fg.author(_feedgen_person(self.author))
        for contributor in self.contributors:
            fg.contributor(_feedgen_person(contributor))

        for item in self.items:
            # feedgen prepends by default; keep query order
            entry = fg.add_entry(order='append')
            entry.id(item.id)
            entry.title(item.display_title)
            entry.link(href=item.link)
            if item.date is not None:
                entry.updated(item.date)
                entry.published(item.date)
            if item.content:
                entry.content(item.content, type='html')
            if item.author:
                entry.author([_feedgen_person(a) for a in item.author])

        return fg


def _feedgen_person(person: Person) -> Dict[str, Any]:
    """Map a person to feedgen's ``name``/``email``/``uri`` keys."""
    mapped = {'name': person.get('name')}
    if 'email' in person:
        mapped['email'] = person['email']
    if person.get('link'):
        mapped['uri'] = person['link']
    return mapped


def _json_author(person: Person) -> Dict[str, Any]:
    author = {'name': person.get('name')}
    if person.get('link'):
        author['url'] = person['link']
    return author
