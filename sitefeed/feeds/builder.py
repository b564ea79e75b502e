"""
Maps site metadata and matched documents onto a Feed.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

import pytz
from dateutil import parser as date_parser

from ..config.settings import DEFAULT_TIMEZONE
from ..models.content import SiteMetadata, ContentDocument
from ..models.options import FeedOptions
from .feed import Feed, FeedItem, Person

logger = logging.getLogger(__name__)


def build_feed(
    documents: List[ContentDocument],
    site: SiteMetadata,
    options: FeedOptions,
    tz_name: str = DEFAULT_TIMEZONE,
) -> Feed:
    """Build a feed from query results.

    Args:
        documents: Matched documents, newest first
        site: Site metadata
        options: Resolved feed options
        tz_name: Zone applied to publish dates that carry no offset

    Returns:
        Feed with one item per document and a single contributor
    """
    author_name = options.author or site.author_name
    output = options.output

    feed = Feed(
        title=options.title or site.title,
        description=options.description or site.description,
        link=options.link or site.site_url,
        id=options.id or site.site_url,
        copyright=options.copyright or default_copyright(author_name),
        feed_links={
            'atom': f"{site.site_url}/{output.atom}",
            'rss2': f"{site.site_url}/{output.rss2}",
            'json': f"{site.site_url}/{output.json}",
        },
        author=_person(author_name, options, site.site_url),
    )

    item_link = options.link or site.site_url
    for document in documents:
        feed.add_item(_build_item(document, site, options, author_name, item_link, tz_name))

    # Passed through as-is, unlike the author emails above
    feed.add_contributor({
        'name': site.author_name,
        'email': options.email,
        'link': site.site_url,
    })

    logger.info(f"Built feed '{feed.title}' with {len(feed.items)} item(s)")
    return feed


def default_copyright(author_name: str) -> str:
    return f"All rights reserved {datetime.now(timezone.utc).year}, {author_name}"


def parse_publish_date(value: Optional[str], tz_name: str = DEFAULT_TIMEZONE) -> Optional[datetime]:
    """Parse a host-formatted publish date into an aware datetime."""
    if value is None or value == '':
        return None

    parsed = date_parser.parse(value)

    if parsed.tzinfo is None:
        parsed = pytz.timezone(tz_name).localize(parsed)
    return parsed


def _build_item(
    document: ContentDocument,
    site: SiteMetadata,
    options: FeedOptions,
    author_name: str,
    author_link: str,
    tz_name: str,
) -> FeedItem:
    url = f"{site.site_url}{document.url}"
    return FeedItem(
        title=document.title,
        id=url,
        link=url,
        date=parse_publish_date(document.date, tz_name),
        content=document.excerpt,
        author=[_person(author_name, options, author_link)],
    )


def _person(name: str, options: FeedOptions, link: str) -> Person:
    """Author record; the email key exists only when an override was given."""
    person: Person = {'name': name, 'link': link}
    if options.has_email:
        person['email'] = options.email
    return person
