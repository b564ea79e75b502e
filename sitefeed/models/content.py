"""
Read-only views of the host's content graph.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class SiteMetadata:
    """Site-wide metadata owned by the host."""
    title: str
    description: str
    site_url: str
    author_name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SiteMetadata":
        """Deserialize from a ``site.siteMetadata`` query node."""
        author = data.get("author") or {}
        return cls(
            title=data.get("title"),
            description=data.get("description"),
            site_url=data.get("siteUrl"),
            author_name=author.get("name"),
        )


@dataclass
class ContentDocument:
    """One matched article."""
    id: str
    excerpt: str
    title: str
    date: Optional[str]  # formatted by the host, e.g. "14 February 2026"
    url: str

    @classmethod
    def from_node(cls, node: Dict[str, Any]) -> "ContentDocument":
        """Deserialize from an ``allMarkdownRemark`` edge node."""
        frontmatter = node.get("frontmatter") or {}
        return cls(
            id=node.get("id"),
            excerpt=node.get("excerpt"),
            title=frontmatter.get("title"),
            date=frontmatter.get("date"),
            url=frontmatter.get("url"),
        )
