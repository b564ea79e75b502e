"""
Shared fixtures: an in-memory stand-in for the host's GraphQL function.
"""

import re
from typing import Any, Dict, List, Optional

import pytest

from sitefeed.config import PluginSettings


SITE_METADATA = {
    "title": "Field Notes",
    "description": "Writing about gardens and code",
    "siteUrl": "https://notes.example.com",
    "author": {"name": "Robin Vale"},
}


def make_node(index: int, date: str, path: str = "blog") -> Dict[str, Any]:
    return {
        "id": f"node-{index}",
        "excerpt": f"Excerpt of post {index}",
        "fileAbsolutePath": f"/site/content/{path}/post-{index}.md",
        "frontmatter": {
            "title": f"Post {index}",
            "date": date,
            "url": f"/{path}/post-{index}/",
        },
    }


DEFAULT_NODES = [
    make_node(1, "03 March 2026"),
    make_node(2, "14 February 2026"),
    make_node(3, "01 January 2026"),
    make_node(4, "20 December 2025", path="notes"),
]


class FakeGraphQL:
    """Answers feed queries from a fixed node list, honouring regex and limit."""

    def __init__(self, nodes: Optional[List[Dict[str, Any]]] = None, errors=None, fail_on_call=None, site_metadata=None):
        self.nodes = DEFAULT_NODES if nodes is None else nodes
        self.site_metadata = SITE_METADATA if site_metadata is None else site_metadata
        self.errors = errors
        self.fail_on_call = fail_on_call
        self.queries: List[str] = []

    async def __call__(self, query: str) -> Dict[str, Any]:
        self.queries.append(query)
        if self.errors and (self.fail_on_call is None or self.fail_on_call == len(self.queries)):
            return {"errors": self.errors}

        regex = re.search(r'regex: "((?:[^"\\]|\\.)*)"', query).group(1)
        limit = int(re.search(r"limit: (\d+)", query).group(1))
        pattern = re.compile(regex.encode().decode("unicode_escape"))

        matched = [n for n in self.nodes if pattern.search(n["fileAbsolutePath"])]
        edges = [{"node": n} for n in matched[:limit]]
        return {
            "data": {
                "site": {"siteMetadata": self.site_metadata},
                "allMarkdownRemark": {"edges": edges},
            }
        }


@pytest.fixture
def graphql():
    return FakeGraphQL()


@pytest.fixture
def settings(tmp_path):
    return PluginSettings(public_dir=tmp_path / "public", timezone="UTC")
