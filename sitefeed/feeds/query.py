"""
Content graph query for one feed configuration.
"""

import inspect
import json
import logging
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Tuple, Union

from ..exceptions import QueryError, create_error_context
from ..models.content import SiteMetadata, ContentDocument
from ..models.options import FeedOptions

logger = logging.getLogger(__name__)

# Host query function: takes GraphQL text, returns (or resolves to) a response
# mapping with ``data`` and optionally ``errors``.
GraphQLFunction = Callable[[str], Union[Mapping[str, Any], Awaitable[Mapping[str, Any]]]]

EXCERPT_PRUNE_LENGTH = 280
DATE_FORMAT = "DD MMMM YYYY"

FEED_QUERY = """
{{
  site {{
    siteMetadata {{
      title
      description
      author {{
        name
      }}
      siteUrl
    }}
  }}
  allMarkdownRemark(filter: {{fileAbsolutePath: {{regex: {match} }}}}, sort: {{fields: [frontmatter___date], order: DESC}}, limit: {limit}) {{
    edges {{
      node {{
        id
        excerpt(pruneLength: {prune_length})
        frontmatter {{
          date(formatString: {date_format})
          url
          title
        }}
      }}
    }}
  }}
}}
"""


def build_query(options: FeedOptions) -> str:
    """Build the GraphQL query for site metadata and matching documents.

    Documents are filtered by a regex on their source path, sorted newest
    first and capped at ``options.limit``.
    """
    # JSON string escaping is valid GraphQL string literal escaping
    return FEED_QUERY.format(
        match=json.dumps(options.match),
        limit=options.limit,
        prune_length=EXCERPT_PRUNE_LENGTH,
        date_format=json.dumps(DATE_FORMAT),
    )


async def run_query(graphql: GraphQLFunction, query: str) -> Mapping[str, Any]:
    """Run a query through the host and raise QueryError on reported errors."""
    logger.debug(f"Running content query:{query}")

    result = graphql(query)
    if inspect.isawaitable(result):
        result = await result

    errors = result.get("errors")
    if errors:
        if not isinstance(errors, list):
            errors = [errors]
        raise QueryError(
            errors,
            context=create_error_context(operation="content_query"),
        )

    return result


def parse_result(result: Mapping[str, Any]) -> Tuple[SiteMetadata, List[ContentDocument]]:
    """Extract site metadata and documents from a query response."""
    data: Dict[str, Any] = result.get("data") or {}
    site = SiteMetadata.from_dict(data["site"]["siteMetadata"])

    edges = (data.get("allMarkdownRemark") or {}).get("edges") or []
    documents = [ContentDocument.from_node(edge["node"]) for edge in edges]

    return site, documents
