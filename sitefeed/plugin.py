"""
Post-build hook: generates Atom, RSS and JSON feeds from the content graph.

The host calls ``on_post_build`` once after content compilation with its
GraphQL query function and the plugin options. Options are either a single
feed configuration (no ``feeds`` key) or a list of configurations under
``feeds``; configurations are processed one after another.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .config import PluginSettings, EnvironmentLoader, ConfigValidator
from .exceptions import ConfigurationError, SiteFeedError, create_error_context
from .feeds.builder import build_feed
from .feeds.query import GraphQLFunction, build_query, run_query, parse_result
from .feeds.writer import FeedWriter
from .models.options import FeedOptions

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = 'sitefeed'


async def on_post_build(
    graphql: GraphQLFunction,
    plugin_options: Optional[Mapping[str, Any]] = None,
    settings: Optional[PluginSettings] = None,
) -> List[Dict[str, Path]]:
    """Generate every configured feed.

    Args:
        graphql: Host query function
        plugin_options: Plugin options from the site config
        settings: Ambient settings; loaded from the environment when omitted

    Returns:
        Written paths per feed configuration, in configuration order

    Raises:
        ConfigurationError: ``feeds`` is present but not a list, or the
            settings are invalid. Raised before any query runs.
        QueryError: A content query reported errors. Later configurations
            are not attempted.
    """
    plugin_options = plugin_options or {}
    feeds = plugin_options.get('feeds')

    if feeds is not None and not isinstance(feeds, list):
        raise ConfigurationError(
            message=f"`feeds` option must be a list, got {type(feeds).__name__}",
            error_code="FEEDS_NOT_A_LIST",
            context=create_error_context(operation="on_post_build"),
            user_message="sitefeed `feeds` option must be an array.",
        )

    settings = _prepare_settings(settings)

    if feeds is None:
        return [await generate_feed(graphql, {}, settings)]

    results = []
    for feed_options in feeds:
        results.append(await generate_feed(graphql, feed_options, settings))
    return results


async def generate_feed(
    graphql: GraphQLFunction,
    feed_options: Optional[Mapping[str, Any]] = None,
    settings: Optional[PluginSettings] = None,
) -> Dict[str, Path]:
    """Query, build and write the three feeds of one configuration."""
    settings = _prepare_settings(settings)
    options = FeedOptions.resolve(feed_options)
    logger.info(f"Generating feed for documents matching {options.match!r} (limit {options.limit})")

    try:
        result = await run_query(graphql, build_query(options))
    except SiteFeedError as e:
        logger.error(f"Failed to generate feed for {options.match!r}: {e.to_dict()}")
        raise
    site, documents = parse_result(result)

    feed = build_feed(documents, site, options, tz_name=settings.timezone)
    return FeedWriter(settings.public_dir).write_all(feed, options.output)


def _prepare_settings(settings: Optional[PluginSettings]) -> PluginSettings:
    """Load settings when not given, validate them and apply the log level."""
    if settings is None:
        settings = EnvironmentLoader.load_config()

    errors = ConfigValidator.validate_settings(settings)
    if errors:
        raise ConfigurationError(
            message=f"Invalid sitefeed settings: {'; '.join(errors)}",
            error_code="INVALID_SETTINGS",
            context=create_error_context(operation="load_settings"),
        )

    logging.getLogger(PACKAGE_LOGGER).setLevel(settings.log_level.value)
    return settings
