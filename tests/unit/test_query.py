"""
Tests for content query construction and result handling.
"""

import pytest

from sitefeed.exceptions import QueryError
from sitefeed.feeds.query import build_query, run_query, parse_result
from sitefeed.models import FeedOptions

from conftest import FakeGraphQL


class TestBuildQuery:
    """Tests for build_query."""

    def test_filter_sort_and_limit(self):
        query = build_query(FeedOptions.resolve({'match': '/posts/', 'limit': 5}))
        assert 'fileAbsolutePath: {regex: "/posts/" }' in query
        assert 'sort: {fields: [frontmatter___date], order: DESC}' in query
        assert 'limit: 5' in query

    def test_requests_metadata_and_excerpt(self):
        query = build_query(FeedOptions.resolve({}))
        assert 'siteMetadata' in query
        assert 'siteUrl' in query
        assert 'excerpt(pruneLength: 280)' in query
        assert 'date(formatString: "DD MMMM YYYY")' in query

    def test_match_is_escaped_as_string_literal(self):
        query = build_query(FeedOptions.resolve({'match': r'/blog/\d+"x'}))
        assert r'regex: "/blog/\\d+\"x"' in query

    def test_no_unformatted_braces_remain(self):
        query = build_query(FeedOptions.resolve({}))
        assert '{{' not in query
        assert query.count('{') == query.count('}')


class TestRunQuery:
    """Tests for run_query."""

    @pytest.mark.asyncio
    async def test_async_query_function(self):
        fake = FakeGraphQL()
        result = await run_query(fake, build_query(FeedOptions.resolve({})))
        assert 'data' in result
        assert len(fake.queries) == 1

    @pytest.mark.asyncio
    async def test_plain_callable_query_function(self):
        def sync_graphql(query):
            return {'data': {'site': {'siteMetadata': {}}}}

        result = await run_query(sync_graphql, 'query')
        assert result['data']['site'] == {'siteMetadata': {}}

    @pytest.mark.asyncio
    async def test_errors_raise_query_error(self):
        fake = FakeGraphQL(errors=[{'message': 'Cannot query field "url"'}])
        with pytest.raises(QueryError) as exc_info:
            await run_query(fake, build_query(FeedOptions.resolve({})))

        assert exc_info.value.error_code == 'QUERY_FAILED'
        assert exc_info.value.errors == [{'message': 'Cannot query field "url"'}]
        assert 'Cannot query field' in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_empty_error_list_is_success(self):
        def graphql(query):
            return {'data': {}, 'errors': []}

        result = await run_query(graphql, 'query')
        assert result['errors'] == []


class TestParseResult:
    """Tests for parse_result."""

    @pytest.mark.asyncio
    async def test_maps_site_and_documents_in_order(self):
        fake = FakeGraphQL()
        result = await fake(build_query(FeedOptions.resolve({})))
        site, documents = parse_result(result)

        assert site.title == 'Field Notes'
        assert site.site_url == 'https://notes.example.com'
        assert site.author_name == 'Robin Vale'
        assert [d.id for d in documents] == ['node-1', 'node-2', 'node-3']
        assert documents[0].url == '/blog/post-1/'
        assert documents[0].date == '03 March 2026'
        assert documents[0].excerpt == 'Excerpt of post 1'

    def test_no_edges(self):
        result = {'data': {
            'site': {'siteMetadata': {'title': 't', 'siteUrl': 'u', 'author': {'name': 'a'}}},
            'allMarkdownRemark': {'edges': []},
        }}
        site, documents = parse_result(result)
        assert site.author_name == 'a'
        assert documents == []
