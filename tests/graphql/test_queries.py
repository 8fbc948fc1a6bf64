"""
Tests for root queries executed against the schema
"""

import pytest

from blogql.graphql.schema import schema

POST_QUERY = """
    query Post($id: ID!) {
        post(where: { id: $id }) {
            id
            title
            published
            author { email }
        }
    }
"""

FEED_QUERY = """
    query Feed {
        feed { id title published }
    }
"""

FILTER_QUERY = """
    query Filter($searchString: String) {
        filterPosts(searchString: $searchString) { title content }
    }
"""


class TestFeed:
    """Tests for the feed query."""

    @pytest.mark.asyncio
    async def test_feed_returns_only_published_posts(self, graphql_context, alice):
        result = await schema.execute(FEED_QUERY, context_value=graphql_context)

        assert result.errors is None
        titles = [post["title"] for post in result.data["feed"]]
        assert titles == ["Hello World"]
        assert all(post["published"] for post in result.data["feed"])

    @pytest.mark.asyncio
    async def test_feed_is_empty_without_posts(self, graphql_context):
        result = await schema.execute(FEED_QUERY, context_value=graphql_context)

        assert result.errors is None
        assert result.data == {"feed": []}


class TestFilterPosts:
    """Tests for the filterPosts query."""

    @pytest.mark.asyncio
    async def test_matches_title_or_content(self, graphql_context, client, alice):
        await client.posts.create(title="Goodbye", content="see you")

        result = await schema.execute(
            FILTER_QUERY,
            variable_values={"searchString": "hello"},
            context_value=graphql_context,
        )

        assert result.errors is None
        titles = {post["title"] for post in result.data["filterPosts"]}
        # "Hello World" matches on title, "Work in progress" on content
        assert titles == {"Hello World", "Work in progress"}

    @pytest.mark.asyncio
    async def test_null_search_string_returns_every_post(self, graphql_context, alice):
        result = await schema.execute(
            FILTER_QUERY,
            variable_values={"searchString": None},
            context_value=graphql_context,
        )

        assert result.errors is None
        assert len(result.data["filterPosts"]) == 2

    @pytest.mark.asyncio
    async def test_no_match_returns_empty_list(self, graphql_context, alice):
        result = await schema.execute(
            FILTER_QUERY,
            variable_values={"searchString": "zzz"},
            context_value=graphql_context,
        )

        assert result.errors is None
        assert result.data == {"filterPosts": []}


class TestPost:
    """Tests for the post query."""

    @pytest.mark.asyncio
    async def test_post_by_id_resolves_author(self, graphql_context, client, alice):
        post = (await client.posts.find_many(published=True))[0]

        result = await schema.execute(
            POST_QUERY, variable_values={"id": post.id}, context_value=graphql_context
        )

        assert result.errors is None
        assert result.data["post"]["id"] == post.id
        assert result.data["post"]["author"] == {"email": "alice@example.com"}

    @pytest.mark.asyncio
    async def test_missing_post_returns_null(self, graphql_context):
        result = await schema.execute(
            POST_QUERY, variable_values={"id": "missing"}, context_value=graphql_context
        )

        assert result.errors is None
        assert result.data == {"post": None}

    @pytest.mark.asyncio
    async def test_post_without_author_has_null_author(self, graphql_context, client):
        post = await client.posts.create(title="Orphan")

        result = await schema.execute(
            POST_QUERY, variable_values={"id": post.id}, context_value=graphql_context
        )

        assert result.errors is None
        assert result.data["post"]["author"] is None
