"""
Tests for the data client against an in-memory database
"""

import pytest

from blogql.errors import RecordNotFoundError, RelationNotFoundError, UniqueConstraintError


class TestUserDelegate:
    """Tests for client.users."""

    @pytest.mark.asyncio
    async def test_create_user_with_nested_posts(self, client):
        user = await client.users.create(
            email="bob@example.com",
            name="Bob",
            posts=[{"title": "Nested", "content": None, "published": True}],
        )

        assert user.id
        assert user.email == "bob@example.com"

        posts = await client.posts.find_many(author_id=user.id)
        assert [post.title for post in posts] == ["Nested"]
        assert posts[0].published is True

    @pytest.mark.asyncio
    async def test_create_user_without_name(self, client):
        user = await client.users.create(email="anon@example.com")

        assert user.name is None
        assert await client.posts.find_many(author_id=user.id) == []

    @pytest.mark.asyncio
    async def test_duplicate_email_raises_unique_constraint_error(self, client, alice):
        with pytest.raises(UniqueConstraintError) as exc_info:
            await client.users.create(email=alice.email, name="Impostor")

        assert exc_info.value.code == "CONFLICT"
        assert exc_info.value.extensions == {"code": "CONFLICT"}

    @pytest.mark.asyncio
    async def test_find_unique_by_email_and_id(self, client, alice):
        by_email = await client.users.find_unique(email="alice@example.com")
        by_id = await client.users.find_unique(id=alice.id)

        assert by_email is not None and by_email.id == alice.id
        assert by_id is not None and by_id.email == "alice@example.com"
        assert await client.users.find_unique(email="nobody@example.com") is None

    @pytest.mark.asyncio
    async def test_find_unique_requires_a_key(self, client):
        with pytest.raises(ValueError):
            await client.users.find_unique()

    @pytest.mark.asyncio
    async def test_find_many_by_ids_skips_unknown_ids(self, client, alice):
        users = await client.users.find_many_by_ids([alice.id, "missing"])

        assert [user.id for user in users] == [alice.id]
        assert await client.users.find_many_by_ids([]) == []


class TestPostDelegate:
    """Tests for client.posts."""

    @pytest.mark.asyncio
    async def test_find_many_published_only(self, client, alice):
        posts = await client.posts.find_many(published=True)

        assert [post.title for post in posts] == ["Hello World"]

    @pytest.mark.asyncio
    async def test_find_many_contains_matches_title_or_content(self, client, alice):
        await client.posts.create(title="Unrelated", content="nothing to see")

        posts = await client.posts.find_many(contains="ello")

        assert {post.title for post in posts} == {"Hello World", "Work in progress"}

    @pytest.mark.asyncio
    async def test_find_many_contains_treats_wildcards_literally(self, client, alice):
        await client.posts.create(title="100% coverage", content=None)

        posts = await client.posts.find_many(contains="%")

        assert [post.title for post in posts] == ["100% coverage"]

    @pytest.mark.asyncio
    async def test_find_many_without_filters_returns_everything(self, client, alice):
        posts = await client.posts.find_many()

        assert len(posts) == 2

    @pytest.mark.asyncio
    async def test_create_connects_author_by_email(self, client, alice):
        post = await client.posts.create(title="T", author_email="alice@example.com")

        assert post.author_id == alice.id
        assert post.published is False
        assert post.created_at is not None

    @pytest.mark.asyncio
    async def test_create_with_unknown_author_raises_relation_error(self, client):
        with pytest.raises(RelationNotFoundError) as exc_info:
            await client.posts.create(title="T", author_email="ghost@example.com")

        assert exc_info.value.code == "BAD_USER_INPUT"
        assert await client.posts.find_many() == []

    @pytest.mark.asyncio
    async def test_update_sets_values(self, client, alice):
        draft = (await client.posts.find_many(published=False))[0]

        updated = await client.posts.update(draft.id, published=True)

        assert updated.id == draft.id
        assert updated.published is True
        assert len(await client.posts.find_many(published=True)) == 2

    @pytest.mark.asyncio
    async def test_update_missing_post_raises_not_found(self, client):
        with pytest.raises(RecordNotFoundError) as exc_info:
            await client.posts.update("missing", published=True)

        assert exc_info.value.code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_delete_returns_deleted_post(self, client, alice):
        post = (await client.posts.find_many(published=True))[0]

        deleted = await client.posts.delete(post.id)

        assert deleted.id == post.id
        assert deleted.title == "Hello World"
        assert await client.posts.find_unique(post.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_post_raises_not_found(self, client):
        with pytest.raises(RecordNotFoundError):
            await client.posts.delete("missing")


class TestColumnLengths:
    """Text columns accept any length the store accepts."""

    def test_text_columns_are_unbounded(self):
        from sqlalchemy import Text

        from blogql.dbmodels import Posts, Users

        assert isinstance(Posts.__table__.c.title.type, Text)
        assert Users.__table__.c.email.type.length is None
        assert Users.__table__.c.name.type.length is None

    @pytest.mark.asyncio
    async def test_long_title_and_name_are_stored(self, client):
        user = await client.users.create(email="long@example.com", name="N" * 300)
        post = await client.posts.create(
            title="T" * 300, content="body", author_email="long@example.com"
        )

        assert (await client.users.find_unique(id=user.id)).name == "N" * 300
        assert (await client.posts.find_unique(post.id)).title == "T" * 300
