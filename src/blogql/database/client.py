"""Data client: typed accessors for users and posts.

Each call runs in its own session, so every operation commits or rolls back
on its own. Store failures that callers can act on are re-raised as
classified errors from `blogql.errors`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError

from ..dbmodels import Posts, Users
from ..errors import RecordNotFoundError, RelationNotFoundError, UniqueConstraintError
from ..logging import get_logger
from .connection import Database

logger = get_logger(__name__)


class UserDelegate:
    """Accessors for the `users` table."""

    def __init__(self, database: Database):
        self._database = database

    async def find_unique(self, *, id: str | None = None, email: str | None = None) -> Users | None:
        if id is None and email is None:
            raise ValueError("find_unique requires an id or an email")

        async with self._database.session() as session:
            stmt = select(Users)
            if id is not None:
                stmt = stmt.where(Users.id == id)
            if email is not None:
                stmt = stmt.where(Users.email == email)
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def find_many_by_ids(self, ids: Iterable[str]) -> Sequence[Users]:
        ids = list(ids)
        if not ids:
            return []
        async with self._database.session() as session:
            result = await session.execute(select(Users).where(Users.id.in_(ids)))
            return result.scalars().all()

    async def create(
        self,
        *,
        email: str,
        name: str | None = None,
        posts: Iterable[dict[str, Any]] | None = None,
    ) -> Users:
        """Create a user, optionally with nested posts authored by them."""
        async with self._database.session() as session:
            user = Users(email=email, name=name)
            user.posts = [Posts(**values) for values in posts or []]
            session.add(user)
            try:
                await session.flush()
            except IntegrityError as e:
                raise UniqueConstraintError(
                    f"A user with email '{email}' already exists", email=email
                ) from e

            logger.info("Created user", user_id=user.id, nested_posts=len(user.posts))
            return user


class PostDelegate:
    """Accessors for the `posts` table."""

    def __init__(self, database: Database):
        self._database = database

    async def find_unique(self, id: str) -> Posts | None:
        async with self._database.session() as session:
            return await session.get(Posts, id)

    async def find_many(
        self,
        *,
        published: bool | None = None,
        author_id: str | None = None,
        contains: str | None = None,
    ) -> Sequence[Posts]:
        """
        List posts matching every given filter.

        Args:
            published: Only posts with this published flag
            author_id: Only posts written by this user
            contains: Only posts whose title or content contains this text
        """
        stmt = select(Posts)
        if published is not None:
            stmt = stmt.where(Posts.published == published)
        if author_id is not None:
            stmt = stmt.where(Posts.author_id == author_id)
        if contains is not None:
            stmt = stmt.where(
                or_(
                    Posts.title.contains(contains, autoescape=True),
                    Posts.content.contains(contains, autoescape=True),
                )
            )
        stmt = stmt.order_by(Posts.created_at.asc(), Posts.id.asc())

        async with self._database.session() as session:
            result = await session.execute(stmt)
            return result.scalars().all()

    async def create(
        self,
        *,
        title: str,
        content: str | None = None,
        published: bool = False,
        author_email: str | None = None,
    ) -> Posts:
        """Create a post, connecting its author by email when one is given."""
        async with self._database.session() as session:
            post = Posts(title=title, content=content, published=published)

            if author_email is not None:
                result = await session.execute(select(Users.id).where(Users.email == author_email))
                author_id = result.scalar_one_or_none()
                if author_id is None:
                    raise RelationNotFoundError(
                        f"No user found with email '{author_email}' to connect as author",
                        author_email=author_email,
                    )
                post.author_id = author_id

            session.add(post)
            await session.flush()

            logger.info("Created post", post_id=post.id, author_id=post.author_id)
            return post

    async def update(self, id: str, **values: Any) -> Posts:
        async with self._database.session() as session:
            post = await session.get(Posts, id)
            if post is None:
                raise RecordNotFoundError(f"No post found with id '{id}'", id=id)

            for key, value in values.items():
                setattr(post, key, value)
            await session.flush()
            await session.refresh(post)
            return post

    async def delete(self, id: str) -> Posts:
        async with self._database.session() as session:
            post = await session.get(Posts, id)
            if post is None:
                raise RecordNotFoundError(f"No post found with id '{id}'", id=id)

            await session.delete(post)
            await session.flush()

            logger.info("Deleted post", post_id=id)
            return post


class DataClient:
    """Entry point to the store, shared by every request."""

    def __init__(self, database: Database):
        self.database = database
        self.users = UserDelegate(database)
        self.posts = PostDelegate(database)
