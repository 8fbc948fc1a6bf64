"""
Post GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from ...dbmodels import Posts
    from .user import User


@strawberry.type
class Post:
    """Post type for GraphQL API."""

    id: strawberry.ID
    created_at: datetime
    updated_at: datetime
    title: str
    content: str | None
    published: bool
    author_id: strawberry.Private[str | None]

    @strawberry.field
    async def author(self, info: strawberry.Info) -> Annotated["User", strawberry.lazy(".user")] | None:  # noqa: E501
        """Get the author of this post."""
        if not self.author_id:
            return None
        from ..resolvers.post import resolve_post_author

        return await resolve_post_author(self, info)

    @classmethod
    def from_model(cls, post: "Posts") -> "Post":
        return cls(
            id=strawberry.ID(post.id),
            created_at=post.created_at,
            updated_at=post.updated_at,
            title=post.title,
            content=post.content,
            published=post.published,
            author_id=post.author_id,
        )
