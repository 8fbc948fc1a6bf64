"""
Root GraphQL query definitions
"""

import strawberry

from ..types.inputs import PostWhereUniqueInput
from ..types.post import Post


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def post(self, info: strawberry.Info, where: PostWhereUniqueInput) -> Post | None:
        """Get a post by ID."""
        from ..resolvers.post import resolve_post

        return await resolve_post(info, where)

    @strawberry.field
    async def feed(self, info: strawberry.Info) -> list[Post]:
        """Get all published posts."""
        from ..resolvers.post import resolve_feed

        return await resolve_feed(info)

    @strawberry.field(name="filterPosts")
    async def filter_posts(
        self, info: strawberry.Info, search_string: str | None = None
    ) -> list[Post]:
        """Search posts by title or content."""
        from ..resolvers.post import resolve_filter_posts

        return await resolve_filter_posts(info, search_string)
