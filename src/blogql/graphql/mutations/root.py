"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.inputs import PostWhereUniqueInput, UserCreateInput
from ..types.post import Post
from ..types.user import User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="signupUser")
    async def signup_user(self, info: strawberry.Info, data: UserCreateInput) -> User:
        """Sign up a new user."""
        from ..resolvers.user import signup_user

        return await signup_user(info, data)

    # Post mutations
    @strawberry.mutation(name="createDraft")
    async def create_draft(
        self,
        info: strawberry.Info,
        title: str,
        author_email: str,
        content: str | None = None,
    ) -> Post:
        """Create an unpublished post for an existing author."""
        from ..resolvers.post import create_draft

        return await create_draft(info, title, content, author_email)

    @strawberry.mutation
    async def publish(self, info: strawberry.Info, id: strawberry.ID) -> Post | None:
        """Publish a post."""
        from ..resolvers.post import publish_post

        return await publish_post(info, id)

    @strawberry.mutation(name="deleteOnePost")
    async def delete_one_post(
        self, info: strawberry.Info, where: PostWhereUniqueInput
    ) -> Post | None:
        """Delete a post."""
        from ..resolvers.post import delete_one_post

        return await delete_one_post(info, where)
