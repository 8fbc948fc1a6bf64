from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import RecordNotFoundError
from ...logging import get_logger
from ..context import get_client

if TYPE_CHECKING:
    from ..types.inputs import PostWhereUniqueInput
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_post(info: strawberry.Info, where: PostWhereUniqueInput) -> Post | None:
    """Resolve a single post by its ID."""
    from ..types.post import Post as PostType

    post = await get_client(info.context).posts.find_unique(str(where.id))
    if post is None:
        logger.info("Post not found", post_id=str(where.id))
        return None
    return PostType.from_model(post)


async def resolve_feed(info: strawberry.Info) -> list[Post]:
    """Resolve every published post."""
    from ..types.post import Post as PostType

    posts = await get_client(info.context).posts.find_many(published=True)
    return [PostType.from_model(post) for post in posts]


async def resolve_filter_posts(info: strawberry.Info, search_string: str | None) -> list[Post]:
    """
    Resolve posts whose title or content contains the search string.

    A null search string applies no filter and returns every post, drafts
    included. Case sensitivity follows the database's LIKE semantics.
    """
    from ..types.post import Post as PostType

    posts = await get_client(info.context).posts.find_many(contains=search_string)
    return [PostType.from_model(post) for post in posts]


# Mutation resolvers
async def create_draft(
    info: strawberry.Info, title: str, content: str | None, author_email: str
) -> Post:
    """Create an unpublished post connected to the user with `author_email`."""
    from ..types.post import Post as PostType

    post = await get_client(info.context).posts.create(
        title=title,
        content=content,
        published=False,
        author_email=author_email,
    )
    return PostType.from_model(post)


async def publish_post(info: strawberry.Info, id: strawberry.ID) -> Post | None:
    """Mark a post as published. Returns None when the post does not exist."""
    from ..types.post import Post as PostType

    try:
        post = await get_client(info.context).posts.update(str(id), published=True)
    except RecordNotFoundError:
        logger.info("Cannot publish missing post", post_id=str(id))
        return None
    return PostType.from_model(post)


async def delete_one_post(info: strawberry.Info, where: PostWhereUniqueInput) -> Post | None:
    """Delete a post, returning it as it was before deletion."""
    from ..types.post import Post as PostType

    post = await get_client(info.context).posts.delete(str(where.id))
    return PostType.from_model(post)


# Post field resolvers
async def resolve_post_author(post: Post, info: strawberry.Info) -> User | None:
    """Resolve the author of a post through the per-request user loader."""
    from ..types.user import User as UserType

    user = await info.context["loaders"].user_loader.load(post.author_id)
    if user is None:
        return None
    return UserType.from_model(user)
