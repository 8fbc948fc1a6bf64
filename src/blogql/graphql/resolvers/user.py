from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_client

if TYPE_CHECKING:
    from ..types.inputs import UserCreateInput
    from ..types.post import Post
    from ..types.user import User

logger = get_logger(__name__)


async def signup_user(info: strawberry.Info, data: UserCreateInput) -> User:
    """Create a user together with any nested posts."""
    from ..types.user import User as UserType

    posts = [asdict(post) for post in data.posts or []]
    user = await get_client(info.context).users.create(
        email=data.email, name=data.name, posts=posts
    )
    return UserType.from_model(user)


async def resolve_user_posts(user: User, info: strawberry.Info) -> list[Post]:
    """Resolve every post written by the user, drafts included."""
    from ..types.post import Post as PostType

    posts = await get_client(info.context).posts.find_many(author_id=str(user.id))
    return [PostType.from_model(post) for post in posts]
