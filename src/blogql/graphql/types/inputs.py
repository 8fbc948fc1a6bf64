"""
Input types shared by queries and mutations
"""

import strawberry


@strawberry.input
class PostWhereUniqueInput:
    """Selects a single post."""

    id: strawberry.ID


@strawberry.input
class PostCreateWithoutAuthorInput:
    """Input for a post created together with its author."""

    title: str
    content: str | None = None
    published: bool = False


@strawberry.input
class UserCreateInput:
    """Input for signing up a new user."""

    email: str
    name: str | None = None
    posts: list[PostCreateWithoutAuthorInput] | None = None
