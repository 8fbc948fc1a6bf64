"""
Reusable seed data functions for database initialization.
"""

from __future__ import annotations

from typing import Any

from ..logging import get_logger
from .client import DataClient

logger = get_logger(__name__)

SAMPLE_USERS: list[dict[str, Any]] = [
    {
        "email": "alice@blogql.dev",
        "name": "Alice",
        "posts": [
            {
                "title": "Join the GraphQL community",
                "content": "https://graphql.org/community/",
                "published": True,
            },
        ],
    },
    {
        "email": "bob@blogql.dev",
        "name": "Bob",
        "posts": [
            {
                "title": "Follow the project on GitHub",
                "content": "Stars and issues are welcome.",
                "published": True,
            },
            {
                "title": "Notes on async SQLAlchemy",
                "content": "Draft: sessions, pools and expire_on_commit.",
                "published": False,
            },
        ],
    },
]


async def ensure_user(client: DataClient, user: dict[str, Any]) -> str:
    """
    Ensure a user (and their nested posts) exists.

    Existing users are left untouched, so seeding is safe to re-run.

    Returns:
        ID of the user (existing or newly created)
    """
    existing = await client.users.find_unique(email=user["email"])
    if existing is not None:
        logger.debug("User already exists", user_id=existing.id, email=existing.email)
        return existing.id

    created = await client.users.create(
        email=user["email"], name=user.get("name"), posts=user.get("posts")
    )
    return created.id


async def seed_sample_data(client: DataClient) -> list[str]:
    """Seed the sample users and posts, returning the user IDs."""
    logger.info("Starting database seeding")

    user_ids = [await ensure_user(client, user) for user in SAMPLE_USERS]

    logger.info("Database seeding completed", users=len(user_ids))
    return user_ids
