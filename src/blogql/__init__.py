"""
blogql
GraphQL API server for a small blog: users, posts, drafts and a public feed
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
