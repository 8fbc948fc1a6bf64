"""
Classified errors raised by the data client.

Each error carries a machine-readable ``code`` that GraphQL responses expose
under ``extensions.code``. Anything raised without a code is reported as
``INTERNAL_SERVER_ERROR``.
"""

from __future__ import annotations

from typing import Any

INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
GRAPHQL_PARSE_FAILED = "GRAPHQL_PARSE_FAILED"
GRAPHQL_VALIDATION_FAILED = "GRAPHQL_VALIDATION_FAILED"


class BlogQLError(Exception):
    """Base class for errors with a client-visible code."""

    code: str = INTERNAL_SERVER_ERROR

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code}


class RecordNotFoundError(BlogQLError):
    """An update or delete targeted a record that does not exist."""

    code = "NOT_FOUND"


class RelationNotFoundError(BlogQLError):
    """A relation could not be connected because the related record is missing."""

    code = "BAD_USER_INPUT"


class UniqueConstraintError(BlogQLError):
    """A create or update collided with a unique constraint."""

    code = "CONFLICT"
