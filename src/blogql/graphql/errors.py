"""
Error classification and response formatting for GraphQL errors
"""

from typing import Any

from graphql import GraphQLError

from ..errors import (
    GRAPHQL_PARSE_FAILED,
    GRAPHQL_VALIDATION_FAILED,
    INTERNAL_SERVER_ERROR,
    BlogQLError,
)
from ..logging import get_logger

logger = get_logger(__name__)


def resolve_error_code(error: GraphQLError) -> str:
    """Work out the machine-readable code reported for an error.

    Order of precedence: an explicit `extensions.code`, then the code of a
    classified exception raised by a resolver. Errors raised before
    execution (no original exception) are parse or validation failures.
    Everything else is an internal error.
    """
    code = (error.extensions or {}).get("code")
    if code:
        return str(code)

    original = error.original_error
    if isinstance(original, BlogQLError):
        return original.code

    if original is None:
        if error.message.startswith("Syntax Error"):
            return GRAPHQL_PARSE_FAILED
        return GRAPHQL_VALIDATION_FAILED

    return INTERNAL_SERVER_ERROR


def classify_error(error: GraphQLError) -> str:
    """Stamp the resolved code onto the error and log it if it is internal."""
    code = resolve_error_code(error)
    error.extensions = {**(error.extensions or {}), "code": code}

    if code == INTERNAL_SERVER_ERROR:
        logger.error(
            INTERNAL_SERVER_ERROR,
            message=error.message,
            path=error.path,
            exc_info=error.original_error or error,
        )
    return code


def format_error(error: GraphQLError) -> dict[str, Any]:
    """Render an error in the response envelope: message, locations, path, extensions.code."""
    locations = None
    if error.locations:
        locations = [{"line": loc.line, "column": loc.column} for loc in error.locations]

    return {
        "message": error.message,
        "locations": locations,
        "path": error.path,
        "extensions": {"code": resolve_error_code(error)},
    }
