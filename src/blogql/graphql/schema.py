"""
Main GraphQL schema definition using Strawberry
"""

from pathlib import Path
from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.http import GraphQLHTTPResponse
from strawberry.types import ExecutionContext, ExecutionResult

from ..config import settings
from ..database import Database
from ..logging import get_logger
from .context import build_context
from .errors import classify_error, format_error
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)


class BlogSchema(strawberry.Schema):
    """Schema whose error hook classifies every error and logs internal ones once."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            classify_error(error)


# Create the GraphQL schema
schema = BlogSchema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved type references early so the server fails fast
    instead of erroring on the first request.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        # Check that introspection query works (catches most resolution issues)
        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def write_schema_sdl(path: str | Path) -> Path:
    """Write the schema's SDL type definitions to `path` and return it."""
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(schema.as_str() + "\n", encoding="utf-8")
    logger.info("GraphQL schema written", path=str(output))
    return output


class BlogGraphQLRouter(GraphQLRouter[dict[str, Any], None]):
    """GraphQL router serialising every error as message, locations, path and code."""

    async def process_result(self, request: Request, result: ExecutionResult) -> GraphQLHTTPResponse:
        data: GraphQLHTTPResponse = {"data": result.data}

        if result.errors:
            data["errors"] = [format_error(err) for err in result.errors]
        if result.extensions:
            data["extensions"] = result.extensions

        return data


def create_graphql_router(database: Database) -> BlogGraphQLRouter:
    """Create a GraphQL router for FastAPI."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return build_context(database, request)

    return BlogGraphQLRouter(
        schema,
        path=settings.graphql_path,
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
