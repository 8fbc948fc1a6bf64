"""
Main FastAPI application for blogql
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import Database
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    database: Database = app.state.database

    # Startup
    logger.info("Starting blogql API...")
    database.start()

    ok, error_message = await database.check_connection()
    if ok:
        logger.info("Database connection validation successful")
    else:
        logger.error("Database connection validation failed", error=error_message)
        if settings.environment.lower() in ("production", "prod"):
            raise RuntimeError(error_message)

    if settings.schema_output_path:
        from ..graphql.schema import write_schema_sdl

        write_schema_sdl(settings.schema_output_path)

    yield

    # Shutdown
    logger.info("Shutting down blogql API...")
    await database.dispose()


def create_app(database: Database | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        database: Connection pool shared by every request (built from
            settings when omitted)
    """

    app = FastAPI(
        title="blogql API",
        description="GraphQL API for users, posts and drafts",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.database = database or Database()

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(app.state.database)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint=settings.graphql_path)
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Server should not start with a broken schema
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blogql.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
