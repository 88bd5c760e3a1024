"""
Main FastAPI application for the Customers API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import init_database
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


def create_lifespan(database_url: str | None = None):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        # Startup
        logger.info("Starting Customers API...")
        try:
            app.state.database = await init_database(database_url)
        except Exception as e:
            # Fail fast: the service is useless without its store
            logger.error("Failed to initialize database", error=str(e))
            raise

        yield

        # Shutdown
        logger.info("Shutting down Customers API...")
        await app.state.database.dispose()

    return lifespan


def create_app(database_url: str | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        database_url: Store URL; defaults to ``settings.database_url``.
    """
    app = FastAPI(
        title="Customers API",
        description="GraphQL service for registering and managing customers",
        version=__version__,
        lifespan=create_lifespan(database_url),
        debug=settings.debug,
    )

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
        from ..graphql.explorer import create_explorer_router
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

        if settings.graphiql_enabled:
            app.include_router(create_explorer_router("/graphql"), prefix="")
            logger.info("GraphiQL explorer enabled", endpoint="/graphiql")
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
        "customers_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
