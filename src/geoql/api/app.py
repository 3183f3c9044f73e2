"""
Main FastAPI application for GeoQL
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database import EntityStore, create_store
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting GeoQL API...",
        referential_policy=app.state.store.referential_policy.value,
        **app.state.store.stats(),
    )

    yield

    logger.info("Shutting down GeoQL API...", **app.state.store.stats())


def create_app(store: EntityStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Entity store to serve. A new one is built from settings if omitted.
    """
    app = FastAPI(
        title="GeoQL API",
        description="GraphQL API over countries and their cities",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    if store is None:
        store = create_store(
            referential_policy=settings.referential_policy,
            seed=settings.seed_data,
        )
    app.state.store = store

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

        graphql_router = create_graphql_router(graphiql=settings.graphiql)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "geoql.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
