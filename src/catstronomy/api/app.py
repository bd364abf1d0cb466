"""
Main FastAPI application for the Catstronomy API
"""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging_from_settings, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging_from_settings(settings)
logger = get_logger(__name__)


def create_app(transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        transport: Optional transport for the shared outgoing HTTP client
            (tests pass an ``httpx.MockTransport``)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Own the HTTP client every request's data sources share."""
        logger.info("Starting Catstronomy API...", tracks_api_url=settings.tracks_api_url)
        async with httpx.AsyncClient(
            timeout=settings.http_timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        ) as client:
            app.state.http_client = client
            yield
        logger.info("Shutting down Catstronomy API...")

    app = FastAPI(
        title="Catstronomy API",
        description="GraphQL API over the Catstronomy track catalogue",
        version=__version__,
        lifespan=lifespan,
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
        from ..graphql.schema import create_graphql_router, validate_schema

        # Fail fast: never serve with an entity model mismatch
        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()
