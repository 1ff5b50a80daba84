"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from food_catalog.api.foods import router as foods_router
from food_catalog.api.ui import router as ui_router
from food_catalog.app_logging import configure_logging
from food_catalog.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting food catalog (environment=%s, schema=%s)",
            container.settings.environment,
            container.settings.supabase_schema,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Food Catalog", lifespan=lifespan)
    app.state.container = container

    app.include_router(foods_router)
    app.include_router(ui_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
