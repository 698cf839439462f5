"""Kitchen API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map KitchenError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Stores constructed on startup via lifespan, discarded on shutdown (no persistence)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Stores live on app.state and reach routes through dependencies: a fresh app
      (or a dependency override) gives a fresh store
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kitchen.api.error_handlers import register_error_handlers
from kitchen.api.routes import health, recipes, shopping_list
from kitchen.config import Settings, get_settings
from kitchen.core.recipes import RecipeStore
from kitchen.core.shopping_list import ShoppingListStore
from kitchen.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def attach_stores(app: FastAPI, settings: Settings) -> None:
    """Build both stores (seeded per settings) and hang them on app.state."""
    app.state.shopping_list = ShoppingListStore(seed=settings.seed_data)
    app.state.recipes = RecipeStore(seed=settings.seed_data)


def detach_stores(app: FastAPI) -> None:
    app.state.shopping_list = None
    app.state.recipes = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    attach_stores(app, settings)
    logger.info(
        "Kitchen API started",
        extra={"count": len(app.state.shopping_list) + len(app.state.recipes)},
    )
    yield
    detach_stores(app)
    logger.info("Kitchen API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application. Stores are attached by the lifespan."""
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name, version=settings.app_version, lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(shopping_list.router)
    app.include_router(recipes.router)

    register_error_handlers(app)
    return app


app = create_app()
