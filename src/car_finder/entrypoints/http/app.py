from __future__ import annotations

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from car_finder.adapters.http_listing_source import HttpListingSource
from car_finder.adapters.in_memory_key_value_store import InMemoryKeyValueStore
from car_finder.adapters.sql_key_value_store import SqlKeyValueStore
from car_finder.domain.session import CatalogSession
from car_finder.entrypoints.http.exception_handlers import register_exception_handlers
from car_finder.entrypoints.http.routes.cars import router as cars_router
from car_finder.entrypoints.http.routes.health import router as health_router
from car_finder.entrypoints.http.routes.preferences import router as preferences_router
from car_finder.entrypoints.http.routes.wishlist import router as wishlist_router
from car_finder.infra.config import Settings
from car_finder.infra.logging_config import configure_logging
from car_finder.ports.key_value_store import KeyValueStore
from car_finder.ports.listing_source import ListingSource
from car_finder.use_cases.load_catalog import LoadCatalog
from car_finder.use_cases.theme_preference import ThemePreference
from car_finder.use_cases.wishlist_store import WishlistStore

logger = logging.getLogger(__name__)


def build_key_value_store(settings: Settings) -> KeyValueStore:
    if settings.store_backend == "sql":
        return SqlKeyValueStore()
    return InMemoryKeyValueStore()


def build_listing_source(settings: Settings) -> ListingSource:
    return HttpListingSource(
        url=settings.listings_url,
        timeout=settings.listings_timeout_seconds,
    )


def build_app(
    settings: Settings | None = None,
    listing_source: ListingSource | None = None,
    key_value_store: KeyValueStore | None = None,
) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.log_level)

        store = key_value_store or build_key_value_store(settings)
        source = listing_source or build_listing_source(settings)

        # Persisted preferences are read once, before any request is served
        wishlist = WishlistStore(store)
        wishlist.restore()
        theme = ThemePreference(store)
        theme.restore()

        session = CatalogSession()
        app.state.catalog_session = session
        app.state.wishlist = wishlist
        app.state.theme = theme

        # The catalog fetch runs in the background; requests see LOADING until it settles
        load_catalog = LoadCatalog(listing_source=source)
        app.state.catalog_load = asyncio.create_task(
            asyncio.to_thread(load_catalog.execute, session)
        )
        logger.info("Car Finder started", extra={"store_backend": settings.store_backend})

        try:
            yield
        finally:
            task = app.state.catalog_load
            if not task.done():
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task

    app = FastAPI(
        title="Car Finder API",
        description="""
        Browse a vehicle listing catalog and keep a personal wishlist.

        ## Features
        - Filter by brand, fuel, seats and price range
        - Search by model name
        - Sort by price, page through results
        - Persisted wishlist and dark mode preference

        ## Catalog loading
        The catalog is fetched once at startup. Check `/v1/session` for the
        load status; a failed load is reported, never retried.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(cars_router, prefix="/v1")
    app.include_router(wishlist_router, prefix="/v1")
    app.include_router(preferences_router, prefix="/v1")

    return app


app = build_app()
