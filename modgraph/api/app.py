"""FastAPI application factory.

Lifespan
--------
On startup the app opens a single :class:`HttpxFetcher` (shared across all
requests) and stores a :class:`WorkshopResolver` built on it in
``request.app.state.resolver``.  On shutdown the fetcher's HTTP client is
closed.

Routers
-------
    /workshop  dependency resolution for workshop items
    /health    liveness probe
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from modgraph import __version__
from modgraph.api.routers import health as health_router
from modgraph.api.routers import workshop as workshop_router
from modgraph.config import settings
from modgraph.workshop import HttpxFetcher, WorkshopResolver


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the HTTP client on startup and close it on shutdown."""
    fetcher = HttpxFetcher()
    app.state.resolver = WorkshopResolver(fetcher, base_url=settings.workshop_base_url)
    try:
        yield
    finally:
        fetcher.close()


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="modgraph API",
        description=(
            "Resolves the scenarios and transitive dependencies of an "
            "Arma Reforger workshop item from its page URL."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(workshop_router.router, prefix="/workshop", tags=["workshop"])
    app.include_router(health_router.router, prefix="/health", tags=["health"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn modgraph.api.app:app --reload
app = create_app()
