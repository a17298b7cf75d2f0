"""FastAPI application factory.

Lifespan
--------
On startup the app configures logging and builds a single
:class:`~leadsmith.scraper.service.ScrapingService` (shared across requests
via ``request.app.state.scraper``) unless one was injected into
:func:`create_app`.  The service holds only configuration; every request gets
its own HTTP clients and browser.

Routers
-------
    /scrape   : company scraping with backend fallback
    /health   : liveness probe
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from leadsmith import __version__
from leadsmith.config import settings
from leadsmith.logging_setup import configure_logging
from leadsmith.scraper.service import ScrapingService, build_default_service

from leadsmith.api.routers import scrape as scrape_router


def create_app(service: Optional[ScrapingService] = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.log_level)
        app.state.scraper = service or build_default_service(settings)
        yield

    app = FastAPI(
        title="Leadsmith API",
        description=(
            "Turns a company URL into structured company information using "
            "a static fetch, a headless browser, and a remote reader service "
            "as ordered fallbacks."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(scrape_router.router, prefix="/scrape", tags=["scrape"])

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn leadsmith.api.app:app --reload
app = create_app()
