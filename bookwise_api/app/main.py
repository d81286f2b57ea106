"""
Main entrypoint for the BookWise API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, so it can be served directly, e.g.::

    uvicorn bookwise_api.app.main:app --reload

Every app owns one ``Catalog`` (and so one in‑memory store) on
``app.state.catalog``.  Pass your own to ``create_app`` to control
latency or start from a prepared store.
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.catalog import Catalog


def create_app(catalog: Optional[Catalog] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    catalog : Optional[Catalog]
        Operation set the routes delegate to.  A seeded catalogue with
        the configured latency is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    # Initialise logging before anything else so the services can log.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.catalog = catalog if catalog is not None else Catalog()

    app.include_router(v1_router, prefix="/api/v1")

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {"message": f"{settings.project_name} is running...", "version": settings.api_version}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
