"""
Main entrypoint for the Customer Manager API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time as
``app`` so it can be served directly, e.g.::

    uvicorn customer_manager_api.app.main:app --reload

Settings are read from the environment once, here, and stored on
``app.state``; nothing else reads the environment.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core import db
from .core.config import Settings
from .core.logging_config import setup_logging
from .repositories import MongoRepository
from .schemas.customer import Customer
from .schemas.user import User

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the MongoDB client, ensure indexes and build the repositories for the app's lifetime."""
    settings: Settings = app.state.settings
    client = db.connect(settings)
    app.state.mongo_client = client
    app.state.customer_repository = MongoRepository(
        db.get_collection(client, settings, settings.customers_collection), Customer
    )
    app.state.user_repository = MongoRepository(
        db.get_collection(client, settings, settings.users_collection), User
    )
    try:
        await db.ensure_indexes(client, settings)
        logger.info("%s %s started", settings.project_name, settings.api_version)
        yield
    finally:
        db.close(client)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; loaded from environment variables when
        omitted.

    Returns
    -------
    FastAPI
        A configured application.  The MongoDB client and repositories
        are created when the app starts and the client is closed when it
        stops.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
