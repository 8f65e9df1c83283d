"""
Main entrypoint for the Employee Directory API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Run it with uvicorn or another ASGI server, e.g.::

    uvicorn employee_directory_api.app.main:app --reload

or through ``run.py`` at the project root.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.logging_config import setup_logging
from .core.storage import get_data_path
from .api.router import router as api_router


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, the CORS middleware and the API routes, and
    returns a FastAPI instance ready to be served.
    """
    # Initialise logging before anything else so that the routers can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    origins = settings.cors_origin_list()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    app.include_router(api_router, prefix=settings.api_prefix.rstrip("/"))

    logging.getLogger(__name__).info("Serving employees from %s", get_data_path())
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
