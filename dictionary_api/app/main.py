"""
Main entrypoint for the Dictionary API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn dictionary_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.db import init_db
from .core.errors import DictionaryError
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .api.v1.endpoints import legacy


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None, debug=settings.debug)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(v1_router, prefix="/api/v1")
    # Root level paths used by the original web client.
    app.include_router(legacy.router, tags=["legacy"])

    @app.exception_handler(DictionaryError)
    async def dictionary_error_handler(request: Request, exc: DictionaryError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed bodies are caller errors like a missing word, so they
        # share the ``invalid_input`` shape instead of FastAPI's 422.
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'][1:]) or 'body'}: {err['msg']}"
            for err in exc.errors()
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": details or "Invalid request", "kind": "invalid_input"},
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and applies migrations.
        init_db()
        logging.getLogger(__name__).info("%s %s ready", settings.project_name, settings.api_version)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
