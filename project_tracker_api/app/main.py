"""
Main entrypoint for the Project Tracker API.

This module assembles the FastAPI application: it sets up logging,
creates the in‑memory ``ProjectStore`` the handlers share, registers
CORS and the error handlers that keep every response inside the
``{"success", "data" | "error"}`` envelope, and includes the routers.
``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
directly, e.g.::

    uvicorn project_tracker_api.app.main:app --reload

Error mapping:

* ``NotFoundError`` from the store → 404
* request parsing / validation failures → 400
* routing errors (unknown path, wrong method) → their own status
* anything else → 500
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.endpoints import system
from .api.router import router as api_router
from .core.config import settings
from .core.exceptions import NotFoundError
from .core.logging_config import setup_logging
from .schemas.common import ApiResponse
from .services.project_store import ProjectStore


logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a failed envelope with the given HTTP status."""
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse.failure(message).model_dump(exclude_none=True),
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    detail = first.get("msg", "invalid value")
    if location:
        return f"Invalid request body: {location}: {detail}"
    return f"Invalid request body: {detail}"


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info(
        "%s %s: %s %s not found",
        request.method,
        request.url.path,
        exc.entity,
        exc.entity_id,
    )
    return error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(store: Optional[ProjectStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ProjectStore]
        Store the handlers should use.  A fresh, empty store is created
        when omitted, so every application owns its own state.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging first.  DEBUG only raises log verbosity; error
    # responses always keep the envelope.
    setup_logging("DEBUG" if settings.debug else settings.log_level, settings.log_file)
    logger.info(
        "Configuration loaded - Port: %s, Environment: %s",
        settings.port,
        settings.environment,
    )

    app = FastAPI(
        title=settings.project_name,
        description=settings.description,
        version=settings.api_version,
    )
    app.state.store = store if store is not None else ProjectStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(system.router, tags=["system"])
    app.include_router(api_router, prefix="/api")

    logger.info("Available endpoints:")
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ",".join(sorted(route.methods))
            logger.info("  %-5s %s", methods, route.path)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
