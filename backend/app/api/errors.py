"""Exception handlers rendering every failure as ``{"error": "<message>"}``."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.app.errors import PlannerError

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = "Method not allowed"


async def planner_error_handler(request: Request, exc: PlannerError) -> JSONResponse:
    """Render a PlannerError; detail goes to the log only."""
    log = logger.warning if exc.status_code < 500 else logger.error
    log(f"[{request.method} {request.url.path}] {type(exc).__name__}: {exc.detail or exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors (404, 405) in the same envelope."""
    message = METHOD_NOT_ALLOWED if exc.status_code == 405 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=exc.headers,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for anything that escaped the planner."""
    logger.error(f"[{request.method} {request.url.path}] server error: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Server error. Please try again."})


def register_error_handlers(app: FastAPI) -> None:
    """Attach all error handlers to the app."""
    app.add_exception_handler(PlannerError, planner_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
