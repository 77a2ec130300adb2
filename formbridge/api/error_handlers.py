"""
Error handlers for the form route.

Starlette rejects verbs that no route lists (TRACE, PROPFIND, custom verbs)
with a bare 405 before the endpoint runs. For the form path that 405 is
replaced by the same JSON body and CORS headers the endpoint itself sends.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from formbridge.api.endpoints.forms import METHOD_NOT_ALLOWED
from formbridge.core.cors import CORS_HEADERS

logger = logging.getLogger(__name__)

FORM_PATH = "/api/submit-form"


def register_error_handlers(app: FastAPI) -> None:
    """Register the form-path 405 handler on the app."""

    @app.exception_handler(StarletteHTTPException)
    async def form_method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code != 405 or request.url.path.rstrip("/") != FORM_PATH:
            return await http_exception_handler(request, exc)

        logger.info(f"Method not allowed: {request.method}")
        return JSONResponse(status_code=200, content=METHOD_NOT_ALLOWED, headers=CORS_HEADERS)
