"""FastAPI middleware for request content-type checks."""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class JSONContentTypeMiddleware(BaseHTTPMiddleware):
    """Reject POST requests whose body is not declared as JSON.

    Media type parameters (e.g. ``; charset=utf-8``) are ignored.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        if request.method != "POST":
            return await call_next(request)

        content_type = request.headers.get("Content-Type", "")
        media_type = content_type.split(";", 1)[0].strip().lower()
        if media_type != JSON_CONTENT_TYPE:
            logger.info(
                f"Rejected {request.url.path}: "
                f"unsupported Content-Type {content_type!r}"
            )
            return JSONResponse(
                status_code=415,
                content={
                    "detail": f"Server accepts only Content-Type: {JSON_CONTENT_TYPE}"
                },
            )

        return await call_next(request)
