"""Graph API errors and the handlers that render them as JSON envelopes.

Every error body has the shape ``{"error": code, "message": text, "detail": ...}``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# Request bodies are validated per route family; the first matching prefix wins.
VALIDATION_ERRORS: List[Tuple[str, str, str]] = [
    ("/api/graph/documents", "invalid_documents", "Documents must be a list of {id, title, content, is_pinned}"),
    ("/api/viewport/", "invalid_point", "Expected a screen-space point {x, y}"),
]
ROUTING_ERRORS: Dict[int, str] = {
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


class GraphAPIError(Exception):
    """Base for errors the graph routes raise deliberately."""

    status_code = status.HTTP_400_BAD_REQUEST
    error = "graph_error"
    message = "Graph request failed"

    def __init__(self, message: Optional[str] = None, detail: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.detail = detail


class NoDocumentSourceError(GraphAPIError):
    status_code = status.HTTP_409_CONFLICT
    error = "no_document_source"
    message = "No document directory configured (set LINKGRAPH_DOCUMENTS_PATH)"


def _envelope(status_code: int, error: str, message: str, detail: Any = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "detail": detail},
    )


def _validation_kind(path: str) -> Tuple[str, str]:
    for prefix, error, message in VALIDATION_ERRORS:
        if path.startswith(prefix):
            return error, message
    return "validation_error", "Invalid request payload"


async def graph_error_handler(request: Request, exc: GraphAPIError) -> JSONResponse:
    logger.warning(
        "Graph request rejected",
        extra={"path": request.url.path, "error": exc.error},
    )
    return _envelope(exc.status_code, exc.error, exc.message, exc.detail)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    error, message = _validation_kind(request.url.path)
    # ctx may hold the raw exception, which does not serialise.
    errors = [
        {key: item[key] for key in ("loc", "msg", "type") if key in item}
        for item in exc.errors()
    ]
    return _envelope(status.HTTP_400_BAD_REQUEST, error, message, {"errors": errors})


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    error = ROUTING_ERRORS.get(exc.status_code, "http_error")
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return _envelope(exc.status_code, error, message)


async def internal_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception: %s", exc)
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", "Internal server error"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Attach the graph API exception handlers to the FastAPI application."""
    app.add_exception_handler(GraphAPIError, graph_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, internal_exception_handler)


__all__ = [
    "GraphAPIError",
    "NoDocumentSourceError",
    "register_error_handlers",
]
