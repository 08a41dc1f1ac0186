"""Error envelope and exception handlers for the graph API."""

from .error_handlers import GraphAPIError, NoDocumentSourceError, register_error_handlers

__all__ = ["GraphAPIError", "NoDocumentSourceError", "register_error_handlers"]
