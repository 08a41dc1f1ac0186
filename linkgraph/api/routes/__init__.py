"""API route modules."""

from . import graph, system, viewport

__all__ = ["graph", "system", "viewport"]
