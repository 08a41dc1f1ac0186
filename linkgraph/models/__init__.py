"""Pydantic models for data validation and serialization."""

from .document import Document
from .graph import Edge, Graph, LinkExtraction, Node, Vec2, Viewport
from .snapshot import GraphSnapshot, GraphStats, SelectionResult, SimulationStatus

__all__ = [
    "Document",
    "Vec2",
    "Node",
    "Edge",
    "Graph",
    "LinkExtraction",
    "Viewport",
    "GraphStats",
    "GraphSnapshot",
    "SimulationStatus",
    "SelectionResult",
]
