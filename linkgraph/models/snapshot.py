"""Response models for graph snapshots and interaction results."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .graph import Edge, Node, Viewport


class GraphStats(BaseModel):
    """Counters shown next to the graph."""

    node_count: int = Field(..., ge=0)
    edge_count: int = Field(..., ge=0)
    zoom_percent: int = Field(..., ge=0)
    tick_count: int = Field(default=0, ge=0)


class GraphSnapshot(BaseModel):
    """Everything a renderer needs to draw one frame."""

    nodes: List[Node]
    edges: List[Edge]
    viewport: Viewport
    running: bool
    stats: GraphStats


class SimulationStatus(BaseModel):
    running: bool
    tick_count: int = Field(default=0, ge=0)
    node_count: int = Field(default=0, ge=0)


class SelectionResult(BaseModel):
    """Outcome of a tap/click on the graph."""

    node_id: Optional[str] = Field(None, description="Selected document id, null on a miss")
    highlighted_edges: List[Edge] = Field(default_factory=list)


__all__ = ["GraphStats", "GraphSnapshot", "SimulationStatus", "SelectionResult"]
