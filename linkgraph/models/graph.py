"""Graph data models."""

from __future__ import annotations

import math
from typing import Dict, FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field


class Vec2(BaseModel):
    """Immutable 2D vector used for positions, velocities and screen points."""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(x=self.x - other.x, y=self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(x=-self.x, y=-self.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(x=self.x * factor, y=self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(x=self.x / divisor, y=self.y / divisor)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Vec2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


class Node(BaseModel):
    """A document placed in the graph, with its simulation state."""

    id: str = Field(..., description="Document id")
    label: str = Field(..., description="Display title of the document")
    neighbor_count: int = Field(default=0, ge=0, description="Resolved link occurrences touching this node")
    position: Vec2 = Field(default_factory=Vec2, description="Graph-space position")
    velocity: Vec2 = Field(default_factory=Vec2, description="Velocity applied on the last tick")
    is_pinned: bool = Field(
        default=False,
        description="Rendering hint copied from the document; does not freeze the node",
    )


class Edge(BaseModel):
    """Undirected connection between two documents."""

    model_config = ConfigDict(frozen=True)

    source_id: str
    target_id: str

    @property
    def key(self) -> FrozenSet[str]:
        """Unordered endpoint pair; swapped endpoints share the same key."""
        return frozenset((self.source_id, self.target_id))

    def touches(self, node_id: str) -> bool:
        return node_id == self.source_id or node_id == self.target_id


class Graph(BaseModel):
    """Nodes and edges derived from one document set."""

    nodes: List[Node] = Field(default_factory=list)
    edges: List[Edge] = Field(default_factory=list)

    @property
    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]

    def is_empty(self) -> bool:
        return not self.nodes


class LinkExtraction(BaseModel):
    """Result of resolving wiki-links across a document set."""

    edges: List[Edge] = Field(default_factory=list)
    neighbor_counts: Dict[str, int] = Field(default_factory=dict)


class Viewport(BaseModel):
    """Zoom scale and pan offset mapping screen space to graph space."""

    model_config = ConfigDict(frozen=True)

    scale: float = 1.0
    offset: Vec2 = Field(default_factory=Vec2)


__all__ = ["Vec2", "Node", "Edge", "Graph", "LinkExtraction", "Viewport"]
