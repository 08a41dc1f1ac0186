"""Build graph nodes and edges from documents and resolved links."""

from __future__ import annotations

import logging
import math
from typing import List, Mapping, Sequence, Set

from ..models.document import Document
from ..models.graph import Edge, Graph, Node, Vec2
from .config import GraphConfig, get_config
from .links import LinkExtractor

logger = logging.getLogger(__name__)

UNTITLED_LABEL = "Untitled"


def dedupe_edges(edges: Sequence[Edge]) -> List[Edge]:
    """Drop self-edges and repeated unordered pairs, keeping first occurrences."""
    seen: Set[frozenset] = set()
    unique: List[Edge] = []
    for edge in edges:
        if edge.source_id == edge.target_id or edge.key in seen:
            continue
        seen.add(edge.key)
        unique.append(edge)
    return unique


class GraphBuilder:
    """Turn a document set into a Graph with nodes seeded on a circle."""

    def __init__(self, config: GraphConfig | None = None) -> None:
        self.config = config or get_config()

    def initial_radius(self, node_count: int) -> float:
        """Circle radius that grows with graph size, then caps."""
        growth = min(self.config.initial_radius_growth * node_count, self.config.initial_radius_cap)
        return self.config.initial_radius_base + growth

    def initial_position(self, index: int, node_count: int) -> Vec2:
        angle = 2 * math.pi * index / max(node_count, 1)
        radius = self.initial_radius(node_count)
        return Vec2(x=math.cos(angle) * radius, y=math.sin(angle) * radius)

    def build(
        self,
        documents: Sequence[Document],
        edges: Sequence[Edge],
        neighbor_counts: Mapping[str, int],
    ) -> Graph:
        """Create the Graph; documents without any resolved link are left out."""
        known_ids = {document.id for document in documents}
        unique_edges = [
            edge
            for edge in dedupe_edges(edges)
            if edge.source_id in known_ids and edge.target_id in known_ids
        ]

        linked_ids: Set[str] = set()
        for edge in unique_edges:
            linked_ids.update(edge.key)

        linked: List[Document] = []
        placed: Set[str] = set()
        for document in documents:
            if document.id in linked_ids and document.id not in placed:
                placed.add(document.id)
                linked.append(document)

        count = len(linked)
        nodes = [
            Node(
                id=document.id,
                label=document.title or UNTITLED_LABEL,
                neighbor_count=neighbor_counts.get(document.id, 0),
                position=self.initial_position(index, count),
                is_pinned=document.is_pinned,
            )
            for index, document in enumerate(linked)
        ]

        logger.debug(
            "Graph built",
            extra={
                "documents": len(documents),
                "nodes": len(nodes),
                "edges": len(unique_edges),
                "excluded": len(known_ids) - len(nodes),
            },
        )
        return Graph(nodes=nodes, edges=unique_edges)


def build_graph(documents: Sequence[Document], config: GraphConfig | None = None) -> Graph:
    """Resolve links and build the graph in one call."""
    extraction = LinkExtractor().extract(documents)
    return GraphBuilder(config).build(documents, extraction.edges, extraction.neighbor_counts)


__all__ = ["GraphBuilder", "build_graph", "dedupe_edges", "UNTITLED_LABEL"]
