"""Graph session: documents in, live graph and viewport out."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import List, Optional, Sequence

from ..models.document import Document
from ..models.graph import Edge, Graph, Node, Vec2
from ..models.snapshot import GraphSnapshot, GraphStats, SimulationStatus
from .config import GraphConfig, get_config
from .documents import MarkdownDocumentSource, fingerprint
from .graph_builder import GraphBuilder
from .links import LinkExtractor
from .simulation import SimulationLoop
from .viewport import ViewportController

logger = logging.getLogger(__name__)


def _in_event_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class GraphSession:
    """Own one simulation loop and one viewport for a document set.

    The graph is rebuilt from scratch whenever the document set changes and
    node positions are reseeded. The viewport survives rebuilds.
    """

    def __init__(
        self,
        config: GraphConfig | None = None,
        source: MarkdownDocumentSource | None = None,
        simulation: SimulationLoop | None = None,
        viewport: ViewportController | None = None,
    ) -> None:
        self.config = config or get_config()
        if source is None and self.config.documents_path is not None:
            source = MarkdownDocumentSource(self.config.documents_path)
        self.source = source
        self.extractor = LinkExtractor()
        self.builder = GraphBuilder(self.config)
        self.simulation = simulation or SimulationLoop(config=self.config)
        self.viewport = viewport or ViewportController(self.config)
        self.documents: List[Document] = []
        self._fingerprint: Optional[str] = None

    def replace_documents(self, documents: Sequence[Document], *, force: bool = False) -> Graph:
        """Rebuild the graph if the document set changed.

        The simulation restarts when it was running or ``autostart`` is set.
        Outside an event loop the graph is loaded paused instead.
        """
        digest = fingerprint(documents)
        if not force and digest == self._fingerprint:
            return self.simulation.graph

        start_time = time.time()
        extraction = self.extractor.extract(documents)
        graph = self.builder.build(documents, extraction.edges, extraction.neighbor_counts)
        should_run = self.simulation.is_running() or self.config.autostart

        if should_run and _in_event_loop():
            self.simulation.start(graph)
        else:
            if should_run:
                logger.info("No running event loop; graph loaded paused")
            self.simulation.load(graph)
        self.documents = list(documents)
        self._fingerprint = digest

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            "Graph rebuilt",
            extra={
                "documents": len(documents),
                "nodes": len(graph.nodes),
                "edges": len(graph.edges),
                "running": self.simulation.is_running(),
                "duration_ms": f"{duration_ms:.2f}",
            },
        )
        return graph

    def reload(self) -> Graph:
        """Re-read the document source and rebuild when it changed."""
        if self.source is None:
            logger.warning("No document source configured; keeping current graph")
            return self.simulation.graph
        return self.replace_documents(self.source.load())

    def status(self) -> SimulationStatus:
        return SimulationStatus(
            running=self.simulation.is_running(),
            tick_count=self.simulation.tick_count,
            node_count=len(self.simulation.nodes),
        )

    def snapshot(self) -> GraphSnapshot:
        nodes = self.simulation.nodes
        edges = self.simulation.edges
        return GraphSnapshot(
            nodes=list(nodes),
            edges=list(edges),
            viewport=self.viewport.viewport,
            running=self.simulation.is_running(),
            stats=GraphStats(
                node_count=len(nodes),
                edge_count=len(edges),
                zoom_percent=self.viewport.zoom_percent,
                tick_count=self.simulation.tick_count,
            ),
        )

    def select(self, point: Vec2) -> Optional[str]:
        """Select the node under a screen point, notifying selection callbacks."""
        return self.viewport.select(point, self.simulation.nodes)

    def highlighted_edges(self, node_id: Optional[str]) -> List[Edge]:
        """Edges drawn emphasised while ``node_id`` is selected or hovered."""
        if node_id is None:
            return []
        return [edge for edge in self.simulation.edges if edge.touches(node_id)]

    def node_radius(self, node: Node) -> float:
        """Render size hint growing with the neighbor count."""
        growth = min(node.neighbor_count * self.config.node_radius_growth, self.config.node_radius_cap)
        return self.config.node_radius_base + growth


_graph_session: GraphSession | None = None


def get_graph_session() -> GraphSession:
    """Get or create the graph session singleton."""
    global _graph_session
    if _graph_session is None:
        _graph_session = GraphSession()
    return _graph_session


__all__ = ["GraphSession", "get_graph_session"]
