"""Service layer: link resolution, layout physics, simulation and viewport."""

from .config import GraphConfig, get_config, reload_config
from .documents import MarkdownDocumentSource, fingerprint
from .graph_builder import GraphBuilder, build_graph, dedupe_edges
from .links import LinkExtractor, extract_wikilinks, normalize_title
from .physics import ForceSimulator, step
from .session import GraphSession, get_graph_session
from .simulation import SimulationLoop
from .viewport import ViewportController

__all__ = [
    "GraphConfig",
    "get_config",
    "reload_config",
    "MarkdownDocumentSource",
    "fingerprint",
    "LinkExtractor",
    "extract_wikilinks",
    "normalize_title",
    "GraphBuilder",
    "build_graph",
    "dedupe_edges",
    "ForceSimulator",
    "step",
    "SimulationLoop",
    "ViewportController",
    "GraphSession",
    "get_graph_session",
]
