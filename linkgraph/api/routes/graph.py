"""Graph snapshot, rebuild and simulation control routes."""

from typing import Annotated, List

from fastapi import APIRouter, Depends

from ..middleware import NoDocumentSourceError
from ...models.document import Document
from ...models.snapshot import GraphSnapshot, SimulationStatus
from ...services.session import GraphSession, get_graph_session

router = APIRouter()

SessionDep = Annotated[GraphSession, Depends(get_graph_session)]


@router.get("/api/graph", response_model=GraphSnapshot)
async def get_graph(session: SessionDep) -> GraphSnapshot:
    """Current node positions, edges and viewport."""
    return session.snapshot()


@router.put("/api/graph/documents", response_model=GraphSnapshot)
async def replace_documents(documents: List[Document], session: SessionDep) -> GraphSnapshot:
    """Replace the document set and rebuild the graph."""
    session.replace_documents(documents)
    return session.snapshot()


@router.post("/api/graph/reload", response_model=GraphSnapshot)
async def reload_documents(session: SessionDep) -> GraphSnapshot:
    """Re-read the configured document directory."""
    if session.source is None:
        raise NoDocumentSourceError()
    session.reload()
    return session.snapshot()


@router.post("/api/graph/simulation/pause", response_model=SimulationStatus)
async def pause_simulation(session: SessionDep) -> SimulationStatus:
    session.simulation.pause()
    return session.status()


@router.post("/api/graph/simulation/resume", response_model=SimulationStatus)
async def resume_simulation(session: SessionDep) -> SimulationStatus:
    session.simulation.resume()
    return session.status()


@router.post("/api/graph/simulation/toggle", response_model=SimulationStatus)
async def toggle_simulation(session: SessionDep) -> SimulationStatus:
    session.simulation.toggle()
    return session.status()
