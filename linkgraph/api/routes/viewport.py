"""Zoom, pan and selection routes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from ...models.graph import Vec2, Viewport
from ...models.snapshot import SelectionResult
from ...services.session import GraphSession, get_graph_session

router = APIRouter()

SessionDep = Annotated[GraphSession, Depends(get_graph_session)]


@router.get("/api/viewport", response_model=Viewport)
async def get_viewport(session: SessionDep) -> Viewport:
    return session.viewport.viewport


@router.post("/api/viewport/zoom-in", response_model=Viewport)
async def zoom_in(session: SessionDep) -> Viewport:
    return session.viewport.zoom_in()


@router.post("/api/viewport/zoom-out", response_model=Viewport)
async def zoom_out(session: SessionDep) -> Viewport:
    return session.viewport.zoom_out()


@router.post("/api/viewport/reset", response_model=Viewport)
async def reset_view(session: SessionDep) -> Viewport:
    return session.viewport.reset_view()


@router.post("/api/viewport/pan", response_model=Viewport)
async def pan(delta: Vec2, session: SessionDep) -> Viewport:
    """Shift the view by a screen-space delta."""
    return session.viewport.pan(delta)


@router.post("/api/viewport/select", response_model=SelectionResult)
async def select(point: Vec2, session: SessionDep) -> SelectionResult:
    """Select the node under a screen point; ``node_id`` is null on a miss."""
    node_id = session.select(point)
    return SelectionResult(node_id=node_id, highlighted_edges=session.highlighted_edges(node_id))
