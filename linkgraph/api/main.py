"""FastAPI application main entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from .middleware import register_error_handlers  # noqa: E402
from .routes import graph, system, viewport  # noqa: E402
from ..services.session import GraphSession, get_graph_session  # noqa: E402

logger = logging.getLogger(__name__)


def _resolve_session(app: FastAPI) -> GraphSession:
    # Honour dependency overrides so tests drive the same session as the routes.
    provider = app.dependency_overrides.get(get_graph_session, get_graph_session)
    return provider()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load documents and start the simulation; stop it on shutdown."""
    session = _resolve_session(app)
    logger.info("Running startup: loading documents and building graph...")
    try:
        session.reload()
        logger.info(
            "Startup complete",
            extra={
                "nodes": len(session.simulation.nodes),
                "running": session.simulation.is_running(),
            },
        )
    except Exception as exc:
        logger.exception("Startup failed: %s", exc)
        logger.error("App starting with an empty graph due to initialization error")

    yield

    await session.simulation.stop()
    logger.info("Simulation stopped for shutdown")


app = FastAPI(
    title="Link Graph API",
    description="Force-directed graph of wiki-linked documents",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://localhost:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(graph.router, tags=["graph"])
app.include_router(viewport.router, tags=["viewport"])
app.include_router(system.router, tags=["system"])


__all__ = ["app"]
