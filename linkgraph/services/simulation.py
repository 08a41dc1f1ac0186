"""Fixed-cadence driver for the force simulation."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional, Tuple

from ..models.graph import Edge, Graph, Node
from .config import GraphConfig, get_config
from .physics import ForceSimulator

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[Tuple[Node, ...]], None]


class SimulationLoop:
    """Run ForceSimulator.step every ``tick_interval_ms`` until paused.

    The loop is a single asyncio task owned by this object. Each task gets its
    own wake event, so pausing takes effect before the next tick and a quick
    pause/resume never leaves two tasks ticking the same graph.

    Published snapshots are immutable tuples swapped in whole, so readers
    between ticks always see positions from a single tick.
    """

    def __init__(
        self,
        simulator: ForceSimulator | None = None,
        config: GraphConfig | None = None,
    ) -> None:
        self.config = config or get_config()
        self.simulator = simulator or ForceSimulator(self.config)
        self._nodes: Tuple[Node, ...] = ()
        self._edges: Tuple[Edge, ...] = ()
        self._subscribers: List[SnapshotCallback] = []
        self._task: Optional[asyncio.Task] = None
        self._wake: Optional[asyncio.Event] = None
        self._running = False
        self.tick_count = 0

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return self._nodes

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def graph(self) -> Graph:
        return Graph(nodes=list(self._nodes), edges=list(self._edges))

    def is_running(self) -> bool:
        return self._running

    def load(self, graph: Graph) -> None:
        """Replace the simulated graph without starting it."""
        self.pause()
        self._nodes = tuple(graph.nodes)
        self._edges = tuple(graph.edges)
        self.tick_count = 0
        self._publish()

    def start(self, graph: Graph) -> bool:
        """Load ``graph`` and begin ticking; refuses an empty graph.

        Must be called from a running event loop.
        """
        self.load(graph)
        if not self._nodes:
            logger.info("Simulation not started: graph has no nodes")
            return False
        self._spawn()
        logger.info(
            "Simulation started",
            extra={"nodes": len(self._nodes), "edges": len(self._edges)},
        )
        return True

    def pause(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._wake is not None:
            self._wake.set()
        logger.info("Simulation paused", extra={"tick_count": self.tick_count})

    def resume(self) -> bool:
        if self._running:
            return True
        if not self._nodes:
            return False
        self._spawn()
        logger.info("Simulation resumed", extra={"tick_count": self.tick_count})
        return True

    def toggle(self) -> bool:
        """Flip between running and paused; returns the new running state."""
        if self._running:
            self.pause()
            return False
        return self.resume()

    async def stop(self) -> None:
        """Pause and wait for the task to finish."""
        task = self._task
        self.pause()
        self._task = None
        if task is not None and not task.done():
            await task

    def tick(self) -> Tuple[Node, ...]:
        """Advance one step and publish the result."""
        if not self._nodes:
            return self._nodes
        self._nodes = tuple(self.simulator.step(self._nodes, self._edges))
        self.tick_count += 1
        logger.debug("Simulation tick", extra={"tick_count": self.tick_count})
        self._publish()
        return self._nodes

    def subscribe(self, callback: SnapshotCallback) -> Callable[[], None]:
        """Register a snapshot callback; returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _spawn(self) -> None:
        loop = asyncio.get_running_loop()
        wake = asyncio.Event()
        self._wake = wake
        self._running = True
        self._task = loop.create_task(self._run(wake), name="linkgraph-simulation")

    async def _run(self, wake: asyncio.Event) -> None:
        interval = self.config.tick_interval_ms / 1000.0
        try:
            while not wake.is_set() and self._nodes:
                self.tick()
                try:
                    await asyncio.wait_for(wake.wait(), timeout=interval)
                    break
                except asyncio.TimeoutError:
                    continue
        except Exception:
            logger.exception("Simulation tick failed", extra={"tick_count": self.tick_count})
        finally:
            # A replaced task must not clear the state of its successor.
            if self._wake is wake:
                self._running = False
            logger.debug("Simulation task exited", extra={"tick_count": self.tick_count})

    def _publish(self) -> None:
        snapshot = self._nodes
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception:
                logger.exception("Snapshot subscriber failed")


__all__ = ["SimulationLoop", "SnapshotCallback"]
