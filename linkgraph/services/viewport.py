"""Zoom, pan and hit-testing for the graph view."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from ..models.graph import Node, Vec2, Viewport
from .config import GraphConfig, get_config

logger = logging.getLogger(__name__)

SelectionCallback = Callable[[str], None]


class ViewportController:
    """Own the viewport and convert between screen and graph coordinates.

    ``pan`` adds the raw screen delta regardless of zoom, and ``hit_test``
    returns the first node inside the radius rather than the nearest one.
    """

    def __init__(self, config: GraphConfig | None = None) -> None:
        self.config = config or get_config()
        self.viewport = Viewport()
        self._selection_callbacks: List[SelectionCallback] = []

    @property
    def scale(self) -> float:
        return self.viewport.scale

    @property
    def offset(self) -> Vec2:
        return self.viewport.offset

    @property
    def zoom_percent(self) -> int:
        return int(self.viewport.scale * 100)

    def zoom_in(self) -> Viewport:
        return self._set_scale(self.viewport.scale * self.config.zoom_step)

    def zoom_out(self) -> Viewport:
        return self._set_scale(self.viewport.scale / self.config.zoom_step)

    def reset_view(self) -> Viewport:
        self.viewport = Viewport()
        return self.viewport

    def pan(self, delta: Vec2) -> Viewport:
        self.viewport = self.viewport.model_copy(update={"offset": self.viewport.offset + delta})
        return self.viewport

    def screen_to_graph(self, point: Vec2) -> Vec2:
        return (point - self.viewport.offset) / self.viewport.scale

    def graph_to_screen(self, point: Vec2) -> Vec2:
        return point * self.viewport.scale + self.viewport.offset

    def hit_test(self, point: Vec2, nodes: Iterable[Node]) -> Optional[Node]:
        """Return the first node within ``hit_test_radius`` of a screen point."""
        target = self.screen_to_graph(point)
        radius = self.config.hit_test_radius
        for node in nodes:
            if node.position.distance_to(target) < radius:
                return node
        return None

    def select(self, point: Vec2, nodes: Iterable[Node]) -> Optional[str]:
        """Hit-test and notify selection callbacks with the document id."""
        node = self.hit_test(point, nodes)
        if node is None:
            return None
        logger.debug("Node selected", extra={"node_id": node.id})
        for callback in list(self._selection_callbacks):
            callback(node.id)
        return node.id

    def on_select(self, callback: SelectionCallback) -> Callable[[], None]:
        self._selection_callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._selection_callbacks:
                self._selection_callbacks.remove(callback)

        return unsubscribe

    def _set_scale(self, value: float) -> Viewport:
        clamped = min(max(value, self.config.zoom_min), self.config.zoom_max)
        self.viewport = self.viewport.model_copy(update={"scale": clamped})
        return self.viewport


__all__ = ["ViewportController", "SelectionCallback"]
