"""Force-directed layout step.

One call to :meth:`ForceSimulator.step` advances every node by one tick of a
quasi-static relaxation:

* every ordered pair of distinct nodes repels (inverse distance),
* every edge acts as a Hooke spring around ``ideal_edge_length``,
* every node is pulled toward the origin by ``gravity_constant``.

The summed force times ``damping_factor`` is the new velocity, clamped to
``max_speed``. Nothing from the previous tick's velocity is carried forward.
Distances are floored at ``min_distance`` before dividing so coincident nodes
never divide by zero.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Sequence, Tuple

from ..models.graph import Edge, Node, Vec2
from .config import GraphConfig, get_config


class ForceSimulator:
    """Pure force computation; returns new Node instances, inputs are untouched."""

    def __init__(self, config: GraphConfig | None = None) -> None:
        self.config = config or get_config()

    def step(self, nodes: Sequence[Node], edges: Iterable[Edge]) -> List[Node]:
        if not nodes:
            return []

        positions: Dict[str, Tuple[float, float]] = {
            node.id: (node.position.x, node.position.y) for node in nodes
        }
        forces = self._accumulate_forces(positions, edges)
        return [self._integrate(node, forces[node.id]) for node in nodes]

    def run(self, nodes: Sequence[Node], edges: Sequence[Edge], ticks: int) -> List[Node]:
        """Apply ``ticks`` consecutive steps."""
        current = list(nodes)
        for _ in range(max(ticks, 0)):
            current = self.step(current, edges)
        return current

    def _accumulate_forces(
        self, positions: Dict[str, Tuple[float, float]], edges: Iterable[Edge]
    ) -> Dict[str, List[float]]:
        cfg = self.config
        forces: Dict[str, List[float]] = {node_id: [0.0, 0.0] for node_id in positions}
        items = list(positions.items())

        for node_id, (ax, ay) in items:
            force = forces[node_id]
            for other_id, (bx, by) in items:
                if other_id == node_id:
                    continue
                dx = ax - bx
                dy = ay - by
                distance = max(math.hypot(dx, dy), cfg.min_distance)
                factor = cfg.repulsion_constant / (distance * distance)
                force[0] += dx * factor
                force[1] += dy * factor

        for edge in edges:
            source = positions.get(edge.source_id)
            target = positions.get(edge.target_id)
            if source is None or target is None or edge.source_id == edge.target_id:
                continue
            dx = target[0] - source[0]
            dy = target[1] - source[1]
            distance = max(math.hypot(dx, dy), cfg.min_distance)
            strength = cfg.attraction_constant * (distance - cfg.ideal_edge_length)
            pull_x = dx * strength
            pull_y = dy * strength
            forces[edge.source_id][0] += pull_x
            forces[edge.source_id][1] += pull_y
            forces[edge.target_id][0] -= pull_x
            forces[edge.target_id][1] -= pull_y

        for node_id, (x, y) in items:
            forces[node_id][0] -= x * cfg.gravity_constant
            forces[node_id][1] -= y * cfg.gravity_constant

        return forces

    def _integrate(self, node: Node, force: List[float]) -> Node:
        cfg = self.config
        vx = force[0] * cfg.damping_factor
        vy = force[1] * cfg.damping_factor
        speed = math.hypot(vx, vy)
        if speed > cfg.max_speed:
            ratio = cfg.max_speed / speed
            vx *= ratio
            vy *= ratio
        return node.model_copy(
            update={
                "position": Vec2(x=node.position.x + vx, y=node.position.y + vy),
                "velocity": Vec2(x=vx, y=vy),
            }
        )


def step(nodes: Sequence[Node], edges: Iterable[Edge], config: GraphConfig | None = None) -> List[Node]:
    """Advance ``nodes`` by one tick."""
    return ForceSimulator(config).step(nodes, edges)


__all__ = ["ForceSimulator", "step"]
