"""Deterministic Fruchterman-Reingold layout in the normalized unit square."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List

import numpy as np
from scipy.spatial.distance import pdist, squareform

from .logging_utils import debug_log_call
from .types import Point, PositionedNode, StructuralGraph

logger = logging.getLogger(__name__)


@dataclass
class LayoutOptions:
    """Simulation constants; the defaults are the reference behaviour."""

    iterations: int = 50
    initial_radius: float = 0.3
    center: float = 0.5
    initial_temperature: float = 0.1
    cooling: float = 0.95
    min_distance: float = 0.01
    padding: float = 0.1


def _initial_positions(count: int, options: LayoutOptions) -> np.ndarray:
    angles = 2.0 * math.pi * np.arange(count, dtype=float) / count
    return np.column_stack(
        (
            options.center + options.initial_radius * np.cos(angles),
            options.center + options.initial_radius * np.sin(angles),
        )
    )


def _edge_index(graph: StructuralGraph, index: Dict[str, int]) -> np.ndarray:
    pairs = [
        (index[edge.source], index[edge.target])
        for edge in graph.edges
        if edge.source in index and edge.target in index
    ]
    return np.asarray(pairs, dtype=int).reshape(-1, 2)


def _repulsion(pos: np.ndarray, k: float, min_distance: float) -> np.ndarray:
    delta = pos[:, None, :] - pos[None, :, :]
    dist = np.maximum(squareform(pdist(pos)), min_distance)
    magnitude = (k * k) / dist
    return (delta / dist[..., None] * magnitude[..., None]).sum(axis=1)


def _attraction(pos: np.ndarray, edges: np.ndarray, k: float, min_distance: float) -> np.ndarray:
    forces = np.zeros_like(pos)
    if edges.size == 0:
        return forces
    src = edges[:, 0]
    dst = edges[:, 1]
    delta = pos[dst] - pos[src]
    dist = np.maximum(np.hypot(delta[:, 0], delta[:, 1]), min_distance)
    pull = delta / dist[:, None] * ((dist * dist) / k)[:, None]
    # Self-loops add and subtract the same (zero) vector on one row.
    np.add.at(forces, src, pull)
    np.subtract.at(forces, dst, pull)
    return forces


@debug_log_call(logger)
def compute_layout(graph: StructuralGraph, options: LayoutOptions = LayoutOptions()) -> Dict[str, Point]:
    """Return normalized positions keyed by node id.

    Nodes start on a circle and relax for ``options.iterations`` steps; each
    step's displacement is capped by the current temperature and the result
    is clamped to ``[padding, 1 - padding]`` on both axes. Identical input
    always yields identical output.
    """

    node_ids = graph.node_ids
    count = len(node_ids)
    if count == 0:
        return {}

    logger.info(
        "Running force layout for %d nodes, %d edges (%d iterations)",
        count,
        len(graph.edges),
        options.iterations,
    )

    index = {node_id: idx for idx, node_id in enumerate(node_ids)}
    edges = _edge_index(graph, index)
    pos = _initial_positions(count, options)
    k = math.sqrt(1.0 / count)
    low = options.padding
    high = 1.0 - options.padding
    temperature = options.initial_temperature

    for _ in range(options.iterations):
        forces = _attraction(pos, edges, k, options.min_distance)
        if count > 1:
            forces += _repulsion(pos, k, options.min_distance)

        magnitude = np.hypot(forces[:, 0], forces[:, 1])
        step = np.minimum(magnitude, temperature)
        safe = np.where(magnitude > 0.0, magnitude, 1.0)
        pos += forces / safe[:, None] * step[:, None]
        np.clip(pos, low, high, out=pos)
        temperature *= options.cooling

    logger.debug("Layout finished with final temperature %.6g", temperature)
    return {node_id: Point(float(pos[i, 0]), float(pos[i, 1])) for node_id, i in index.items()}


def layout_graph(graph: StructuralGraph, options: LayoutOptions = LayoutOptions()) -> List[PositionedNode]:
    positions = compute_layout(graph, options)
    return [
        PositionedNode(node.id, node.label, positions[node.id].x, positions[node.id].y)
        for node in graph.nodes
    ]


__all__ = ["LayoutOptions", "compute_layout", "layout_graph"]
