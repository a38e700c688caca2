"""Editable graph data handed to renderers and mutated by gestures."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .config import GraphConfig, get_graph_config
from .types import ControlPoint, EdgeKind, Point, StructuralGraph


@dataclass
class Annotation:
    value: Union[str, float]
    position: float = 0.5
    offset: float = 10.0


@dataclass
class GraphNode:
    id: str
    label: str
    x: float
    y: float
    shape: str = "circle"
    color: str = "#c8c8c8"
    size: float = 50.0
    opacity: float = 0.8
    hidden: bool = False

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


@dataclass
class GraphEdge:
    id: str
    source: str
    target: str
    kind: EdgeKind
    color: str = "#000000"
    width: float = 2.0
    style: str = "solid"
    opacity: float = 0.8
    annotations: List[Annotation] = field(default_factory=list)
    control_points: List[ControlPoint] = field(default_factory=list)
    hidden: bool = False

    @property
    def control_point(self) -> Optional[ControlPoint]:
        """The single curvature handle, or ``None`` for the implicit curve."""

        return self.control_points[0] if self.control_points else None

    def find_control_point(self, control_point_id: str) -> Optional[ControlPoint]:
        for cp in self.control_points:
            if cp.id == control_point_id:
                return cp
        return None


def control_point_id(edge_id: str, index: int = 0) -> str:
    return f"{edge_id}-cp-{index}"


def edge_id(index: int) -> str:
    return f"edge-{index}"


@dataclass
class GraphData:
    nodes: List[GraphNode] = field(default_factory=list)
    edges: List[GraphEdge] = field(default_factory=list)

    def node(self, node_id: str) -> Optional[GraphNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def edge(self, edge_id: str) -> Optional[GraphEdge]:
        for edge in self.edges:
            if edge.id == edge_id:
                return edge
        return None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_graph_data(
    graph: StructuralGraph,
    positions: Mapping[str, Point],
    config: Optional[GraphConfig] = None,
) -> GraphData:
    """Attach layout positions and style defaults to a parsed graph.

    Edges get ids ``edge-<index>`` in declaration order and start without
    control points; a labelled edge carries its label as one annotation.
    """

    config = config or get_graph_config()

    nodes: List[GraphNode] = []
    for node in graph.nodes:
        try:
            x, y = positions[node.id]
        except KeyError as exc:
            raise KeyError(f"no layout position for node '{node.id}'") from exc
        nodes.append(
            GraphNode(
                id=node.id,
                label=node.label,
                x=float(x),
                y=float(y),
                shape=config.default_node_shape,
                color=config.default_node_color,
                size=config.default_node_size,
                opacity=config.default_node_opacity,
            )
        )

    edges: List[GraphEdge] = []
    for idx, edge in enumerate(graph.edges):
        annotations = []
        if edge.label:
            annotations.append(
                Annotation(edge.label, position=config.label_position, offset=config.label_offset)
            )
        edges.append(
            GraphEdge(
                id=edge_id(idx),
                source=edge.source,
                target=edge.target,
                kind=edge.kind,
                color=config.default_edge_color,
                width=config.default_edge_width,
                style=config.default_edge_style,
                opacity=config.default_edge_opacity,
                annotations=annotations,
            )
        )

    return GraphData(nodes=nodes, edges=edges)


__all__ = [
    "Annotation",
    "GraphNode",
    "GraphEdge",
    "GraphData",
    "build_graph_data",
    "control_point_id",
    "edge_id",
]
