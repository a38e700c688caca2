"""Structural graph types shared by the parser and the layout engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, NamedTuple, Optional, Tuple

EdgeKind = Literal["directed", "bidirected", "undirected"]

DIRECTED: EdgeKind = "directed"
BIDIRECTED: EdgeKind = "bidirected"
UNDIRECTED: EdgeKind = "undirected"

EDGE_KINDS: Tuple[EdgeKind, ...] = (DIRECTED, BIDIRECTED, UNDIRECTED)


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class StructuralNode:
    id: str
    label: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", self.id)


@dataclass(frozen=True)
class StructuralEdge:
    source: str
    target: str
    kind: EdgeKind = DIRECTED
    label: Optional[str] = None


@dataclass
class StructuralGraph:
    """Node/edge identity and topology only, no positions or style."""

    nodes: List[StructuralNode] = field(default_factory=list)
    edges: List[StructuralEdge] = field(default_factory=list)

    @property
    def node_ids(self) -> List[str]:
        return [node.id for node in self.nodes]

    def node(self, node_id: str) -> Optional[StructuralNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None


@dataclass
class ControlPoint:
    """Normalized handle defining the curvature of one edge."""

    id: str
    x: float
    y: float

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class PositionedNode:
    """A structural node paired with its normalized layout position."""

    id: str
    label: str
    x: float
    y: float

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


__all__ = [
    "EdgeKind",
    "DIRECTED",
    "BIDIRECTED",
    "UNDIRECTED",
    "EDGE_KINDS",
    "Point",
    "StructuralNode",
    "StructuralEdge",
    "StructuralGraph",
    "PositionedNode",
    "ControlPoint",
]
