from typing import Optional

from .types import (
    BIDIRECTED,
    DIRECTED,
    UNDIRECTED,
    ControlPoint,
    Point,
    PositionedNode,
    StructuralEdge,
    StructuralGraph,
    StructuralNode,
)
from .parser import parse_graph, ParseError
from .layout import compute_layout, layout_graph, LayoutOptions
from .geometry import (
    ClosestPoint,
    angle_of,
    closest_point_on_quadratic,
    cubic_point,
    cubic_tangent,
    default_control_point,
    quadratic_point,
    quadratic_tangent,
    smooth_curve_control_points,
)
from .config import GraphConfig, get_graph_config, set_graph_config
from .model import Annotation, GraphData, GraphEdge, GraphNode, build_graph_data
from .curves import EdgeGeometry, edge_geometry
from .viewport import CanvasGeometry, ViewportTransform
from .interaction import (
    BackgroundTarget,
    ControlPointTarget,
    DraggingControlPoint,
    DraggingNode,
    EdgeTarget,
    Idle,
    InteractionController,
    NodeTarget,
    Panning,
    PointerEvent,
    WheelEvent,
)
from .printer import print_graph
from .reference import EXAMPLE_DIAGRAM, SYNTAX


def load_graph(text: str, *, strict: bool = False, config: Optional[GraphConfig] = None) -> GraphData:
    """Parse ``text``, lay it out and attach style defaults."""

    structural = parse_graph(text, strict=strict)
    return build_graph_data(structural, compute_layout(structural), config)


__all__ = [
    'BIDIRECTED',
    'DIRECTED',
    'UNDIRECTED',
    'ControlPoint',
    'Point',
    'PositionedNode',
    'StructuralEdge',
    'StructuralGraph',
    'StructuralNode',
    'parse_graph',
    'ParseError',
    'compute_layout',
    'layout_graph',
    'LayoutOptions',
    'ClosestPoint',
    'angle_of',
    'closest_point_on_quadratic',
    'cubic_point',
    'cubic_tangent',
    'default_control_point',
    'quadratic_point',
    'quadratic_tangent',
    'smooth_curve_control_points',
    'GraphConfig',
    'get_graph_config',
    'set_graph_config',
    'Annotation',
    'GraphData',
    'GraphEdge',
    'GraphNode',
    'build_graph_data',
    'EdgeGeometry',
    'edge_geometry',
    'CanvasGeometry',
    'ViewportTransform',
    'BackgroundTarget',
    'ControlPointTarget',
    'DraggingControlPoint',
    'DraggingNode',
    'EdgeTarget',
    'Idle',
    'InteractionController',
    'NodeTarget',
    'Panning',
    'PointerEvent',
    'WheelEvent',
    'print_graph',
    'EXAMPLE_DIAGRAM',
    'SYNTAX',
    'load_graph',
]
