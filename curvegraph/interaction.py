"""Pointer/wheel gesture handling over editable graph data.

The controller owns the viewport transform and the gesture state. Graph data
belongs to the caller and is mutated in place, one event at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Optional, Union

from .curves import edge_control_point
from .geometry import closest_point_on_quadratic, default_control_point, distance
from .model import GraphData, GraphEdge, GraphNode, control_point_id
from .types import ControlPoint, Point
from .viewport import CanvasGeometry, ViewportTransform

logger = logging.getLogger(__name__)

CLICK_CONTROL_POINT_OFFSET = 0.2
CONTROL_POINT_RADIUS = 6.0
EDGE_HIT_TOLERANCE = 5.0
RECTANGLE_ASPECT = 1.5


# Gesture states --------------------------------------------------------------


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class DraggingNode:
    node_id: str
    grab_offset: Point


@dataclass(frozen=True)
class DraggingControlPoint:
    edge_id: str
    control_point_id: str


@dataclass(frozen=True)
class Panning:
    last_pointer: Point


GestureState = Union[Idle, DraggingNode, DraggingControlPoint, Panning]

IDLE = Idle()


# Event targets ---------------------------------------------------------------


@dataclass(frozen=True)
class NodeTarget:
    node_id: str


@dataclass(frozen=True)
class EdgeTarget:
    edge_id: str


@dataclass(frozen=True)
class ControlPointTarget:
    edge_id: str
    control_point_id: str


@dataclass(frozen=True)
class BackgroundTarget:
    pass


Target = Union[NodeTarget, EdgeTarget, ControlPointTarget, BackgroundTarget]

BACKGROUND = BackgroundTarget()

PointerKind = Literal["down", "move", "up", "leave", "click"]


@dataclass(frozen=True)
class PointerEvent:
    kind: PointerKind
    x: float
    y: float
    target: Target = BACKGROUND

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class WheelEvent:
    x: float
    y: float
    delta_y: float

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


Event = Union[PointerEvent, WheelEvent]


class InteractionController:
    """Translate pointer gestures into graph-data and viewport mutations."""

    def __init__(
        self,
        graph: GraphData,
        canvas: Optional[CanvasGeometry] = None,
        viewport: Optional[ViewportTransform] = None,
    ):
        self.graph = graph
        self.canvas = canvas or CanvasGeometry()
        self.viewport = viewport or ViewportTransform()
        self.state: GestureState = IDLE
        self.selected_node_id: Optional[str] = None
        self.selected_edge_id: Optional[str] = None

    # -- coordinates ---------------------------------------------------------

    @property
    def is_idle(self) -> bool:
        return isinstance(self.state, Idle)

    def to_graph(self, screen: Point) -> Point:
        return self.viewport.screen_to_graph(screen, self.canvas)

    def to_screen(self, graph_point: Point) -> Point:
        return self.viewport.graph_to_screen(graph_point, self.canvas)

    def _set_state(self, state: GestureState) -> GestureState:
        if state != self.state:
            logger.debug("Gesture %s -> %s", self.state, state)
        self.state = state
        return state

    # -- handlers ------------------------------------------------------------

    def wheel(self, event: WheelEvent) -> GestureState:
        if not self.is_idle:
            logger.debug("Ignoring wheel during %s", self.state)
            return self.state
        self.viewport.zoom_at(event.point, event.delta_y, self.canvas)
        return self.state

    def pointer_down(self, event: PointerEvent) -> GestureState:
        if not self.is_idle:
            logger.debug("Pointer down during %s; ending previous gesture", self.state)
            self._set_state(IDLE)

        target = event.target
        if isinstance(target, NodeTarget):
            return self._start_node_drag(target.node_id, event.point)
        if isinstance(target, ControlPointTarget):
            return self._start_control_point_drag(target.edge_id, target.control_point_id)
        # Edge strokes have no press behaviour of their own and fall through
        # to the canvas, like the background.
        self.selected_node_id = None
        self.selected_edge_id = None
        return self._set_state(Panning(last_pointer=event.point))

    def _start_node_drag(self, node_id: str, screen: Point) -> GestureState:
        node = self.graph.node(node_id)
        if node is None:
            logger.debug("Pointer down on unknown node %r ignored", node_id)
            return self.state
        pointer = self.to_graph(screen)
        node_px = self.canvas.to_pixels(node.point)
        self.selected_node_id = node_id
        self.selected_edge_id = None
        return self._set_state(
            DraggingNode(node_id, Point(pointer[0] - node_px[0], pointer[1] - node_px[1]))
        )

    def _start_control_point_drag(self, edge_id: str, cp_id: str) -> GestureState:
        edge = self.graph.edge(edge_id)
        if edge is None or edge.find_control_point(cp_id) is None:
            logger.debug("Pointer down on unknown control point %r/%r ignored", edge_id, cp_id)
            return self.state
        self.selected_edge_id = edge_id
        return self._set_state(DraggingControlPoint(edge_id, cp_id))

    def pointer_move(self, event: PointerEvent) -> GestureState:
        state = self.state
        if isinstance(state, DraggingNode):
            node = self.graph.node(state.node_id)
            if node is None:
                logger.debug("Dragged node %r disappeared", state.node_id)
                return state
            pointer = self.to_graph(event.point)
            node.x = (pointer[0] - state.grab_offset[0]) / self.canvas.width
            node.y = (pointer[1] - state.grab_offset[1]) / self.canvas.height
        elif isinstance(state, DraggingControlPoint):
            edge = self.graph.edge(state.edge_id)
            cp = edge.find_control_point(state.control_point_id) if edge is not None else None
            if cp is None:
                logger.debug("Dragged control point %r disappeared", state.control_point_id)
                return state
            cp.x, cp.y = self.canvas.to_normalized(self.to_graph(event.point))
        elif isinstance(state, Panning):
            self.viewport.pan(event.x - state.last_pointer[0], event.y - state.last_pointer[1])
            self.state = Panning(last_pointer=event.point)
        return self.state

    def pointer_up(self, event: Optional[PointerEvent] = None) -> GestureState:
        return self._set_state(IDLE)

    def pointer_leave(self, event: Optional[PointerEvent] = None) -> GestureState:
        return self._set_state(IDLE)

    def click_edge(self, edge_id: str) -> Optional[ControlPoint]:
        """Select an edge, giving it a persisted control point on first click.

        The new handle sits at the default curve position for the endpoints
        (offset 0.2 of the chord) in normalized space. An existing handle is
        never moved. Returns the edge's control point, or ``None`` if the edge
        or one of its endpoints is unknown.
        """

        edge = self.graph.edge(edge_id)
        if edge is None:
            logger.debug("Click on unknown edge %r ignored", edge_id)
            return None
        self.selected_edge_id = edge_id
        self.selected_node_id = None

        if edge.control_point is not None:
            return edge.control_point
        source = self.graph.node(edge.source)
        target = self.graph.node(edge.target)
        if source is None or target is None:
            return None
        x, y = default_control_point(source.point, target.point, CLICK_CONTROL_POINT_OFFSET)
        cp = ControlPoint(id=control_point_id(edge_id), x=x, y=y)
        edge.control_points = [cp]
        logger.debug("Created control point %s at (%.4g, %.4g)", cp.id, x, y)
        return cp

    def dispatch(self, event: Event) -> GestureState:
        if isinstance(event, WheelEvent):
            return self.wheel(event)
        if event.kind == "down":
            return self.pointer_down(event)
        if event.kind == "move":
            return self.pointer_move(event)
        if event.kind == "up":
            return self.pointer_up(event)
        if event.kind == "leave":
            return self.pointer_leave(event)
        if event.kind == "click" and isinstance(event.target, EdgeTarget):
            self.click_edge(event.target.edge_id)
        return self.state

    # -- hit testing ---------------------------------------------------------

    def _edge_endpoints(self, edge: GraphEdge):
        source = self.graph.node(edge.source)
        target = self.graph.node(edge.target)
        if source is None or target is None or source.hidden or target.hidden:
            return None
        return self.canvas.to_pixels(source.point), self.canvas.to_pixels(target.point)

    def _node_contains(self, node: GraphNode, pointer: Point) -> bool:
        cx, cy = self.canvas.to_pixels(node.point)
        dx, dy = abs(pointer[0] - cx), abs(pointer[1] - cy)
        if node.shape == "square":
            return dx <= node.size and dy <= node.size
        if node.shape == "rectangle":
            return dx <= node.size * RECTANGLE_ASPECT and dy <= node.size
        return distance(pointer, (cx, cy)) <= node.size

    def hit_test(self, screen: Point, tolerance: float = EDGE_HIT_TOLERANCE) -> Target:
        """Classify what lies under ``screen``, topmost first.

        Order: the selected edge's control point, nodes (last drawn wins),
        edge curves, then the background. Every region is measured in graph
        space, so it grows with zoom like the drawing does; ``tolerance`` is
        the minimum half-width of an edge's clickable stroke.
        """

        pointer = self.to_graph(screen)

        if self.selected_edge_id is not None:
            edge = self.graph.edge(self.selected_edge_id)
            if (
                edge is not None
                and not edge.hidden
                and edge.control_point is not None
                and self._edge_endpoints(edge) is not None
            ):
                cp_px = self.canvas.to_pixels(edge.control_point.point)
                if distance(pointer, cp_px) <= CONTROL_POINT_RADIUS:
                    return ControlPointTarget(edge.id, edge.control_point.id)

        for node in reversed(self.graph.nodes):
            if not node.hidden and self._node_contains(node, pointer):
                return NodeTarget(node.id)

        for edge in reversed(self.graph.edges):
            if edge.hidden:
                continue
            ends = self._edge_endpoints(edge)
            if ends is None:
                continue
            start, end = ends
            control = edge_control_point(edge, start, end, self.canvas)
            reach = max(tolerance, edge.width / 2.0)
            if closest_point_on_quadratic(pointer, start, control, end).distance <= reach:
                return EdgeTarget(edge.id)

        return BACKGROUND


__all__ = [
    "Idle",
    "DraggingNode",
    "DraggingControlPoint",
    "Panning",
    "GestureState",
    "IDLE",
    "NodeTarget",
    "EdgeTarget",
    "ControlPointTarget",
    "BackgroundTarget",
    "BACKGROUND",
    "Target",
    "PointerEvent",
    "WheelEvent",
    "Event",
    "InteractionController",
]
