"""Pixel-space geometry of a drawn edge: curve, arrowheads and labels."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .geometry import (
    angle_of,
    default_control_point,
    distance,
    quadratic_path_data,
    quadratic_point,
    quadratic_tangent,
)
from .model import Annotation, GraphEdge, GraphNode
from .types import BIDIRECTED, DIRECTED, Point
from .viewport import CanvasGeometry

IMPLICIT_CURVE_OFFSET = 0.2
ARROW_HALF_ANGLE = math.pi / 6


@dataclass(frozen=True)
class Arrowhead:
    tip: Point
    angle: float
    wings: Tuple[Point, Point]


@dataclass(frozen=True)
class LabelAnchor:
    value: object
    point: Point


@dataclass
class EdgeGeometry:
    edge_id: str
    start: Point
    control: Point
    end: Point
    path_data: str
    end_arrow: Optional[Arrowhead] = None
    start_arrow: Optional[Arrowhead] = None
    labels: List[LabelAnchor] = field(default_factory=list)


def _clamp01(t: float) -> float:
    return max(0.0, min(1.0, t))


def _direction_angle(tangent: Point) -> float:
    if tangent[0] == 0.0 and tangent[1] == 0.0:
        return 0.0
    return angle_of(tangent[0], tangent[1])


def implicit_control_point(start: Point, end: Point) -> Point:
    """Pixel control point drawn for an edge without a stored handle."""

    return default_control_point(start, end, IMPLICIT_CURVE_OFFSET)


def edge_control_point(edge: GraphEdge, start: Point, end: Point, canvas: CanvasGeometry) -> Point:
    stored = edge.control_point
    if stored is not None:
        return canvas.to_pixels(stored.point)
    return implicit_control_point(start, end)


def arrowhead(
    start: Point,
    control: Point,
    end: Point,
    node_size: float,
    arrow_size: float,
    *,
    at_start: bool = False,
) -> Arrowhead:
    """Arrowhead placed where the curve meets a node of radius ``node_size``.

    The curve parameter is estimated from the chord length and clamped to
    ``[0, 1]``; a degenerate tangent gives angle 0.
    """

    chord = distance(start, end)
    inset = (node_size + arrow_size) / chord / 2.0 if chord > 0.0 else 1.0
    t = _clamp01(inset if at_start else 1.0 - inset)
    tip = quadratic_point(t, start, control, end)
    angle = _direction_angle(quadratic_tangent(t, start, control, end))
    if at_start:
        angle += math.pi
    left = angle - ARROW_HALF_ANGLE
    right = angle + ARROW_HALF_ANGLE
    wings = (
        Point(tip[0] - arrow_size * math.cos(left), tip[1] - arrow_size * math.sin(left)),
        Point(tip[0] - arrow_size * math.cos(right), tip[1] - arrow_size * math.sin(right)),
    )
    return Arrowhead(tip=tip, angle=angle, wings=wings)


def annotation_anchor(annotation: Annotation, start: Point, control: Point, end: Point) -> LabelAnchor:
    t, offset = annotation.position, annotation.offset
    base = quadratic_point(t, start, control, end)
    normal = _direction_angle(quadratic_tangent(t, start, control, end)) + math.pi / 2
    return LabelAnchor(
        value=annotation.value,
        point=Point(base[0] + math.cos(normal) * offset, base[1] + math.sin(normal) * offset),
    )


def edge_geometry(
    edge: GraphEdge,
    source: GraphNode,
    target: GraphNode,
    canvas: CanvasGeometry,
    arrow_size: float = 12.0,
) -> EdgeGeometry:
    start = canvas.to_pixels(source.point)
    end = canvas.to_pixels(target.point)
    control = edge_control_point(edge, start, end, canvas)

    geom = EdgeGeometry(
        edge_id=edge.id,
        start=start,
        control=control,
        end=end,
        path_data=quadratic_path_data(start, control, end),
    )
    if edge.kind in (DIRECTED, BIDIRECTED):
        geom.end_arrow = arrowhead(start, control, end, target.size, arrow_size)
    if edge.kind == BIDIRECTED:
        geom.start_arrow = arrowhead(start, control, end, source.size, arrow_size, at_start=True)
    geom.labels = [annotation_anchor(a, start, control, end) for a in edge.annotations]
    return geom


__all__ = [
    "IMPLICIT_CURVE_OFFSET",
    "Arrowhead",
    "LabelAnchor",
    "EdgeGeometry",
    "implicit_control_point",
    "edge_control_point",
    "arrowhead",
    "annotation_anchor",
    "edge_geometry",
]
