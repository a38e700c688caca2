"""Bezier curve geometry used for drawing and editing edges.

All functions are pure and total over finite inputs. Parameters outside
``[0, 1]`` extrapolate; callers clamp where it matters.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from .types import ControlPoint, Point


@dataclass(frozen=True)
class ClosestPoint:
    point: Point
    t: float
    distance: float


def quadratic_point(t: float, p0: Point, p1: Point, p2: Point) -> Point:
    mt = 1.0 - t
    return Point(
        mt * mt * p0[0] + 2.0 * mt * t * p1[0] + t * t * p2[0],
        mt * mt * p0[1] + 2.0 * mt * t * p1[1] + t * t * p2[1],
    )


def quadratic_tangent(t: float, p0: Point, p1: Point, p2: Point) -> Point:
    mt = 1.0 - t
    return Point(
        2.0 * mt * (p1[0] - p0[0]) + 2.0 * t * (p2[0] - p1[0]),
        2.0 * mt * (p1[1] - p0[1]) + 2.0 * t * (p2[1] - p1[1]),
    )


def cubic_point(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Point:
    mt = 1.0 - t
    mt2 = mt * mt
    t2 = t * t
    return Point(
        mt2 * mt * p0[0] + 3.0 * mt2 * t * p1[0] + 3.0 * mt * t2 * p2[0] + t2 * t * p3[0],
        mt2 * mt * p0[1] + 3.0 * mt2 * t * p1[1] + 3.0 * mt * t2 * p2[1] + t2 * t * p3[1],
    )


def cubic_tangent(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Point:
    mt = 1.0 - t
    return Point(
        3.0 * mt * mt * (p1[0] - p0[0]) + 6.0 * mt * t * (p2[0] - p1[0]) + 3.0 * t * t * (p3[0] - p2[0]),
        3.0 * mt * mt * (p1[1] - p0[1]) + 6.0 * mt * t * (p2[1] - p1[1]) + 3.0 * t * t * (p3[1] - p2[1]),
    )


def default_control_point(start: Point, end: Point, offset: float = 0.3) -> Point:
    """Return the chord midpoint pushed sideways by ``offset`` chord lengths.

    The displacement follows the left perpendicular ``(-dy, dx)`` of the
    start->end chord; positive ``offset`` bends one way, negative the other.
    A zero-length chord yields the midpoint itself.
    """

    mid_x = (start[0] + end[0]) * 0.5
    mid_y = (start[1] + end[1]) * 0.5
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    # |(-dy, dx)| == |chord|, so scaling the raw perpendicular by offset
    # already gives offset * |chord|.
    return Point(mid_x - dy * offset, mid_y + dx * offset)


def angle_of(dx: float, dy: float) -> float:
    return math.atan2(dy, dx)


def distance(p1: Point, p2: Point) -> float:
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


def is_point_near(p1: Point, p2: Point, threshold: float) -> bool:
    return distance(p1, p2) < threshold


def closest_point_on_quadratic(
    point: Point, p0: Point, p1: Point, p2: Point, samples: int = 20
) -> ClosestPoint:
    """Approximate the curve point nearest to ``point`` by uniform sampling.

    ``samples + 1`` parameters are evaluated; on ties the smallest ``t`` wins.
    """

    samples = max(int(samples), 1)
    ts = np.arange(samples + 1, dtype=float) / samples
    mt = 1.0 - ts
    xs = mt * mt * p0[0] + 2.0 * mt * ts * p1[0] + ts * ts * p2[0]
    ys = mt * mt * p0[1] + 2.0 * mt * ts * p1[1] + ts * ts * p2[1]
    dists = np.hypot(xs - point[0], ys - point[1])
    idx = int(np.argmin(dists))
    return ClosestPoint(
        point=Point(float(xs[idx]), float(ys[idx])),
        t=float(ts[idx]),
        distance=float(dists[idx]),
    )


def smooth_curve_control_points(points: Sequence[Point], tension: float = 0.5) -> List[ControlPoint]:
    """Catmull-Rom to cubic Bezier conversion for a poly-line.

    Returns two control points per segment (``cp-<i>-1``, ``cp-<i>-2``).
    Missing neighbours at the ends are clamped to the nearest endpoint.
    """

    if len(points) < 2:
        return []

    last = len(points) - 1
    out: List[ControlPoint] = []
    for i in range(last):
        p0 = points[max(0, i - 1)]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[min(last, i + 2)]
        out.append(
            ControlPoint(
                id=f"cp-{i}-1",
                x=p1[0] + (p2[0] - p0[0]) / 6.0 * tension,
                y=p1[1] + (p2[1] - p0[1]) / 6.0 * tension,
            )
        )
        out.append(
            ControlPoint(
                id=f"cp-{i}-2",
                x=p2[0] - (p3[0] - p1[0]) / 6.0 * tension,
                y=p2[1] - (p3[1] - p1[1]) / 6.0 * tension,
            )
        )
    return out


def _fmt(value: float) -> str:
    return f"{value:.6g}"


def quadratic_path_data(start: Point, control: Point, end: Point) -> str:
    return (
        f"M {_fmt(start[0])} {_fmt(start[1])} "
        f"Q {_fmt(control[0])} {_fmt(control[1])} {_fmt(end[0])} {_fmt(end[1])}"
    )


def cubic_path_data(start: Point, control1: Point, control2: Point, end: Point) -> str:
    return (
        f"M {_fmt(start[0])} {_fmt(start[1])} "
        f"C {_fmt(control1[0])} {_fmt(control1[1])} "
        f"{_fmt(control2[0])} {_fmt(control2[1])} {_fmt(end[0])} {_fmt(end[1])}"
    )


__all__ = [
    "ClosestPoint",
    "quadratic_point",
    "quadratic_tangent",
    "cubic_point",
    "cubic_tangent",
    "default_control_point",
    "angle_of",
    "distance",
    "is_point_near",
    "closest_point_on_quadratic",
    "smooth_curve_control_points",
    "quadratic_path_data",
    "cubic_path_data",
]
