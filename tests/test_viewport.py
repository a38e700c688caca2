import itertools
import math

import pytest

from curvegraph.types import Point
from curvegraph.viewport import MAX_SCALE, MIN_SCALE, CanvasGeometry, ViewportTransform

CANVAS = CanvasGeometry(width=800, height=600, left=37.0, top=112.5)

TRANSFORMS = [
    ViewportTransform(),
    ViewportTransform(scale=0.1, offset_x=-250.0, offset_y=13.25),
    ViewportTransform(scale=10.0, offset_x=4000.0, offset_y=-1234.5),
    ViewportTransform(scale=2.718, offset_x=0.5, offset_y=0.25),
]

SCREEN_POINTS = [Point(0.0, 0.0), Point(412.3, 299.9), Point(-1500.0, 8000.0)]


@pytest.mark.parametrize('viewport, screen', itertools.product(TRANSFORMS, SCREEN_POINTS))
def test_screen_graph_round_trip(viewport, screen):
    graph = viewport.screen_to_graph(screen, CANVAS)
    back = viewport.graph_to_screen(graph, CANVAS)

    assert back == (pytest.approx(screen.x, abs=1e-6), pytest.approx(screen.y, abs=1e-6))


def test_screen_to_graph_formula():
    viewport = ViewportTransform(scale=2.0, offset_x=10.0, offset_y=-20.0)

    assert viewport.screen_to_graph(Point(147.0, 92.5), CANVAS) == (50.0, 0.0)


@pytest.mark.parametrize('viewport', TRANSFORMS)
@pytest.mark.parametrize('delta_y', [-120.0, 3.0])
@pytest.mark.parametrize('cursor', [Point(37.0, 112.5), Point(500.0, 250.0), Point(-80.0, 900.0)])
def test_zoom_keeps_cursor_point_fixed(viewport, delta_y, cursor):
    viewport = ViewportTransform(viewport.scale, viewport.offset_x, viewport.offset_y)
    before = viewport.screen_to_graph(cursor, CANVAS)

    viewport.zoom_at(cursor, delta_y, CANVAS)

    after = viewport.screen_to_graph(cursor, CANVAS)
    assert after == (pytest.approx(before.x, abs=1e-9), pytest.approx(before.y, abs=1e-9))


def test_zoom_direction_and_factor():
    viewport = ViewportTransform()

    viewport.zoom_at(Point(0, 0), -1.0, CANVAS)
    assert viewport.scale == pytest.approx(math.exp(0.1))

    viewport.zoom_at(Point(0, 0), 1.0, CANVAS)
    assert viewport.scale == pytest.approx(1.0)


def test_zoom_is_clamped():
    viewport = ViewportTransform()

    for _ in range(100):
        viewport.zoom_at(Point(400, 300), -1.0, CANVAS)
    assert viewport.scale == MAX_SCALE

    for _ in range(200):
        viewport.zoom_at(Point(400, 300), 1.0, CANVAS)
    assert viewport.scale == MIN_SCALE


def test_zero_delta_does_not_zoom():
    viewport = ViewportTransform(scale=3.0, offset_x=5.0, offset_y=6.0)

    viewport.zoom_at(Point(100, 100), 0.0, CANVAS)

    assert (viewport.scale, viewport.offset_x, viewport.offset_y) == (3.0, 5.0, 6.0)


def test_pan_and_reset():
    viewport = ViewportTransform(scale=4.0)

    viewport.pan(10.0, -5.0)
    viewport.pan(1.5, 1.5)
    assert (viewport.offset_x, viewport.offset_y) == (11.5, -3.5)
    assert viewport.scale == 4.0

    viewport.reset()
    assert viewport == ViewportTransform()


def test_constructor_clamps_scale():
    assert ViewportTransform(scale=50.0).scale == MAX_SCALE
    assert ViewportTransform(scale=0.0).scale == MIN_SCALE


def test_canvas_normalization():
    canvas = CanvasGeometry(width=200, height=100)

    assert canvas.to_pixels(Point(0.5, 0.25)) == (100.0, 25.0)
    assert canvas.to_normalized(Point(100.0, 25.0)) == (0.5, 0.25)
