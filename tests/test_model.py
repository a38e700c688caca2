import math

import pytest

from curvegraph import GraphConfig, build_graph_data, get_graph_config, load_graph, parse_graph, set_graph_config
from curvegraph.curves import annotation_anchor, arrowhead, edge_geometry, implicit_control_point
from curvegraph.model import Annotation, GraphEdge, GraphNode
from curvegraph.reference import EXAMPLE_DIAGRAM
from curvegraph.types import ControlPoint, Point
from curvegraph.viewport import CanvasGeometry


def test_build_graph_data_applies_defaults():
    graph = parse_graph('A[Alpha]\nA -->|w| B\nB <--> A')
    positions = {'A': Point(0.2, 0.3), 'B': Point(0.7, 0.6)}

    data = build_graph_data(graph, positions, GraphConfig(default_node_color='#ff0000'))

    assert [(n.id, n.label, n.x, n.y) for n in data.nodes] == [
        ('A', 'Alpha', 0.2, 0.3),
        ('B', 'B', 0.7, 0.6),
    ]
    assert all(n.color == '#ff0000' and n.shape == 'circle' and n.opacity == 0.8 for n in data.nodes)
    assert [e.id for e in data.edges] == ['edge-0', 'edge-1']
    assert [e.kind for e in data.edges] == ['directed', 'bidirected']
    assert data.edges[0].annotations == [Annotation('w', 0.5, 15.0)]
    assert data.edges[1].annotations == []
    assert all(e.control_points == [] for e in data.edges)


def test_build_graph_data_requires_positions():
    graph = parse_graph('A --> B')

    with pytest.raises(KeyError) as excinfo:
        build_graph_data(graph, {'A': Point(0.5, 0.5)})

    assert "'B'" in str(excinfo.value)


def test_graph_config_round_trip_is_copied():
    original = get_graph_config()
    try:
        custom = GraphConfig(default_node_size=12.0)
        set_graph_config(custom)
        custom.default_node_size = 99.0

        assert get_graph_config().default_node_size == 12.0
        data = load_graph('A')
        assert data.nodes[0].size == 12.0
    finally:
        set_graph_config(original)


def test_to_dict_is_json_friendly():
    data = load_graph('A -->|1| B')
    payload = data.to_dict()

    assert payload['edges'][0]['annotations'] == [{'value': '1', 'position': 0.5, 'offset': 15.0}]
    assert payload['edges'][0]['control_points'] == []
    assert set(payload['nodes'][0]) >= {'id', 'label', 'x', 'y', 'shape', 'color', 'size', 'opacity'}


def test_example_diagram_loads():
    data = load_graph(EXAMPLE_DIAGRAM)

    assert [n.label for n in data.nodes] == ['Node A', 'Node B', 'Node C', 'Node D']
    assert len(data.edges) == 6
    assert data.edges[-1].annotations[0].value == '0.75'


CANVAS = CanvasGeometry(width=100, height=100)


def nodes_at(a, b, size=5.0):
    return GraphNode('A', 'A', *a, size=size), GraphNode('B', 'B', *b, size=size)


def test_edge_geometry_uses_implicit_curve_without_control_point():
    source, target = nodes_at((0.0, 0.0), (1.0, 0.0))
    edge = GraphEdge('edge-0', 'A', 'B', 'undirected')

    geom = edge_geometry(edge, source, target, CANVAS)

    assert geom.control == implicit_control_point(Point(0, 0), Point(100, 0))
    assert geom.control == (pytest.approx(50.0), pytest.approx(20.0))
    assert geom.path_data == 'M 0 0 Q 50 20 100 0'
    assert geom.end_arrow is None and geom.start_arrow is None
    assert edge.control_points == []


def test_edge_geometry_uses_stored_control_point():
    source, target = nodes_at((0.0, 0.5), (1.0, 0.5))
    edge = GraphEdge('edge-0', 'A', 'B', 'directed', control_points=[ControlPoint('edge-0-cp-0', 0.5, 0.0)])

    geom = edge_geometry(edge, source, target, CANVAS)

    assert geom.control == (50.0, 0.0)
    assert geom.end_arrow is not None
    assert geom.start_arrow is None


def test_arrowheads_on_straight_edge():
    start, control, end = Point(0, 0), Point(50, 0), Point(100, 0)

    head = arrowhead(start, control, end, node_size=8, arrow_size=12)
    tail = arrowhead(start, control, end, node_size=8, arrow_size=12, at_start=True)

    # t = 1 - (8 + 12) / 100 / 2 = 0.9
    assert head.tip == (pytest.approx(90.0), pytest.approx(0.0))
    assert head.angle == pytest.approx(0.0)
    assert head.wings[0].x < head.tip.x and head.wings[1].x < head.tip.x
    assert tail.tip == (pytest.approx(10.0), pytest.approx(0.0))
    assert tail.angle == pytest.approx(math.pi)


def test_arrowhead_on_degenerate_edge_has_zero_angle():
    p = Point(5, 5)

    head = arrowhead(p, p, p, node_size=10, arrow_size=12)

    assert head.tip == p
    assert head.angle == 0.0


def test_bidirected_edge_gets_both_arrows():
    source, target = nodes_at((0.1, 0.1), (0.9, 0.9))
    edge = GraphEdge('edge-0', 'A', 'B', 'bidirected')

    geom = edge_geometry(edge, source, target, CANVAS)

    assert geom.end_arrow is not None
    assert geom.start_arrow is not None


def test_annotation_anchor_offsets_along_normal():
    start, control, end = Point(0, 0), Point(50, 0), Point(100, 0)

    anchor = annotation_anchor(Annotation('w', 0.5, 15.0), start, control, end)

    assert anchor.value == 'w'
    assert anchor.point == (pytest.approx(50.0), pytest.approx(15.0))


@pytest.mark.parametrize(
    'annotation, expected',
    [
        (Annotation('w', 0.0, 0.0), (0.0, 0.0)),
        (Annotation('w', 0.0, 10.0), (0.0, 10.0)),
        (Annotation('w', 1.0, 0.0), (100.0, 0.0)),
    ],
)
def test_annotation_anchor_keeps_zero_position_and_offset(annotation, expected):
    start, control, end = Point(0, 0), Point(50, 0), Point(100, 0)

    anchor = annotation_anchor(annotation, start, control, end)

    assert anchor.point == (pytest.approx(expected[0]), pytest.approx(expected[1], abs=1e-9))
