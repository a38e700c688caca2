import pytest

from curvegraph import parse_graph, print_graph
from curvegraph.printer import format_edge, format_node
from curvegraph.types import StructuralEdge, StructuralGraph, StructuralNode


def test_print_graph_declares_nodes_then_edges():
    graph = parse_graph('A --> B\nB[Beta]\nB ---|w| C\nC <--> A')

    assert print_graph(graph) == (
        'graph TD\n'
        'A\n'
        'B[Beta]\n'
        'C\n'
        'A --> B\n'
        'B ---|w| C\n'
        'C <--> A\n'
    )


def test_printed_text_parses_back_to_same_graph():
    graph = parse_graph('X(one)\nX <--> Y\nY -->|7| Z\nZ{three}\nZ --- X\nW')

    assert parse_graph(print_graph(graph, direction='LR')) == graph


@pytest.mark.parametrize(
    'label, expected',
    [
        ('plain', 'N[plain]'),
        ('has ] bracket', 'N(has ] bracket)'),
        ('has ] and )', 'N{has ] and )}'),
    ],
)
def test_format_node_picks_safe_brackets(label, expected):
    assert format_node(StructuralNode('N', label)) == expected


def test_format_node_rejects_unprintable_label():
    with pytest.raises(ValueError):
        format_node(StructuralNode('N', '] ) }'))


def test_format_edge_rejects_pipe_in_label():
    with pytest.raises(ValueError):
        format_edge(StructuralEdge('A', 'B', 'directed', 'a|b'))


def test_print_without_orientation():
    graph = StructuralGraph(nodes=[StructuralNode('A')])

    assert print_graph(graph, direction=None) == 'A\n'
