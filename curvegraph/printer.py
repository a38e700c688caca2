from typing import Iterable, List, Optional

from .types import BIDIRECTED, DIRECTED, UNDIRECTED, StructuralEdge, StructuralGraph, StructuralNode

ARROWS = {
    BIDIRECTED: "<-->",
    DIRECTED: "-->",
    UNDIRECTED: "---",
}

_BRACKETS = (("[", "]"), ("(", ")"), ("{", "}"))


def format_node(node: StructuralNode) -> str:
    if node.label == node.id:
        return node.id
    for open_br, close_br in _BRACKETS:
        if close_br not in node.label:
            return f"{node.id}{open_br}{node.label}{close_br}"
    raise ValueError(f"label of node '{node.id}' cannot be bracketed: {node.label!r}")


def format_edge(edge: StructuralEdge) -> str:
    arrow = ARROWS[edge.kind]
    if edge.label:
        if "|" in edge.label:
            raise ValueError(f"edge label may not contain '|': {edge.label!r}")
        arrow = f"{arrow}|{edge.label}|"
    return f"{edge.source} {arrow} {edge.target}"


def format_lines(graph: StructuralGraph) -> Iterable[str]:
    for node in graph.nodes:
        yield format_node(node)
    for edge in graph.edges:
        yield format_edge(edge)


def print_graph(graph: StructuralGraph, direction: Optional[str] = "TD") -> str:
    """Render ``graph`` back into the textual notation.

    Every node is declared before the edges so re-parsing keeps node order.
    """

    lines: List[str] = []
    if direction:
        lines.append(f"graph {direction}")
    lines.extend(format_lines(graph))
    return "\n".join(lines) + "\n"
