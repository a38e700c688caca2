from . import EXAMPLE_DIAGRAM, InteractionController, edge_geometry, load_graph, print_graph, parse_graph


def run():
    graph = parse_graph(EXAMPLE_DIAGRAM)
    print(f"Parsed graph:\n{print_graph(graph)}")

    data = load_graph(EXAMPLE_DIAGRAM)
    print("Layout:")
    for node in data.nodes:
        print(f"  {node.id:<4} ({node.x:.3f}, {node.y:.3f})  {node.label}")

    controller = InteractionController(data)
    edge = data.edges[0]
    cp = controller.click_edge(edge.id)
    print(f"\nClicked {edge.id}: control point {cp}")

    source = data.node(edge.source)
    target = data.node(edge.target)
    geom = edge_geometry(edge, source, target, controller.canvas)
    print(f"Path: {geom.path_data}")
    if geom.end_arrow is not None:
        print(f"Arrow tip: ({geom.end_arrow.tip.x:.1f}, {geom.end_arrow.tip.y:.1f})")


if __name__ == "__main__":
    run()
