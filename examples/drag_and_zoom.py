"""Example pipeline: parse a description, lay it out, then edit it with gestures."""

from curvegraph import InteractionController, NodeTarget, PointerEvent, WheelEvent, edge_geometry, load_graph

TEXT = """
graph LR
%% a small pipeline
src[Source]
src --> parse
parse --> layout
layout -->|positions| render
render ---|0.5| src
"""


def main() -> None:
    data = load_graph(TEXT)
    controller = InteractionController(data)

    for node in data.nodes:
        print(f"{node.id}: ({node.x:.3f}, {node.y:.3f})")

    # Bend the first edge, then drag its source node 50px to the right.
    edge = data.edges[0]
    controller.click_edge(edge.id)
    src = data.node(edge.source)
    grab = controller.to_screen(controller.canvas.to_pixels(src.point))
    controller.dispatch(PointerEvent("down", grab.x, grab.y, NodeTarget(src.id)))
    controller.dispatch(PointerEvent("move", grab.x + 50, grab.y))
    controller.dispatch(PointerEvent("up", grab.x + 50, grab.y))
    controller.dispatch(WheelEvent(grab.x, grab.y, -1.0))

    geom = edge_geometry(edge, src, data.node(edge.target), controller.canvas)
    print("Moved", src.id, "to", f"({src.x:.3f}, {src.y:.3f})")
    print("Edge path:", geom.path_data)
    print("Zoom:", f"{controller.viewport.scale:.3f}")


if __name__ == "__main__":
    main()
