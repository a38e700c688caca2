import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Sequence

from curvegraph import (
    CanvasGeometry,
    GraphData,
    ParseError,
    build_graph_data,
    compute_layout,
    edge_geometry,
    get_graph_config,
    parse_graph,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _edge_geometries(data: GraphData, canvas: CanvasGeometry, arrow_size: float) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for edge in data.edges:
        source = data.node(edge.source)
        target = data.node(edge.target)
        if source is None or target is None:
            logger.warning("Edge %s references a missing node", edge.id)
            continue
        out.append(asdict(edge_geometry(edge, source, target, canvas, arrow_size)))
    return out


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Parse and lay out a graph description")
    parser.add_argument("path", help="Path to the graph description file ('-' for stdin)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on lines that are neither edges nor node declarations",
    )
    parser.add_argument(
        "--output",
        help="Write the graph data JSON to this path instead of stdout",
    )
    parser.add_argument(
        "--geometry",
        action="store_true",
        help="Include pixel-space edge geometry (paths, arrowheads, labels)",
    )
    parser.add_argument("--width", type=float, default=800.0, help="Canvas width in pixels (default: 800)")
    parser.add_argument("--height", type=float, default=600.0, help="Canvas height in pixels (default: 600)")
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.path == "-":
        text = sys.stdin.read()
    else:
        with open(args.path, encoding="utf-8") as fin:
            text = fin.read()

    logger.info("Parsing graph description from %s", args.path)
    try:
        structural = parse_graph(text, strict=args.strict)
    except ParseError as exc:
        logger.error("Parse failed: %s", exc)
        return 1

    config = get_graph_config()
    data = build_graph_data(structural, compute_layout(structural), config)
    payload: Dict[str, Any] = data.to_dict()
    if args.geometry:
        canvas = CanvasGeometry(width=args.width, height=args.height)
        payload["geometry"] = _edge_geometries(data, canvas, config.arrow_size)

    rendered = json.dumps(payload, indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fout:
            fout.write(rendered + "\n")
        logger.info("Wrote graph data to %s", args.output)
    else:
        print(rendered)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
