"""Line-oriented parser for the textual graph notation."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple, Union

from .logging_utils import debug_log_call
from .types import (
    BIDIRECTED,
    DIRECTED,
    UNDIRECTED,
    EdgeKind,
    StructuralEdge,
    StructuralGraph,
    StructuralNode,
)

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "%%"

_ORIENTATION_RE = re.compile(r"^graph\s+(TD|LR|TB|RL|BT)", re.IGNORECASE)
_ARROW_RE = re.compile(r"<-->|-->|---")


class ParseError(ValueError):
    """Raised in strict mode for a line that is neither an edge nor a node."""

    def __init__(self, line_no: int, line: str, reason: str):
        super().__init__(f"[line {line_no}] {reason}: {line!r}")
        self.line_no = line_no
        self.line = line
        self.reason = reason


@dataclass(frozen=True)
class NodeDecl:
    id: str
    label: str


@dataclass(frozen=True)
class EdgeDecl:
    source: str
    target: str
    kind: EdgeKind
    label: Optional[str] = None


LineMatch = Union[NodeDecl, EdgeDecl]
Matcher = Callable[[str], Optional[LineMatch]]


def _edge_matcher(arrow: str, kind: EdgeKind) -> Matcher:
    pattern = re.compile(
        r"^(\w+)\s*" + re.escape(arrow) + r"\s*(?:\|([^|]+)\|)?\s*(\w+)$",
        re.ASCII,
    )

    def match(line: str) -> Optional[LineMatch]:
        m = pattern.match(line)
        if not m:
            return None
        label = m.group(2).strip() if m.group(2) is not None else None
        return EdgeDecl(m.group(1), m.group(3), kind, label or None)

    match.__name__ = f"match_{kind}_edge"
    return match


def _node_matcher(pattern: re.Pattern[str]) -> Matcher:
    def match(line: str) -> Optional[LineMatch]:
        m = pattern.match(line)
        if not m:
            return None
        node_id = m.group(1)
        raw = m.group(2) if m.lastindex and m.lastindex >= 2 else None
        return NodeDecl(node_id, raw.strip() if raw is not None else node_id)

    return match


# Edge matchers come first: the left-hand token of an edge line is itself a
# valid bare node declaration.
MATCHERS: Tuple[Matcher, ...] = (
    _edge_matcher("<-->", BIDIRECTED),
    _edge_matcher("-->", DIRECTED),
    _edge_matcher("---", UNDIRECTED),
    _node_matcher(re.compile(r"^(\w+)\[([^\]]+)\]$", re.ASCII)),
    _node_matcher(re.compile(r"^(\w+)\(([^)]+)\)$", re.ASCII)),
    _node_matcher(re.compile(r"^(\w+)\{([^}]+)\}$", re.ASCII)),
    _node_matcher(re.compile(r"^(\w+)$", re.ASCII)),
)


def match_line(line: str) -> Optional[LineMatch]:
    """Return the first tagged match for ``line`` or ``None``."""

    for matcher in MATCHERS:
        result = matcher(line)
        if result is not None:
            return result
    return None


def _numbered_lines(text: str) -> List[Tuple[int, str]]:
    out: List[Tuple[int, str]] = []
    for idx, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        if line:
            out.append((idx, line))
    return out


def is_orientation(line: str) -> bool:
    return bool(_ORIENTATION_RE.match(line))


@debug_log_call(logger)
def parse_graph(text: str, *, strict: bool = False) -> StructuralGraph:
    """Parse a graph description into a :class:`StructuralGraph`.

    Lines are processed strictly top to bottom. Edge lines declare missing
    endpoints with ``label == id``; explicit node lines overwrite the label
    (last write wins) without moving the node in first-seen order.

    Lines matching no pattern are skipped, or raise :class:`ParseError` when
    ``strict`` is set.
    """

    lines = _numbered_lines(text)
    if lines and is_orientation(lines[0][1]):
        lines = lines[1:]

    labels: Dict[str, str] = {}
    edges: List[StructuralEdge] = []

    for line_no, line in lines:
        if line.startswith(COMMENT_PREFIX):
            continue
        result = match_line(line)
        if isinstance(result, EdgeDecl):
            labels.setdefault(result.source, result.source)
            labels.setdefault(result.target, result.target)
            edges.append(
                StructuralEdge(result.source, result.target, result.kind, result.label)
            )
        elif isinstance(result, NodeDecl):
            labels[result.id] = result.label
        else:
            reason = "malformed edge" if _ARROW_RE.search(line) else "unrecognized statement"
            if strict:
                raise ParseError(line_no, line, reason)
            logger.debug("Skipping line %d (%s): %r", line_no, reason, line)

    nodes = [StructuralNode(node_id, label) for node_id, label in labels.items()]
    logger.info("Parsed graph with %d nodes and %d edges", len(nodes), len(edges))
    return StructuralGraph(nodes=nodes, edges=edges)


__all__ = [
    "ParseError",
    "NodeDecl",
    "EdgeDecl",
    "LineMatch",
    "MATCHERS",
    "match_line",
    "is_orientation",
    "parse_graph",
]
