"""Style defaults applied when turning a parsed graph into editable data."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class GraphConfig:
    """Visual defaults. The core passes these through without interpreting them."""

    default_node_size: float = 50.0
    default_node_color: str = "#c8c8c8"
    default_node_shape: str = "circle"
    default_node_opacity: float = 0.8
    default_edge_color: str = "#000000"
    default_edge_width: float = 2.0
    default_edge_style: str = "solid"
    default_edge_opacity: float = 0.8
    background_color: str = "#eeeeee"
    font_size: int = 14
    font_family: str = "sans-serif"
    arrow_size: float = 12.0
    label_position: float = 0.5
    label_offset: float = 15.0


_GRAPH_CONFIG = GraphConfig()


def get_graph_config() -> GraphConfig:
    return copy.deepcopy(_GRAPH_CONFIG)


def set_graph_config(config: GraphConfig) -> None:
    global _GRAPH_CONFIG
    _GRAPH_CONFIG = copy.deepcopy(config)


__all__ = ["GraphConfig", "get_graph_config", "set_graph_config"]
