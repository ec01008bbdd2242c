"""Balanced binary search tree with explicit rebalancing and debug renderers."""

from .demo_config import DemoConfig, load_demo_config
from .rendering import build_networkx_graph, pretty_print, render_levels
from .search_tree import (
    Node,
    NodeNotFoundError,
    Tree,
    TreeValueError,
    Visitor,
    build_tree,
    depth,
    find_node,
    height,
    is_balanced,
)

__all__ = [
    "DemoConfig",
    "Node",
    "NodeNotFoundError",
    "Tree",
    "TreeValueError",
    "Visitor",
    "build_networkx_graph",
    "build_tree",
    "depth",
    "find_node",
    "height",
    "is_balanced",
    "load_demo_config",
    "pretty_print",
    "render_levels",
]
