"""Debug renderers for :mod:`bstree.search_tree`.

Every helper here only reads ``value``, ``lesser`` and ``greater`` from the
node graph and never mutates it:

* ``pretty_print`` – sideways drawing with the greater side on top, handy in a
  terminal.
* ``render_levels`` – one row per depth listing the child slots of the row
  above, with ``·`` for an empty slot.
* ``build_networkx_graph`` – a NetworkX ``DiGraph`` for notebooks and layout
  tooling.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

import networkx as nx

from .search_tree import Node

EMPTY_TREE = "<empty>"
EMPTY_SLOT = "·"

__all__ = [
    "EMPTY_SLOT",
    "EMPTY_TREE",
    "build_networkx_graph",
    "pretty_print",
    "render_levels",
]


def pretty_print(root: Optional[Node]) -> str:
    """Render *root* sideways, greater values above and lesser below.

    >>> from bstree.search_tree import Tree
    >>> print(pretty_print(Tree([1, 2, 3]).root))
    │   ┌── 3
    └── 2
        └── 1
    """

    if root is None:
        return EMPTY_TREE

    lines: List[str] = []
    # (node, prefix, is_lesser, expanded)
    stack: List[tuple[Node, str, bool, bool]] = [(root, "", True, False)]
    while stack:
        node, prefix, is_lesser, expanded = stack.pop()
        if expanded:
            connector = "└── " if is_lesser else "┌── "
            lines.append(f"{prefix}{connector}{node.value}")
            continue
        if node.lesser is not None:
            child_prefix = prefix + ("    " if is_lesser else "│   ")
            stack.append((node.lesser, child_prefix, True, False))
        stack.append((node, prefix, is_lesser, True))
        if node.greater is not None:
            child_prefix = prefix + ("│   " if is_lesser else "    ")
            stack.append((node.greater, child_prefix, False, False))
    return "\n".join(lines)


def render_levels(root: Optional[Node]) -> str:
    """Render *root* as rows of child slots, one row per depth.

    Each row lists the ``lesser`` and ``greater`` slot of every node in the
    row above, left to right.  Empty slots never open slots of their own, so a
    row holds at most twice as many entries as there are nodes above it and a
    list-shaped tree renders two entries per depth.
    """

    if root is None:
        return EMPTY_TREE

    rows = [str(root.value)]
    parents: List[Node] = [root]
    while parents:
        slots: List[str] = []
        children: List[Node] = []
        for parent in parents:
            for child in (parent.lesser, parent.greater):
                if child is None:
                    slots.append(EMPTY_SLOT)
                    continue
                slots.append(str(child.value))
                children.append(child)
        if children:
            rows.append(" ".join(slots))
        parents = children
    return "\n".join(rows)


def build_networkx_graph(root: Optional[Node]) -> nx.DiGraph:
    """Convert the subtree at *root* to a NetworkX ``DiGraph``.

    Nodes are keyed by value.  Each edge points from parent to child and
    carries a ``side`` attribute of ``"lesser"`` or ``"greater"``.
    """

    graph = nx.DiGraph()
    if root is None:
        return graph

    queue: Deque[Node] = deque([root])
    graph.add_node(root.value)
    while queue:
        node = queue.popleft()
        for side, child in (("lesser", node.lesser), ("greater", node.greater)):
            if child is None:
                continue
            graph.add_node(child.value)
            graph.add_edge(node.value, child.value, side=side)
            queue.append(child)
    return graph
