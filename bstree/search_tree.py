"""Binary search tree with balanced construction and explicit rebalancing.

The :class:`Tree` keeps a single optional root :class:`Node`.  Every node owns
its ``lesser`` and ``greater`` children exclusively and carries no parent
reference, so ancestry questions such as :func:`depth` re-walk the tree by
value comparison.

The public API covers:

* ``Tree(values)`` / :func:`build_tree` – deduplicate, sort and build a
  height-balanced tree by repeatedly picking the lower-middle element.
* ``insert`` / ``find`` – comparison walks that never introduce duplicates and
  report absence as ``None``.
* ``delete`` – the historical detach-the-child-subtree contract, and
  ``remove`` – a relinking deletion that drops exactly one node.
* Traversals in level-order, inorder, preorder and postorder, each offered as
  a list-producing call and as a visitor-driven ``walk_*`` call.
* :func:`height`, :func:`depth`, :func:`is_balanced` and ``rebalance``.

Rebalancing never happens implicitly.  Repeated insertion can degrade the tree
towards a linked list; callers invoke ``rebalance`` when they need the
balanced shape back.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import logging
import math
from typing import Any, Callable, Deque, Dict, Iterable, Iterator, List, Optional, Sequence

logger = logging.getLogger(__name__)

__all__ = [
    "Node",
    "NodeNotFoundError",
    "Tree",
    "TreeValueError",
    "Visitor",
    "build_tree",
    "depth",
    "find_node",
    "height",
    "is_balanced",
]


class TreeValueError(TypeError):
    """Raised when a value cannot take part in a total ordering."""


class NodeNotFoundError(LookupError):
    """Raised when a node does not lie on the comparison path from an ancestor."""


@dataclass(slots=True, eq=False)
class Node:
    """A tree node owning up to two children."""

    value: Any
    lesser: Optional["Node"] = None
    greater: Optional["Node"] = None

    def __post_init__(self) -> None:
        _validate_value(self.value)

    @property
    def is_leaf(self) -> bool:
        return self.lesser is None and self.greater is None


Visitor = Callable[[Node], None]


def _validate_value(value: Any) -> None:
    if value is None:
        raise TreeValueError("Tree values must not be None")
    if isinstance(value, bool):
        raise TreeValueError("Tree values must not be booleans")
    if isinstance(value, float) and math.isnan(value):
        raise TreeValueError("NaN cannot be ordered and is not a valid tree value")


def _ordered_unique(values: Iterable[Any]) -> List[Any]:
    """Return the distinct *values* in ascending order."""

    materialised = list(values)
    for value in materialised:
        _validate_value(value)
    try:
        return sorted(set(materialised))
    except TypeError as exc:
        raise TreeValueError(
            "Tree values must be mutually comparable scalars"
        ) from exc


def _build_range(ordered: Sequence[Any], start: int, end: int) -> Optional[Node]:
    if start > end:
        return None
    middle = (start + end) // 2
    return Node(
        ordered[middle],
        lesser=_build_range(ordered, start, middle - 1),
        greater=_build_range(ordered, middle + 1, end),
    )


def build_tree(values: Iterable[Any]) -> Optional[Node]:
    """Build a height-balanced subtree from *values* and return its root.

    Duplicates are discarded and the remaining values sorted.  For each index
    range the lower-middle element becomes the subtree root, which makes the
    resulting shape fully deterministic for a given set of values.
    """

    ordered = _ordered_unique(values)
    return _build_range(ordered, 0, len(ordered) - 1)


def _compare(value: Any, other: Any) -> int:
    try:
        if value < other:
            return -1
        if value > other:
            return 1
    except TypeError as exc:
        raise TreeValueError(
            f"Cannot compare {value!r} with tree value {other!r}"
        ) from exc
    return 0


def find_node(start: Optional[Node], value: Any) -> Optional[Node]:
    """Return the node holding *value* below *start*, or ``None``."""

    current = start
    while current is not None:
        order = _compare(value, current.value)
        if order == 0:
            return current
        current = current.greater if order > 0 else current.lesser
    return None


def height(node: Optional[Node]) -> int:
    """Return the edge count of the longest downward path from *node*.

    An absent node has height ``-1`` and a leaf has height ``0``.  The
    computation is level-based so list-shaped trees do not recurse.
    """

    if node is None:
        return -1
    levels = -1
    queue: Deque[Node] = deque([node])
    while queue:
        levels += 1
        for _ in range(len(queue)):
            current = queue.popleft()
            if current.lesser is not None:
                queue.append(current.lesser)
            if current.greater is not None:
                queue.append(current.greater)
    return levels


def depth(node: Node, ancestor: Optional[Node]) -> int:
    """Return the number of edges from *ancestor* down to *node*.

    The walk compares values rather than identities.  ``NodeNotFoundError`` is
    raised when ``node.value`` is not reachable along the comparison path, so a
    miss can never be confused with a valid depth of ``0``.
    """

    edges = 0
    current = ancestor
    while current is not None:
        order = _compare(node.value, current.value)
        if order == 0:
            return edges
        current = current.greater if order > 0 else current.lesser
        edges += 1
    raise NodeNotFoundError(
        f"Value {node.value!r} is not on the comparison path from the ancestor"
    )


def _postorder_nodes(node: Optional[Node]) -> Iterator[Node]:
    stack: List[tuple[Node, bool]] = []
    if node is not None:
        stack.append((node, False))
    while stack:
        current, children_done = stack.pop()
        if children_done:
            yield current
            continue
        stack.append((current, True))
        if current.greater is not None:
            stack.append((current.greater, False))
        if current.lesser is not None:
            stack.append((current.lesser, False))


def is_balanced(node: Optional[Node]) -> bool:
    """Return ``True`` when every node below *node* is height-balanced.

    Heights are accumulated bottom-up and the check stops at the first node
    whose child heights differ by more than one.
    """

    heights: Dict[int, int] = {}
    for current in _postorder_nodes(node):
        lesser_height = heights.pop(id(current.lesser), -1)
        greater_height = heights.pop(id(current.greater), -1)
        if abs(lesser_height - greater_height) > 1:
            return False
        heights[id(current)] = max(lesser_height, greater_height) + 1
    return True


def _iter_level_order(node: Optional[Node]) -> Iterator[Node]:
    if node is None:
        return
    queue: Deque[Node] = deque([node])
    while queue:
        current = queue.popleft()
        yield current
        if current.lesser is not None:
            queue.append(current.lesser)
        if current.greater is not None:
            queue.append(current.greater)


def _iter_inorder(node: Optional[Node]) -> Iterator[Node]:
    stack: List[Node] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.lesser
        current = stack.pop()
        yield current
        current = current.greater


def _iter_preorder(node: Optional[Node]) -> Iterator[Node]:
    stack: List[Node] = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        if current.greater is not None:
            stack.append(current.greater)
        if current.lesser is not None:
            stack.append(current.lesser)


class Tree:
    """Binary search tree built balanced and rebalanced on request."""

    __slots__ = ("root",)

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self.root: Optional[Node] = build_tree(values) if values is not None else None

    # ------------------------------------------------------------------
    # Lookup and mutation
    # ------------------------------------------------------------------
    def find(self, value: Any) -> Optional[Node]:
        """Return the node holding *value* or ``None`` when it is absent."""

        _validate_value(value)
        return find_node(self.root, value)

    def insert(self, value: Any) -> None:
        """Attach *value* as a new leaf unless it is already present.

        The tree is not rebalanced afterwards.
        """

        _validate_value(value)
        if self.root is None:
            self.root = Node(value)
            return

        current = self.root
        while True:
            order = _compare(value, current.value)
            if order == 0:
                logger.debug("Ignoring duplicate insert of %r", value)
                return
            if order > 0:
                if current.greater is None:
                    current.greater = Node(value)
                    return
                current = current.greater
            else:
                if current.lesser is None:
                    current.lesser = Node(value)
                    return
                current = current.lesser

    def delete(self, value: Any) -> None:
        """Detach the child subtree whose root holds *value*.

        This keeps the historical contract: the matching child is dropped
        together with all of its descendants, and when the root has no
        children the whole tree is cleared no matter which value was given.
        Values that are never met as a child on the comparison path leave the
        tree untouched.  Use :meth:`remove` to delete a single node.
        """

        _validate_value(value)
        if self.root is None or self.root.is_leaf:
            self.root = None
            return

        current: Optional[Node] = self.root
        while current is not None:
            if current.lesser is not None and _compare(value, current.lesser.value) == 0:
                logger.debug("Detaching lesser subtree rooted at %r", value)
                current.lesser = None
                return
            if current.greater is not None and _compare(value, current.greater.value) == 0:
                logger.debug("Detaching greater subtree rooted at %r", value)
                current.greater = None
                return
            order = _compare(value, current.value)
            if order == 0:
                return
            current = current.greater if order > 0 else current.lesser

    def remove(self, value: Any) -> bool:
        """Delete only the node holding *value*, relinking its descendants.

        Returns ``True`` when a node was removed and ``False`` when *value* was
        not present.  A node with two children takes the value of its in-order
        successor, which is then unlinked from the greater subtree.
        """

        _validate_value(value)
        parent: Optional[Node] = None
        current = self.root
        while current is not None:
            order = _compare(value, current.value)
            if order == 0:
                break
            parent = current
            current = current.greater if order > 0 else current.lesser
        if current is None:
            return False

        if current.lesser is not None and current.greater is not None:
            successor_parent = current
            successor = current.greater
            while successor.lesser is not None:
                successor_parent = successor
                successor = successor.lesser
            current.value = successor.value
            # The successor has no lesser child, so splice in its greater one.
            if successor_parent is current:
                successor_parent.greater = successor.greater
            else:
                successor_parent.lesser = successor.greater
            return True

        replacement = current.lesser if current.lesser is not None else current.greater
        if parent is None:
            self.root = replacement
        elif parent.lesser is current:
            parent.lesser = replacement
        else:
            parent.greater = replacement
        return True

    def rebalance(self) -> None:
        """Rebuild the tree from its in-order values into a balanced shape."""

        values = self.inorder()
        self.root = _build_range(values, 0, len(values) - 1)
        logger.debug("Rebalanced %d values to height %d", len(values), height(self.root))

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------
    def level_order(self) -> List[Any]:
        """Return values breadth-first, left before right on each level."""

        return [node.value for node in _iter_level_order(self.root)]

    def inorder(self) -> List[Any]:
        """Return values in ascending order."""

        return [node.value for node in _iter_inorder(self.root)]

    def preorder(self) -> List[Any]:
        return [node.value for node in _iter_preorder(self.root)]

    def postorder(self) -> List[Any]:
        return [node.value for node in _postorder_nodes(self.root)]

    def walk_level_order(self, visitor: Visitor) -> None:
        """Call *visitor* with each node in level-order."""

        for node in _iter_level_order(self.root):
            visitor(node)

    def walk_inorder(self, visitor: Visitor) -> None:
        for node in _iter_inorder(self.root):
            visitor(node)

    def walk_preorder(self, visitor: Visitor) -> None:
        for node in _iter_preorder(self.root):
            visitor(node)

    def walk_postorder(self, visitor: Visitor) -> None:
        for node in _postorder_nodes(self.root):
            visitor(node)

    # ------------------------------------------------------------------
    # Shape queries
    # ------------------------------------------------------------------
    def height(self, node: Optional[Node]) -> int:
        return height(node)

    def depth(self, node: Node) -> int:
        """Return the number of edges from the root down to *node*."""

        return depth(node, self.root)

    def is_balanced(self) -> bool:
        """Return ``True`` when the whole tree is height-balanced."""

        return is_balanced(self.root)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Any]:
        for node in _iter_inorder(self.root):
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in _iter_preorder(self.root))

    def __bool__(self) -> bool:
        return self.root is not None

    def __contains__(self, value: object) -> bool:
        try:
            return self.find(value) is not None
        except TreeValueError:
            return False

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Tree({self.inorder()!r})"
