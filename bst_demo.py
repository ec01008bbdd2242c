"""Command line demonstration for ``bstree``.

The script builds a tree from a random sample, reports its balance and the
four traversals, inserts a second sample of larger values one at a time (which
skews the tree), then rebalances and reports again before printing the final
shape, sideways by default or level by level with ``--layout levels``.

Sampling parameters come from :class:`bstree.DemoConfig`; ``--config`` points
at a YAML or JSON file overriding them and ``--seed`` makes runs reproducible.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Callable, Dict, List, Optional, Sequence

from bstree import DemoConfig, Node, Tree, load_demo_config, pretty_print, render_levels

logger = logging.getLogger(__name__)

LAYOUTS: Dict[str, Callable[[Optional[Node]], str]] = {
    "sideways": pretty_print,
    "levels": render_levels,
}


def random_values(
    minimum: int,
    maximum: int,
    count: int,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """Return *count* integers drawn uniformly from ``[minimum, maximum)``."""

    if count < 0:
        raise ValueError("count must be non-negative")
    if maximum <= minimum:
        raise ValueError("maximum must be greater than minimum")
    generator = rng if rng is not None else random.Random()
    return [generator.randrange(minimum, maximum) for _ in range(count)]


def _format_report(label: str, tree: Tree) -> List[str]:
    lines = [f"{label} balanced? {'Yes' if tree.is_balanced() else 'No'}"]
    lines.append(f"  level-order: {tree.level_order()}")
    lines.append(f"  preorder:    {tree.preorder()}")
    lines.append(f"  postorder:   {tree.postorder()}")
    lines.append(f"  inorder:     {tree.inorder()}")
    return lines


def run_demo(config: DemoConfig, layout: str = "sideways") -> List[str]:
    """Execute the demonstration flow and return the report lines.

    *layout* names the renderer in :data:`LAYOUTS` used for the final tree.
    """

    if layout not in LAYOUTS:
        raise ValueError(f"Unknown layout {layout!r}; choose from {sorted(LAYOUTS)}")
    rng = random.Random(config.seed)
    initial = random_values(
        config.initial_min, config.initial_max, config.initial_count, rng
    )
    tree = Tree(initial)
    logger.info("Built tree with %d distinct values from %d samples", len(tree), len(initial))

    lines = _format_report("Initial tree", tree)

    for value in random_values(
        config.insert_min, config.insert_max, config.insert_count, rng
    ):
        tree.insert(value)
    lines.append(
        f"After inserting {config.insert_count} values balanced? "
        f"{'Yes' if tree.is_balanced() else 'No'} (height {tree.height(tree.root)})"
    )

    tree.rebalance()
    lines.extend(_format_report("Rebalanced tree", tree))
    lines.append(LAYOUTS[layout](tree.root))
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for the demonstration."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--config",
        default=None,
        help="YAML or JSON file overriding the default sampling parameters.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random sample generator.",
    )
    parser.add_argument(
        "--layout",
        default="sideways",
        choices=sorted(LAYOUTS),
        help="Rendering used for the final tree.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        config = load_demo_config(args.config).with_seed(args.seed)
    except (OSError, ValueError) as exc:
        logger.error("Failed to load demo configuration: %s", exc)
        return 1

    for line in run_demo(config, layout=args.layout):
        print(line)
    return 0


__all__ = ["LAYOUTS", "main", "random_values", "run_demo"]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
