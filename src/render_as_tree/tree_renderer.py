"""Box-drawing tree renderer, output in the style of tree(1)."""

from __future__ import annotations

import logging
import re

from render_as_tree.models import Node

logger = logging.getLogger(__name__)

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class TreeDepthError(Exception):
    """Raised when a tree is deeper than the allowed ``max_depth``."""

    def __init__(self, max_depth: int) -> None:
        super().__init__(
            f"Tree exceeds max depth of {max_depth} (cyclic or unbounded tree?)"
        )
        self.max_depth = max_depth


def split_label(label: str) -> list[str]:
    """Split a label into its lines. An empty label is a single empty line."""
    return _LINE_BREAK.split(label)


def render(root: Node, *, max_depth: int | None = None) -> list[str]:
    """Render *root* and its descendants as a list of lines.

    Example output:
        Parent
        ├── Child 1
        ├── Child 2
        │   ├── Grandchild 1
        │   └── Grandchild 2
        └── Child 3

    Args:
        root: the node drawn first, without a connector.
        max_depth: if given, raise TreeDepthError when a node lies deeper
            than this (the root is depth 0). Unguarded by default.
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")

    lines: list[str] = []
    node_count = 0

    # (node, prefix for the first label line, prefix for the rest, depth)
    stack: list[tuple[Node, str, str, int]] = [(root, "", "", 0)]
    while stack:
        node, head, indent, depth = stack.pop()
        if max_depth is not None and depth > max_depth:
            logger.warning(
                "Aborting render: depth %d > max_depth %d", depth, max_depth
            )
            raise TreeDepthError(max_depth)
        node_count += 1

        first, *rest = split_label(node.label())
        lines.append(head + first)
        lines.extend(indent + line for line in rest)

        children = list(node.children())
        # Pushed in reverse so the first child is popped first
        for i in range(len(children) - 1, -1, -1):
            is_last = i == len(children) - 1
            connector = LAST_BRANCH if is_last else BRANCH
            extension = SPACE if is_last else PIPE
            stack.append(
                (children[i], indent + connector, indent + extension, depth + 1)
            )

    logger.debug("Rendered %d nodes into %d lines", node_count, len(lines))
    return lines


def render_text(root: Node, *, max_depth: int | None = None) -> str:
    """Render *root* as a single string joined by newlines (no trailing one)."""
    return "\n".join(render(root, max_depth=max_depth))
