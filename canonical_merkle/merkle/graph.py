"""
Tree rendering for terminals and logs.

Produces one line per node, labelled with its hex digest:

    └─ 3a64c13f...
       ├─ a26df13b...
       │  ├─ 28b5a66c...
       │  └─ 800e03dd...
       └─ ca978112...

The left child is always listed before the right one. Layout is derived
from the node links, so repeated digests render correctly.
"""
from __future__ import annotations

from typing import TextIO

from canonical_merkle.merkle.node import Node


BRANCH = "├─ "
LAST_BRANCH = "└─ "
PIPE = "│  "
SPACE = "   "


def _prefix(node: Node, depth: int) -> str:
    if depth == 0:
        return LAST_BRANCH

    # one column per ancestor strictly between the rendered root and node
    columns: list[str] = []
    ancestor = node.parent
    for _ in range(depth - 1):
        columns.append(SPACE if ancestor.is_right() else PIPE)
        ancestor = ancestor.parent
    columns.reverse()

    connector = LAST_BRANCH if node.is_right() else BRANCH
    return SPACE + "".join(columns) + connector


def render_tree(root: Node) -> str:
    """Render root and everything beneath it as text."""
    lines: list[str] = []
    root.walk_pre_order(lambda node, depth: lines.append(_prefix(node, depth) + node.hex()))
    return "\n".join(lines) + "\n"


def graphify(root: Node, sink: TextIO) -> None:
    """
    Write the rendering of root to sink.

    For example, to print in your terminal:

        graphify(tree.root, sys.stdout)
    """
    sink.write(render_tree(root))


__all__ = [
    "render_tree",
    "graphify",
]
