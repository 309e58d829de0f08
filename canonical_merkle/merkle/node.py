"""
Merkle Nodes
Tree vertices and the node collection used while building and walking trees.

This module provides:
- Node: a hash value, its two owned children and a parent back-reference
- Nodes: a sortable list of nodes with pairing iterators

Structural Rules:
1. A node is a leaf iff it has no children; inner nodes always have two
2. Inner node value = Hash(left.value ++ right.value) with left.value <= right.value
3. left.parent is right.parent is the inner node
4. parent is only used to walk upwards, children are what hold the tree
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional


@dataclass(eq=False)
class Node:
    """
    A single Merkle tree vertex.

    Equality is identity: two nodes carrying the same digest at different
    positions are different vertices.

    Attributes:
        value: The node digest
        left: Left child, None for leaves
        right: Right child, None for leaves
        parent: Parent node, None for the root
    """
    value: bytes
    left: Optional[Node] = field(default=None, repr=False)
    right: Optional[Node] = field(default=None, repr=False)
    parent: Optional[Node] = field(default=None, repr=False)

    def __bytes__(self) -> bytes:
        return self.value

    def hex(self) -> str:
        """Return the digest as a lowercase hex string."""
        return self.value.hex()

    def __str__(self) -> str:
        return self.value.hex()

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def is_left(self) -> bool:
        """Tell whether this node is its parent's left child."""
        return self.parent is not None and self.parent.left is self

    def is_right(self) -> bool:
        """Tell whether this node is its parent's right child."""
        return self.parent is not None and self.parent.right is self

    def sibling(self) -> Optional[Node]:
        """
        Return the parent's other child.

        Given siblings i, j: returns j for i and i for j.
        Returns None for the root.
        """
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def walk_pre_order(self, fn: Callable[[Node, int], None]) -> None:
        """
        Visit this node and every descendant in pre-order.

        fn is called with (node, depth), depth 0 being this node. The left
        subtree is fully visited before the right one.
        """
        stack: list[tuple[Node, int]] = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            fn(node, depth)
            # right pushed first so left is popped first
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))


def new_parent_node(value: bytes, left: Node, right: Node) -> Node:
    """
    Make an inner node over left and right and attach their back-references.
    """
    parent = Node(value=value, left=left, right=right)
    left.parent = parent
    right.parent = parent
    return parent


class Nodes(list):
    """
    Ordered collection of Node.

    Used for the sorted leaf index, for each level while building a tree,
    and as the sibling sequence of a proof.
    """

    @classmethod
    def from_byte_arrays(cls, values: Iterable[bytes]) -> Nodes:
        """Wrap each digest as a leaf Node."""
        return cls(Node(value=bytes(v)) for v in values)

    def sort_lexicographic(self) -> Nodes:
        """Sort in place by value, byte-wise ascending. Returns self."""
        self.sort(key=lambda n: n.value)
        return self

    def iterate_pair(self, fn: Callable[[Node, Node], None]) -> Optional[Node]:
        """
        Call fn(i, j) on consecutive pairs in current order.

        If there is an odd number of nodes, the last one is not paired and
        is returned so the caller can carry it over. Otherwise returns None.
        """
        odd = self[-1] if len(self) % 2 != 0 else None
        for k in range(0, len(self) - 1, 2):
            fn(self[k], self[k + 1])
        return odd

    def iterate_sorted_pair(self, fn: Callable[[Node, Node], None]) -> Optional[Node]:
        """
        Same as iterate_pair, but each pair is passed as (smaller, greater).
        """
        def _ordered(i: Node, j: Node) -> None:
            if i.value > j.value:
                fn(j, i)
            else:
                fn(i, j)

        return self.iterate_pair(_ordered)

    def to_hex_strings(self) -> list[str]:
        return [n.hex() for n in self]

    def to_byte_arrays(self) -> list[bytes]:
        return [n.value for n in self]


__all__ = [
    "Node",
    "Nodes",
    "new_parent_node",
]
