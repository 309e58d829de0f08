"""
Merkle Tree Implementation
Sorted, canonically ordered Merkle tree construction and proof generation.

This module provides:
- build_tree: fold a level of nodes up to a single root
- MerkleTree: owns the root and the sorted leaf index
- Proof lookup returning sibling nodes bottom-up

Canonical Commitment Rules (Hard Contracts):
1. Leaves are caller-supplied digests; they are never re-hashed
2. Leaves are sorted byte-wise ascending once, before building
3. Parent hashing: parent = Hash(min(a, b) ++ max(a, b))
4. Odd node at any level is carried up unchanged, never duplicated
5. Single leaf: root is the leaf node itself
6. Empty leaf set: construction fails with EmptyTreeException

Determinism Notes:
- Input order does not affect the root: the same multiset of leaves
  always gives the same root digest
- Proofs carry no left/right flags, orientation is recovered by comparing
  values
"""
from __future__ import annotations

import logging
from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from canonical_merkle.crypto.hashing import (
    HashFunction,
    algorithm_name,
    hash_concat,
    hash_leaves,
    resolve_hash_function,
)
from canonical_merkle.merkle.node import Node, Nodes, new_parent_node
from canonical_merkle.schemas.errors import EmptyTreeException
from canonical_merkle.schemas.proof import ProofStatus


logger = logging.getLogger(__name__)


def build_tree(hash_function: Any, nodes: Sequence[Node]) -> Node:
    """
    Fold a level of nodes into a single root.

    Algorithm:
    1. Pair the current level in order, smaller value first in each pair
    2. Each pair becomes a parent: Hash(i.value ++ j.value)
    3. An unpaired trailing node is appended to the next level as is
    4. Repeat until a single node remains

    Args:
        hash_function: Anything resolve_hash_function accepts; used for
            every pair
        nodes: The level to fold; for a tree these are the sorted leaves

    Returns:
        The root node. For a single input node, that node itself.

    Raises:
        EmptyTreeException: If nodes is empty
    """
    if len(nodes) == 0:
        raise EmptyTreeException()

    hash_fn = resolve_hash_function(hash_function)
    current_level = Nodes(nodes)
    level = 0

    while len(current_level) > 1:
        next_level = Nodes()

        def _make_parent(i: Node, j: Node) -> None:
            parent = new_parent_node(hash_concat(hash_fn, i.value, j.value), i, j)
            next_level.append(parent)

        odd = current_level.iterate_sorted_pair(_make_parent)

        # carried up for pairing at a higher level
        if odd is not None:
            next_level.append(odd)

        logger.debug(
            "Folded level %d: %d nodes -> %d nodes (odd carried: %s)",
            level, len(current_level), len(next_level), odd is not None,
        )
        current_level = next_level
        level += 1

    return current_level[0]


@dataclass
class ProofResult:
    """
    Outcome of a proof lookup that tells the three cases apart.

    Attributes:
        status: FOUND, IS_ROOT (single-leaf tree) or NOT_FOUND
        siblings: Sibling nodes bottom-up, empty unless FOUND
        root: Root digest of the tree the lookup ran on
    """
    status: ProofStatus
    root: bytes
    siblings: Nodes = field(default_factory=Nodes)

    @property
    def found(self) -> bool:
        """True when the leaf is part of the tree (including as its root)."""
        return self.status is not ProofStatus.NOT_FOUND


class MerkleTree:
    """
    A Merkle tree built once from a fixed set of leaf digests.

    The tree keeps the root, which holds every node, and the leaves sorted
    ascending, which serve as an index for binary-search proof lookup.

    Example:
        >>> tree = MerkleTree("sha256", [sha256(b"a"), sha256(b"b")])
        >>> proof = tree.proof(sha256(b"a"))
        >>> verify("sha256", sha256(b"a"), tree.root_bytes(), proof)
        True
    """

    def __init__(self, hash_function: Any, leaves: Iterable[bytes]) -> None:
        """
        Build a tree.

        Args:
            hash_function: Anything resolve_hash_function accepts, i.e. an
                algorithm name, a fresh hashlib object or a callable
            leaves: Leaf digests already hashed with the same function.
                Any order, duplicates allowed.

        Raises:
            EmptyTreeException: If leaves is empty
            TypeError: If a leaf is not bytes-like
        """
        self._hash_fn = resolve_hash_function(hash_function)
        self._algorithm = algorithm_name(self._hash_fn)

        values: list[bytes] = []
        for position, leaf in enumerate(leaves):
            if not isinstance(leaf, (bytes, bytearray, memoryview)):
                raise TypeError(
                    f"Leaf at position {position} must be bytes, got {type(leaf).__name__}"
                )
            values.append(bytes(leaf))

        if not values:
            raise EmptyTreeException(details={"leaf_count": 0})

        self._leaves = Nodes.from_byte_arrays(values).sort_lexicographic()
        self._leaf_values = self._leaves.to_byte_arrays()
        self._root = build_tree(self._hash_fn, self._leaves)

        logger.debug(
            "Built Merkle tree over %d leaves, root %s", len(self._leaves), self._root.hex()
        )

    @classmethod
    def from_data(cls, hash_function: Any, items: Iterable[str | bytes]) -> MerkleTree:
        """
        Hash raw items with hash_function and build a tree over the digests.
        """
        hash_fn = resolve_hash_function(hash_function)
        return cls(hash_fn, hash_leaves(hash_fn, items))

    @property
    def root(self) -> Node:
        """The root node a.k.a. Merkle root."""
        return self._root

    @property
    def leaves(self) -> Nodes:
        """Leaf nodes sorted ascending by value."""
        return self._leaves

    @property
    def hash_function(self) -> HashFunction:
        return self._hash_fn

    @property
    def algorithm(self) -> Optional[str]:
        """hashlib name of the tree's hash function, None if built from a plain callable."""
        return self._algorithm

    def root_bytes(self) -> bytes:
        return self._root.value

    def root_hex(self) -> str:
        return self._root.hex()

    def __len__(self) -> int:
        return len(self._leaves)

    def depth(self) -> int:
        """
        Number of levels from the deepest leaf to the root, both included.

        A single-leaf tree has depth 1.
        """
        deepest = 0

        def _track(_: Node, depth: int) -> None:
            nonlocal deepest
            deepest = max(deepest, depth)

        self._root.walk_pre_order(_track)
        return deepest + 1

    def _find_leaf(self, leaf: bytes) -> Node | None:
        # lower bound: first leaf whose value >= leaf
        index = bisect_left(self._leaf_values, leaf)
        if index >= len(self._leaf_values) or self._leaf_values[index] != leaf:
            return None
        return self._leaves[index]

    def contains(self, leaf: bytes) -> bool:
        """Tell whether leaf is one of the tree's leaf digests."""
        return self._find_leaf(bytes(leaf)) is not None

    def __contains__(self, leaf: object) -> bool:
        if not isinstance(leaf, (bytes, bytearray, memoryview)):
            return False
        return self.contains(leaf)

    def proof(self, leaf: bytes) -> Nodes:
        """
        Build the inclusion proof for a leaf digest.

        Returns the sibling nodes from the leaf's level up to the level just
        below the root. The result is empty both when the leaf is absent and
        when the leaf is the root of a single-leaf tree; use prove() to tell
        those apart.
        """
        node = self._find_leaf(bytes(leaf))
        if node is None:
            logger.debug("Leaf %s not found, returning empty proof", bytes(leaf).hex())
            return Nodes()

        proof = Nodes()
        while node is not self._root:
            proof.append(node.sibling())
            node = node.parent
        return proof

    def prove(self, leaf: bytes) -> ProofResult:
        """
        Same lookup as proof(), with the outcome spelled out.
        """
        leaf = bytes(leaf)
        node = self._find_leaf(leaf)
        if node is None:
            return ProofResult(status=ProofStatus.NOT_FOUND, root=self.root_bytes())
        if node is self._root:
            return ProofResult(status=ProofStatus.IS_ROOT, root=self.root_bytes())
        return ProofResult(
            status=ProofStatus.FOUND,
            root=self.root_bytes(),
            siblings=self.proof(leaf),
        )

    def __repr__(self) -> str:
        return f"MerkleTree(leaves={len(self._leaves)}, root={self._root.hex()!r})"


__all__ = [
    "build_tree",
    "ProofResult",
    "MerkleTree",
]
