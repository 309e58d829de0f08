"""
Merkle Tree and Inclusion Proofs
Sorted, canonically ordered Merkle tree construction + proof generation/verification.

This module provides:
- Node / Nodes: tree vertices and the node collection
- MerkleTree: build from pre-hashed leaves, look up proofs
- verify: check a proof against a claimed root
- MerkleProver / MerkleVerifier: portable InclusionProof documents
- render_tree / graphify: text rendering

Canonical Commitment Rules:
1. Leaves: caller-supplied digests, sorted ascending before building
2. Parent hashing: Hash(smaller ++ greater)
3. Odd node: carried up to the next level unchanged
4. Empty tree: EmptyTreeException
5. Single leaf: root = leaf

Usage:
    from canonical_merkle.crypto import sha256
    from canonical_merkle.merkle import MerkleTree, verify

    leaves = [sha256(x) for x in (b"a", b"b", b"c", b"d", b"e")]
    tree = MerkleTree("sha256", leaves)

    proof = tree.proof(sha256(b"c"))
    assert verify("sha256", sha256(b"c"), tree.root_bytes(), proof)
"""
from .node import (
    Node,
    Nodes,
    new_parent_node,
)

from .merkle_tree import (
    MerkleTree,
    ProofResult,
    build_tree,
)

from .merkle_proofs import (
    MerkleProver,
    MerkleVerifier,
    verify,
)

from .graph import (
    graphify,
    render_tree,
)


__all__ = [
    # Core types
    "Node",
    "Nodes",
    "MerkleTree",
    "ProofResult",
    # Core functions
    "new_parent_node",
    "build_tree",
    "verify",
    # Convenience classes
    "MerkleProver",
    "MerkleVerifier",
    # Rendering
    "render_tree",
    "graphify",
]
