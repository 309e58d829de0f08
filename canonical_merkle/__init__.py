"""
canonical_merkle

Sorted Merkle trees with canonically ordered pairs: build a tree over
pre-hashed leaves, read its root, and produce and verify compact
inclusion proofs that need no left/right flags.
"""

from canonical_merkle.merkle import (
    MerkleProver,
    MerkleTree,
    MerkleVerifier,
    Node,
    Nodes,
    ProofResult,
    graphify,
    render_tree,
    verify,
)
from canonical_merkle.schemas import (
    EmptyTreeException,
    InclusionProof,
    MerkleException,
    ProofStatus,
)

__version__ = "0.1.0"

__all__ = [
    "MerkleProver",
    "MerkleTree",
    "MerkleVerifier",
    "Node",
    "Nodes",
    "ProofResult",
    "graphify",
    "render_tree",
    "verify",
    "EmptyTreeException",
    "InclusionProof",
    "MerkleException",
    "ProofStatus",
]
