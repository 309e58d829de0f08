"""
Merkle Proof Verification
Stateless verification of inclusion proofs, plus class-based wrappers.

This module provides:
- verify: recompute a root from a leaf and its sibling digests
- MerkleProver: produce portable InclusionProof documents from a tree
- MerkleVerifier: check InclusionProof documents or raw components

Verification Rule:
At each step the running digest and the sibling are hashed smaller-first,
mirroring how the tree paired them. A mismatch is a normal outcome and is
reported as False, never raised (verify_or_raise is the opt-in exception).
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from canonical_merkle.crypto.hashing import (
    hash_concat,
    resolve_hash_function,
    to_hex,
)
from canonical_merkle.merkle.merkle_tree import MerkleTree
from canonical_merkle.merkle.node import Node
from canonical_merkle.schemas.errors import (
    ErrorCodes,
    HashAlgorithmException,
    MerkleError,
    MerkleVerificationException,
)
from canonical_merkle.schemas.proof import InclusionProof, ProofStatus


logger = logging.getLogger(__name__)


def verify(
    hash_function: Any,
    leaf: bytes,
    root: bytes,
    proof: Iterable[bytes | Node],
) -> bool:
    """
    Verify that leaf is included under root.

    Algorithm:
    1. current = leaf
    2. For each sibling, bottom-up:
       current = Hash(min(current, sibling) ++ max(current, sibling))
    3. Valid iff current == root

    Args:
        hash_function: Anything resolve_hash_function accepts; must be the
            function the tree was built with
        leaf: The leaf digest being proven
        root: The claimed root digest
        proof: Sibling digests (or Nodes) as returned by MerkleTree.proof

    Returns:
        True if the recomputed root equals root, False otherwise
    """
    hash_fn = resolve_hash_function(hash_function)

    current = bytes(leaf)
    for sibling in proof:
        sibling_value = bytes(sibling)
        if current <= sibling_value:
            current = hash_concat(hash_fn, current, sibling_value)
        else:
            current = hash_concat(hash_fn, sibling_value, current)

    ok = current == bytes(root)
    if not ok:
        logger.debug(
            "Proof for leaf %s does not reach root %s (got %s)",
            to_hex(bytes(leaf)), to_hex(bytes(root)), to_hex(current),
        )
    return ok


class MerkleProver:
    """
    Convenience class for producing portable proof documents.

    Example:
        >>> tree = MerkleTree.from_data("sha256", ["a", "b", "c"])
        >>> doc = MerkleProver.prove(tree, sha256(b"a"))
        >>> MerkleVerifier.verify(doc)
        True
    """

    @staticmethod
    def prove(
        tree: MerkleTree,
        leaf: bytes,
        algorithm: Optional[str] = None,
    ) -> InclusionProof:
        """
        Build an InclusionProof document for leaf.

        Args:
            tree: The tree to prove against
            leaf: Leaf digest
            algorithm: hashlib name recorded in the document. Defaults to
                the name the tree was built with; required for trees built
                from a plain callable

        Returns:
            InclusionProof whose status tells FOUND, IS_ROOT and NOT_FOUND apart

        Raises:
            HashAlgorithmException: If no algorithm name is known
        """
        name = algorithm or tree.algorithm
        if name is None:
            raise HashAlgorithmException(
                "Tree was built from an unnamed hash function; pass algorithm=",
                details={"leaf": to_hex(bytes(leaf))},
            )

        result = tree.prove(leaf)
        return InclusionProof(
            algorithm=name,
            leaf=to_hex(bytes(leaf)),
            root=to_hex(result.root),
            siblings=result.siblings.to_hex_strings(),
            status=result.status,
        )

    @staticmethod
    def compute_root(hash_function: Any, leaves: Iterable[bytes]) -> bytes:
        """
        Compute the root digest for a set of leaf digests.

        Raises:
            EmptyTreeException: If leaves is empty
        """
        return MerkleTree(hash_function, leaves).root_bytes()


class MerkleVerifier:
    """
    Convenience class for verifying proofs.
    """

    @staticmethod
    def verify(proof: InclusionProof) -> bool:
        """
        Verify an InclusionProof document with the algorithm it names.

        Documents for leaves that were not found never verify.
        """
        if proof.status is ProofStatus.NOT_FOUND:
            return False
        return verify(proof.algorithm, proof.leaf_bytes, proof.root_bytes, proof.sibling_bytes)

    @staticmethod
    def verify_leaf_in_root(
        hash_function: Any,
        leaf: bytes,
        siblings: list[bytes],
        root: bytes,
    ) -> bool:
        """
        Verify a leaf is included in a Merkle root using raw components.
        """
        return verify(hash_function, leaf, root, siblings)

    @staticmethod
    def explain(proof: InclusionProof) -> Optional[MerkleError]:
        """
        Describe why a document does not verify.

        Returns None for a valid document, otherwise a MerkleError with
        code LEAF_NOT_FOUND (the prover did not find the leaf) or
        ROOT_MISMATCH (the siblings do not lead to the claimed root).
        """
        if MerkleVerifier.verify(proof):
            return None

        details = {"leaf": proof.leaf, "root": proof.root, "status": proof.status.value}
        if proof.status is ProofStatus.NOT_FOUND:
            return MerkleError(
                code=ErrorCodes.LEAF_NOT_FOUND,
                message=f"Leaf {proof.leaf} is not part of the tree with root {proof.root}",
                details=details,
            )
        return MerkleError(
            code=ErrorCodes.ROOT_MISMATCH,
            message=f"Proof for leaf {proof.leaf} does not verify against root {proof.root}",
            details=details,
        )

    @staticmethod
    def verify_or_raise(proof: InclusionProof) -> None:
        """
        Verify an InclusionProof document, raising on failure.

        Raises:
            MerkleVerificationException: If the proof does not verify; its
                code is the one explain() reports
        """
        error = MerkleVerifier.explain(proof)
        if error is not None:
            raise MerkleVerificationException(
                error.message,
                leaf=proof.leaf,
                details={"root": proof.root, "status": proof.status.value},
                code=error.code,
            )


__all__ = [
    "verify",
    "MerkleProver",
    "MerkleVerifier",
]
