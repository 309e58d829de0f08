"""
CLI Prove Command

Build a tree and print the inclusion proof document for one leaf.

Usage:
    merkle prove --leaf c a b c d e [--hex-leaves] [--out proof.json]
"""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from pathlib import Path

from canonical_merkle.merkle import MerkleProver
from canonical_merkle.schemas import ProofStatus
from merkle_cli.commands.common import (
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    build_tree_from_args,
    to_leaf,
)


logger = logging.getLogger(__name__)


def prove_cmd(args: Namespace) -> int:
    """
    Execute the prove command.

    The document is always written; the exit code is 2 when the leaf is
    not part of the tree.
    """
    tree = build_tree_from_args(args, args.hash_fn)
    leaf = to_leaf(args.leaf, args.hash_fn, args.hex_leaves)

    proof = MerkleProver.prove(tree, leaf)
    document = proof.to_json()

    if args.out:
        Path(args.out).write_text(document + "\n")
        logger.info(f"Proof written to {args.out}")
    else:
        print(document)

    if proof.status is ProofStatus.NOT_FOUND:
        print(f"Leaf not found: {proof.leaf}", file=sys.stderr)
        return EXIT_VERIFICATION_FAILED
    return EXIT_SUCCESS
