"""
Helpers shared by the CLI commands: leaf collection and exit codes.
"""

from __future__ import annotations

import logging
from argparse import Namespace
from pathlib import Path

from canonical_merkle.crypto.hashing import HashFunction, from_hex, hash_leaves
from canonical_merkle.merkle import MerkleTree


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def read_items(args: Namespace) -> list[str]:
    """Positional items followed by the non-empty lines of --file, if given."""
    items = list(getattr(args, "items", None) or [])
    leaves_file = getattr(args, "file", None)
    if leaves_file:
        path = Path(leaves_file)
        if not path.exists():
            raise FileNotFoundError(f"Leaves file not found: {path}")
        items.extend(line.strip() for line in path.read_text().splitlines() if line.strip())
    return items


def to_leaf(item: str, hash_fn: HashFunction, hex_leaves: bool) -> bytes:
    """Turn a single command-line item into a leaf digest."""
    if hex_leaves:
        return from_hex(item)
    return hash_fn(item.encode("utf-8"))


def build_tree_from_args(args: Namespace, hash_fn: HashFunction) -> MerkleTree:
    """
    Build a tree from the command's items.

    Raw items are hashed with hash_fn first; with --hex-leaves they are
    decoded as digests instead.
    """
    items = read_items(args)
    if args.hex_leaves:
        leaves = [from_hex(item) for item in items]
    else:
        leaves = hash_leaves(hash_fn, items)
    logger.info(f"Building tree over {len(leaves)} leaves")
    return MerkleTree(hash_fn, leaves)
