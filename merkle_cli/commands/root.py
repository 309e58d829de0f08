"""
CLI Root Command

Build a tree and print its root digest.

Usage:
    merkle root a b c d e [--hex-leaves] [--file PATH] [--json]
"""

from __future__ import annotations

import json
from argparse import Namespace
from dataclasses import asdict, dataclass, field

from merkle_cli.commands.common import EXIT_SUCCESS, build_tree_from_args


@dataclass
class RootSummary:
    """Summary of a built tree for CLI output."""
    algorithm: str = ""
    root: str = ""
    leaf_count: int = 0
    depth: int = 0
    leaves: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def root_cmd(args: Namespace) -> int:
    """
    Execute the root command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    tree = build_tree_from_args(args, args.hash_fn)

    if args.json:
        summary = RootSummary(
            algorithm=args.algorithm_name,
            root=tree.root_hex(),
            leaf_count=len(tree),
            depth=tree.depth(),
            leaves=tree.leaves.to_hex_strings(),
        )
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print(tree.root_hex())

    return EXIT_SUCCESS
