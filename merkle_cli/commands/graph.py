"""
CLI Graph Command

Build a tree and print it as an indented hierarchy of hex digests.

Usage:
    merkle graph a b c d e [--hex-leaves]
"""

from __future__ import annotations

import sys
from argparse import Namespace

from canonical_merkle.merkle import graphify
from merkle_cli.commands.common import EXIT_SUCCESS, build_tree_from_args


def graph_cmd(args: Namespace) -> int:
    """Execute the graph command."""
    tree = build_tree_from_args(args, args.hash_fn)
    graphify(tree.root, sys.stdout)
    return EXIT_SUCCESS
