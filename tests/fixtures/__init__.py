"""
Test fixtures package for canonical_merkle tests.

Provides known SHA-256 vectors and factory functions for trees and nodes.

Usage:
    from fixtures import make_odd_tree, ODD_TREE_PROOFS

    def test_something():
        tree = make_odd_tree()
        assert tree.root_hex() == ODD_TREE_ROOT
"""

from .common import (
    HEX_A,
    HEX_B,
    HEX_C,
    HEX_D,
    HEX_E,
    ODD_TREE_ROOT,
    ODD_TREE_PROOFS,
    EVEN_TREE_ROOT,
    EVEN_TREE_PROOFS,
    hash_strings,
    hex_to_bytes,
    make_odd_tree,
    make_even_tree,
    make_family,
)

__all__ = [
    "HEX_A",
    "HEX_B",
    "HEX_C",
    "HEX_D",
    "HEX_E",
    "ODD_TREE_ROOT",
    "ODD_TREE_PROOFS",
    "EVEN_TREE_ROOT",
    "EVEN_TREE_PROOFS",
    "hash_strings",
    "hex_to_bytes",
    "make_odd_tree",
    "make_even_tree",
    "make_family",
]
