"""
Merkle CLI

Command-line interface for building Merkle trees, producing and verifying
inclusion proofs.

Usage:
    python -m merkle_cli root a b c d e
    python -m merkle_cli prove --leaf c a b c d e > proof.json
    python -m merkle_cli verify --proof proof.json
    python -m merkle_cli graph a b c d e
"""

__version__ = "0.1.0"
