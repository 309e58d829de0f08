"""
CLI command modules.
"""

from merkle_cli.commands import graph, prove, root, verify

__all__ = ["graph", "prove", "root", "verify"]
