"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m merkle_cli root ITEMS... [--hex-leaves] [--file PATH] [--json]
    python -m merkle_cli prove --leaf ITEM ITEMS... [--hex-leaves] [--out PATH]
    python -m merkle_cli verify --proof PATH [--json]
    python -m merkle_cli verify --leaf HEX --root HEX --sibling HEX ... [--json]
    python -m merkle_cli graph ITEMS... [--hex-leaves]

Environment Variables:
    MERKLE_HASH_ALGORITHM       hashlib algorithm name (default: sha256)
    MERKLE_LOG_LEVEL            Log level (default: INFO)
    MERKLE_LOG_FILE             Optional log file
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from canonical_merkle.config import RuntimeConfig
from canonical_merkle.crypto.hashing import named_hash
from canonical_merkle.schemas import MerkleException
from merkle_cli import __version__
from merkle_cli.commands import graph, prove, root, verify
from merkle_cli.commands.common import EXIT_RUNTIME_ERROR


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def _add_leaf_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "items",
        nargs="*",
        help="Leaf values (hashed before building unless --hex-leaves)",
    )
    parser.add_argument(
        "--file", "-f",
        type=str,
        default=None,
        help="Read additional leaf values from a file, one per line",
    )
    parser.add_argument(
        "--hex-leaves",
        action="store_true",
        default=False,
        help="Treat values as pre-hashed hex digests",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="merkle",
        description="Build sorted Merkle trees, produce and verify inclusion proofs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--algorithm", "-a",
        type=str,
        default=None,
        help="hashlib algorithm name (overrides config, default: sha256)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on errors",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Print the Merkle root of a set of leaves",
        description="Build a tree over the leaves and print its root digest.",
    )
    _add_leaf_arguments(root_parser)
    root_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON summary",
    )
    root_parser.set_defaults(func=root.root_cmd)

    # --- prove command ---
    prove_parser = subparsers.add_parser(
        "prove",
        help="Produce an inclusion proof for one leaf",
        description="Build a tree over the leaves and print the proof document for --leaf.",
    )
    _add_leaf_arguments(prove_parser)
    prove_parser.add_argument(
        "--leaf", "-l",
        type=str,
        required=True,
        help="Leaf to prove (same encoding as the items)",
    )
    prove_parser.add_argument(
        "--out", "-o",
        type=str,
        default=None,
        help="Write the proof document to a file instead of stdout",
    )
    prove_parser.set_defaults(func=prove.prove_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify an inclusion proof",
        description="Verify a proof document, or a leaf/root/siblings triple given as hex.",
    )
    verify_parser.add_argument(
        "--proof", "-p",
        type=str,
        default=None,
        help="Path to a proof JSON document",
    )
    verify_parser.add_argument("--leaf", type=str, default=None, help="Leaf digest (hex)")
    verify_parser.add_argument("--root", type=str, default=None, help="Claimed root digest (hex)")
    verify_parser.add_argument(
        "--sibling", "-s",
        type=str,
        action="append",
        default=None,
        help="Sibling digest (hex), bottom-up; repeat for each level",
    )
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON report",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- graph command ---
    graph_parser = subparsers.add_parser(
        "graph",
        help="Print the tree as a hierarchy",
        description="Build a tree over the leaves and print every node's digest.",
    )
    _add_leaf_arguments(graph_parser)
    graph_parser.set_defaults(func=graph.graph_cmd)

    return parser


def load_runtime_config(path: Path | None) -> RuntimeConfig:
    """Config file (if any) overlaid with MERKLE_* environment variables."""
    if path is not None:
        return RuntimeConfig.from_yaml(path).with_env_overrides()
    return RuntimeConfig.from_env()


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed / leaf not found)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_runtime_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)

    # Attach config and hash function to args for commands to use
    args.runtime_config = config
    args.algorithm_name = args.algorithm or config.hash.algorithm

    try:
        args.hash_fn = named_hash(args.algorithm_name)
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except (MerkleException, FileNotFoundError, ValueError) as e:
        if args.debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
