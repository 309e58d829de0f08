"""
CLI Verify Command

Verify an inclusion proof offline, either from a proof document or from
raw components.

Usage:
    merkle verify --proof proof.json [--json]
    merkle verify --leaf HEX --root HEX --sibling HEX [--sibling HEX ...] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from pydantic import ValidationError

from canonical_merkle.merkle import MerkleVerifier
from canonical_merkle.schemas import ErrorCodes, InclusionProof, MerkleException
from merkle_cli.commands.common import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
)


logger = logging.getLogger(__name__)


def load_proof(args: Namespace) -> InclusionProof:
    """
    Read the proof from --proof, or assemble it from --leaf/--root/--sibling.

    Raises:
        MerkleException: SCHEMA_VALIDATION_ERROR if the document or the
            components do not form a valid InclusionProof
    """
    try:
        return _load_proof(args)
    except ValidationError as e:
        raise MerkleException(
            f"Invalid proof: {e.error_count()} validation error(s)",
            code=ErrorCodes.SCHEMA_VALIDATION_ERROR,
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e


def _load_proof(args: Namespace) -> InclusionProof:
    if args.proof:
        path = Path(args.proof)
        if not path.exists():
            raise FileNotFoundError(f"Proof file not found: {path}")
        logger.info(f"Loading proof from {path}")
        return InclusionProof.from_json(path.read_text())

    return InclusionProof(
        algorithm=args.algorithm_name,
        leaf=args.leaf,
        root=args.root,
        siblings=args.sibling or [],
    )


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Returns:
        0 if the proof is valid, 2 if it is not, 1 on bad input
    """
    if not args.proof and not (args.leaf and args.root):
        print("Error: provide --proof FILE or both --leaf and --root", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    proof = load_proof(args)
    error = MerkleVerifier.explain(proof)
    ok = error is None

    if args.json:
        print(json.dumps({
            "valid": ok,
            "algorithm": proof.algorithm,
            "leaf": proof.leaf,
            "root": proof.root,
            "siblings": len(proof.siblings),
            "error": error.model_dump() if error else None,
        }, indent=2))
    else:
        print(f"valid: {str(ok).lower()}")

    return EXIT_SUCCESS if ok else EXIT_VERIFICATION_FAILED
