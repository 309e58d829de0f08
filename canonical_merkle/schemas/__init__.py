"""
Schemas
File: __init__.py

Purpose: Export the error taxonomy and the proof document model.
"""

# Error models and exceptions
from .errors import (
    EmptyTreeException,
    ErrorCodes,
    HashAlgorithmException,
    InvalidHexException,
    MerkleError,
    MerkleException,
    MerkleVerificationException,
)

# Proof documents
from .proof import (
    HEX_DIGEST_PATTERN,
    InclusionProof,
    ProofStatus,
)

__all__ = [
    "EmptyTreeException",
    "ErrorCodes",
    "HashAlgorithmException",
    "InvalidHexException",
    "MerkleError",
    "MerkleException",
    "MerkleVerificationException",
    "HEX_DIGEST_PATTERN",
    "InclusionProof",
    "ProofStatus",
]
