"""
Schemas
File: proof.py

Purpose: Portable inclusion proof document.

An InclusionProof carries everything a remote party needs to check
membership of a leaf: the leaf digest, the claimed root, the bottom-up
sibling digests and the name of the hash algorithm. No left/right flags
are carried; orientation is recovered from value comparison.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


HEX_DIGEST_PATTERN = r"^(?:[0-9a-f]{2})*$"


class ProofStatus(str, Enum):
    """Outcome of a proof lookup."""

    FOUND = "found"
    IS_ROOT = "is_root"
    NOT_FOUND = "not_found"


class InclusionProof(BaseModel):
    """
    Inclusion proof for a single leaf.

    Attributes:
        algorithm: hashlib name of the hash function used to build the tree
        leaf: Leaf digest, lowercase hex
        root: Root digest the proof is against, lowercase hex
        siblings: Sibling digests from the leaf's level up to the level
            just below the root, lowercase hex
        status: How the lookup resolved
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    algorithm: str = Field(default="sha256", min_length=1)
    leaf: str = Field(..., pattern=HEX_DIGEST_PATTERN)
    root: str = Field(..., pattern=HEX_DIGEST_PATTERN)
    siblings: list[str] = Field(default_factory=list)
    status: ProofStatus = Field(default=ProofStatus.FOUND)

    @field_validator("leaf", "root", mode="before")
    @classmethod
    def _normalize_digest(cls, value: object) -> object:
        return _normalize_hex(value)

    @field_validator("siblings", mode="before")
    @classmethod
    def _normalize_siblings(cls, value: object) -> object:
        if not isinstance(value, (list, tuple)):
            return value
        normalized = []
        for item in value:
            item = _normalize_hex(item)
            if isinstance(item, str) and not re.fullmatch(HEX_DIGEST_PATTERN, item):
                raise ValueError(f"sibling is not a hex digest: {item!r}")
            normalized.append(item)
        return normalized

    @property
    def leaf_bytes(self) -> bytes:
        return bytes.fromhex(self.leaf)

    @property
    def root_bytes(self) -> bytes:
        return bytes.fromhex(self.root)

    @property
    def sibling_bytes(self) -> list[bytes]:
        return [bytes.fromhex(s) for s in self.siblings]

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON."""
        return self.model_dump_json(indent=indent)

    @classmethod
    def from_json(cls, data: str | bytes) -> InclusionProof:
        """Parse and validate a JSON proof document."""
        return cls.model_validate_json(data)


def _normalize_hex(value: object) -> object:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    if isinstance(value, str):
        value = value.strip().lower()
        return value[2:] if value.startswith("0x") else value
    return value


__all__ = [
    "HEX_DIGEST_PATTERN",
    "ProofStatus",
    "InclusionProof",
]
