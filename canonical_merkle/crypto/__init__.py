"""
Core cryptographic utilities.

Hash function capability and digest encoding helpers.
"""
from .hashing import (
    DEFAULT_ALGORITHM,
    HashFunction,
    sha256,
    named_hash,
    algorithm_name,
    resolve_hash_function,
    hash_concat,
    hash_leaves,
    to_hex,
    from_hex,
)

__all__ = [
    "DEFAULT_ALGORITHM",
    "HashFunction",
    "sha256",
    "named_hash",
    "algorithm_name",
    "resolve_hash_function",
    "hash_concat",
    "hash_leaves",
    "to_hex",
    "from_hex",
]
