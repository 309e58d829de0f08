"""
Hashing Utilities
Hash function capability consumed by tree construction and verification.

This module provides:
- HashFunction: the pure `bytes -> digest` signature used by the tree
- resolve_hash_function: adapt algorithm names, hashlib prototypes and
  callables into a HashFunction
- Pair hashing and caller-side leaf pre-hashing
- Hex encoding/decoding of digests

Thread-safety Notes:
- A resolved HashFunction keeps no reset/absorb state between calls.
  Prototype objects are copied per call, so one resolved function may be
  shared across threads.
"""
from __future__ import annotations

import hashlib
from typing import Any, Callable, Iterable, Optional

from canonical_merkle.schemas.errors import HashAlgorithmException, InvalidHexException


HashFunction = Callable[[bytes], bytes]

DEFAULT_ALGORITHM = "sha256"

# "SHA-256" style spellings normalize to "sha_256"
_ALIASES = {
    "sha_1": "sha1",
    "sha_224": "sha224",
    "sha_256": "sha256",
    "sha_384": "sha384",
    "sha_512": "sha512",
}


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"a").hex()
        'ca978112ca1bbdcafac231b39a23dc4da786eff8147c4e72b9807785afee48bb'
    """
    return hashlib.sha256(data).digest()


def named_hash(algorithm: str) -> HashFunction:
    """
    Build a HashFunction for a hashlib algorithm name.

    Args:
        algorithm: Any name accepted by hashlib.new (case-insensitive)

    Returns:
        HashFunction producing the algorithm's digest

    Raises:
        HashAlgorithmException: If hashlib does not know the algorithm, or
            the algorithm needs an explicit digest length (shake_*)
    """
    name = algorithm.strip().lower().replace("-", "_")
    name = _ALIASES.get(name, name)
    try:
        prototype = hashlib.new(name)
        prototype.digest()
    except (ValueError, TypeError) as e:
        raise HashAlgorithmException(
            f"Unsupported hash algorithm: {algorithm}",
            algorithm=algorithm,
        ) from e

    def _digest(data: bytes) -> bytes:
        h = prototype.copy()
        h.update(data)
        return h.digest()

    _digest.__name__ = name
    _digest.algorithm = name
    return _digest


def _prototype_name(prototype: Any) -> Optional[str]:
    # blake2b(digest_size=16) still reports "blake2b"
    name = getattr(prototype, "name", None)
    if not isinstance(name, str):
        return None
    try:
        reference = hashlib.new(name)
    except (ValueError, TypeError):
        return None
    if reference.digest_size != getattr(prototype, "digest_size", None):
        return None
    return name


def algorithm_name(hash_fn: HashFunction) -> Optional[str]:
    """
    Return the hashlib name a resolved HashFunction can be rebuilt from.

    None for plain callables, which carry no name a verifier could use.
    """
    return getattr(hash_fn, "algorithm", None)


def resolve_hash_function(algo: Any) -> HashFunction:
    """
    Adapt a caller supplied hash capability into a HashFunction.

    Accepted forms:
    - str: hashlib algorithm name, e.g. "sha256"
    - hash object prototype (update/digest/copy), e.g. hashlib.sha256().
      It must not have absorbed any data yet; each call works on a copy.
    - callable returning bytes, or returning an object exposing digest()
      (so hashlib.sha256 itself works)

    Names and hashlib prototypes keep their algorithm name on the result
    (see algorithm_name); plain callables do not.

    Raises:
        HashAlgorithmException: If the argument matches none of the forms
    """
    if isinstance(algo, str):
        return named_hash(algo)

    # already resolved
    if callable(algo) and hasattr(algo, "algorithm"):
        return algo

    if all(hasattr(algo, attr) for attr in ("update", "digest", "copy")):
        prototype = algo

        def _from_prototype(data: bytes) -> bytes:
            h = prototype.copy()
            h.update(data)
            return h.digest()

        _from_prototype.algorithm = _prototype_name(prototype)
        return _from_prototype

    if callable(algo):
        fn = algo

        def _from_callable(data: bytes) -> bytes:
            out = fn(data)
            if hasattr(out, "digest"):
                return out.digest()
            return bytes(out)

        _from_callable.algorithm = None
        return _from_callable

    raise HashAlgorithmException(
        f"Cannot use {type(algo).__name__} as a hash function",
        details={"type": type(algo).__name__},
    )


def hash_concat(hash_fn: HashFunction, left: bytes, right: bytes) -> bytes:
    """
    Hash the concatenation of two digests: Hash(left ++ right).

    Callers are responsible for passing the pair in canonical order.
    """
    return hash_fn(left + right)


def hash_leaves(hash_fn: HashFunction, items: Iterable[str | bytes]) -> list[bytes]:
    """
    Pre-hash raw application values into leaf digests.

    Strings are UTF-8 encoded. The tree itself never hashes raw data;
    this is the caller-side step that feeds it.
    """
    leaves: list[bytes] = []
    for item in items:
        data = item.encode("utf-8") if isinstance(item, str) else bytes(item)
        leaves.append(hash_fn(data))
    return leaves


def to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hexadecimal string without prefix.

    Example:
        >>> to_hex(bytes.fromhex("DEADBEEF"))
        'deadbeef'
    """
    return data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert a hexadecimal string to bytes.

    An optional 0x prefix and surrounding whitespace are accepted.

    Raises:
        InvalidHexException: If the string has odd length or contains
            non-hex characters
    """
    hex_content = hex_string.strip()
    if hex_content[:2].lower() == "0x":
        hex_content = hex_content[2:]

    if len(hex_content) % 2 != 0:
        raise InvalidHexException(
            f"Hex string must have even length, got length {len(hex_content)}",
            value=hex_string,
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise InvalidHexException(
            f"Invalid hex characters in string: {e}",
            value=hex_string,
        ) from e


__all__ = [
    "HashFunction",
    "DEFAULT_ALGORITHM",
    "sha256",
    "named_hash",
    "algorithm_name",
    "resolve_hash_function",
    "hash_concat",
    "hash_leaves",
    "to_hex",
    "from_hex",
]
