"""
Common test fixtures shared by all modules.

Known SHA-256 vectors for the trees over "a".."e" (odd) and "a".."d" (even).

Odd tree, left child listed first:

    └─ 3a64c13f...   root
       ├─ a26df13b...
       │  ├─ 28b5a66c...
       │  │  ├─ 3e23e816...   sha256("b")
       │  │  └─ 3f79bb7b...   sha256("e")
       │  └─ 800e03dd...
       │     ├─ 18ac3e73...   sha256("d")
       │     └─ 2e7d2c03...   sha256("c")
       └─ ca978112...         sha256("a"), carried up unpaired

Even tree:

    └─ 4c6aae04...   root
       ├─ 18d79cb7...
       │  ├─ 3e23e816...   sha256("b")
       │  └─ ca978112...   sha256("a")
       └─ 800e03dd...
          ├─ 18ac3e73...   sha256("d")
          └─ 2e7d2c03...   sha256("c")
"""

import hashlib

from canonical_merkle.merkle import MerkleTree, Node


HEX_A = "ca978112ca1bbdcafac231b39a23dc4da786eff8147c4e72b9807785afee48bb"
HEX_B = "3e23e8160039594a33894f6564e1b1348bbd7a0088d42c4acb73eeaed59c009d"
HEX_C = "2e7d2c03a9507ae265ecf5b5356885a53393a2029d241394997265a1a25aefc6"
HEX_D = "18ac3e7343f016890c510e93f935261169d9e3f565436429830faf0934f4f8e4"
HEX_E = "3f79bb7b435b05321651daefd374cdc681dc06faa65e374e38337b88ca046dea"

HEX_800E = "800e03ddb2432933692401d1631850c0af91953fd9c8f3874488c0541dfcf413"
HEX_28B5 = "28b5a66c8c61ee13ad5f708a561d758b24d10abe5a0e72133c85d59821539e05"
HEX_A26D = "a26df13b366b0fc0e7a96ec9a1658d691d7640668de633333098d7952ce0c50b"
HEX_18D7 = "18d79cb747ea174c59f3a3b41768672526d56fecc58360a99d283d0f9b0a3cc0"


# =============================================================================
# Odd Tree ("a", "b", "c", "d", "e")
# =============================================================================

ODD_TREE_ROOT = "3a64c13ffc8d22739538f49d901d909754e4ca185cf128ce7e64c8482f0cd8c6"

ODD_TREE_PROOFS = {
    HEX_D: [HEX_C, HEX_28B5, HEX_A],
    HEX_C: [HEX_D, HEX_28B5, HEX_A],
    HEX_B: [HEX_E, HEX_800E, HEX_A],
    HEX_E: [HEX_B, HEX_800E, HEX_A],
    HEX_A: [HEX_A26D],
}


# =============================================================================
# Even Tree ("a", "b", "c", "d")
# =============================================================================

EVEN_TREE_ROOT = "4c6aae040ffada3d02598207b8485fcbe161c03f4cb3f660e4d341e7496ff3b2"

EVEN_TREE_PROOFS = {
    HEX_D: [HEX_C, HEX_18D7],
    HEX_C: [HEX_D, HEX_18D7],
    HEX_B: [HEX_A, HEX_800E],
    HEX_A: [HEX_B, HEX_800E],
}


# =============================================================================
# Factories
# =============================================================================

def hash_strings(*strings: str) -> list[bytes]:
    """SHA-256 each string, UTF-8 encoded."""
    return [hashlib.sha256(s.encode("utf-8")).digest() for s in strings]


def hex_to_bytes(*hex_strings: str) -> list[bytes]:
    return [bytes.fromhex(h) for h in hex_strings]


def make_odd_tree() -> MerkleTree:
    return MerkleTree("sha256", hash_strings("a", "b", "c", "d", "e"))


def make_even_tree() -> MerkleTree:
    return MerkleTree("sha256", hash_strings("a", "b", "c", "d"))


def make_family() -> tuple[Node, Node, Node]:
    """A root with two leaf children, links set by hand. Returns (root, left, right)."""
    left = Node(value=b"left")
    right = Node(value=b"right")
    root = Node(value=b"root", left=left, right=right)
    left.parent = root
    right.parent = root
    return root, left, right
