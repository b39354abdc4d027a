"""
Cryptographic primitives for the osch ledger.
"""

from .ed25519 import (
    DecoratedSignature,
    Ed25519Error,
    Ed25519KeyPair,
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

__all__ = [
    "DecoratedSignature",
    "Ed25519Error",
    "Ed25519KeyPair",
    "Ed25519PrivateKey",
    "Ed25519PublicKey",
]
