"""
Ed25519 cryptographic operations for the osch ledger.

Provides Ed25519 key generation, signing and verification on top of the
``cryptography`` package, plus the StrKey forms of keys (``G...`` account ids
and ``S...`` secrets) and the decorated signatures carried by envelopes.
"""

from __future__ import annotations
import hashlib
from dataclasses import dataclass
from typing import Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey as CryptoEd25519PrivateKey,
    Ed25519PublicKey as CryptoEd25519PublicKey,
)

from ..keys.strkey import (
    decode_ed25519_public_key,
    decode_ed25519_secret_seed,
    encode_ed25519_public_key,
    encode_ed25519_secret_seed,
)

SIGNATURE_HINT_LENGTH = 4


class Ed25519Error(Exception):
    """Base exception for Ed25519 operations."""
    pass


@dataclass(frozen=True)
class DecoratedSignature:
    """
    Signature plus a hint naming the signer.

    The hint is the last four bytes of the signer's public key.
    """

    hint: bytes
    signature: bytes

    def to_dict(self) -> dict:
        return {"hint": self.hint.hex(), "signature": self.signature.hex()}


class Ed25519PublicKey:
    """
    Ed25519 public key.

    Provides verification operations and serialization.
    """

    def __init__(self, public_key_bytes: bytes):
        """
        Initialize from 32-byte public key.

        Args:
            public_key_bytes: 32-byte Ed25519 public key

        Raises:
            Ed25519Error: If key is invalid
        """
        if len(public_key_bytes) != 32:
            raise Ed25519Error(f"Ed25519 public key must be 32 bytes, got {len(public_key_bytes)}")

        self._key_bytes = bytes(public_key_bytes)
        try:
            self._crypto_key = CryptoEd25519PublicKey.from_public_bytes(self._key_bytes)
        except ValueError as e:
            raise Ed25519Error(f"Invalid Ed25519 public key: {e}")

    @classmethod
    def from_account_id(cls, account_id: str) -> Ed25519PublicKey:
        """Create public key from a ``G...`` account id."""
        return cls(decode_ed25519_public_key(account_id))

    def to_bytes(self) -> bytes:
        """Get the 32-byte public key."""
        return self._key_bytes

    def account_id(self) -> str:
        """Get the ``G...`` account id for this key."""
        return encode_ed25519_public_key(self._key_bytes)

    def verify(self, signature: bytes, message: bytes) -> bool:
        """
        Verify a signature against a message.

        Args:
            signature: 64-byte Ed25519 signature
            message: Message that was signed

        Returns:
            True if signature is valid
        """
        if len(signature) != 64:
            return False
        try:
            self._crypto_key.verify(signature, message)
        except InvalidSignature:
            return False
        return True

    def __eq__(self, other) -> bool:
        """Check equality with another public key."""
        if not isinstance(other, Ed25519PublicKey):
            return False
        return self._key_bytes == other._key_bytes

    def __hash__(self) -> int:
        return hash(self._key_bytes)

    def __repr__(self) -> str:
        return f"Ed25519PublicKey.from_account_id('{self.account_id()}')"


class Ed25519PrivateKey:
    """
    Ed25519 private key.

    Provides signing operations and key derivation.
    """

    def __init__(self, private_key_bytes: bytes):
        """
        Initialize from 32-byte private key seed.

        Args:
            private_key_bytes: 32-byte Ed25519 private key seed

        Raises:
            Ed25519Error: If key is invalid
        """
        if len(private_key_bytes) != 32:
            raise Ed25519Error(f"Ed25519 private key must be 32 bytes, got {len(private_key_bytes)}")

        self._key_bytes = bytes(private_key_bytes)
        self._crypto_key = CryptoEd25519PrivateKey.from_private_bytes(self._key_bytes)
        self._public_key = Ed25519PublicKey(
            self._crypto_key.public_key().public_bytes(
                encoding=serialization.Encoding.Raw,
                format=serialization.PublicFormat.Raw
            )
        )

    @classmethod
    def generate(cls) -> Ed25519PrivateKey:
        """Generate a new random Ed25519 private key."""
        crypto_key = CryptoEd25519PrivateKey.generate()
        private_bytes = crypto_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption()
        )
        return cls(private_bytes)

    @classmethod
    def from_seed(cls, seed: Union[str, bytes]) -> Ed25519PrivateKey:
        """
        Derive private key from seed using SHA-256.

        For deterministic test keys.
        """
        if isinstance(seed, str):
            seed = seed.encode('utf-8')
        return cls(hashlib.sha256(seed).digest())

    def to_bytes(self) -> bytes:
        """Get the 32-byte private key seed."""
        return self._key_bytes

    def public_key(self) -> Ed25519PublicKey:
        """Get the corresponding public key."""
        return self._public_key

    def sign(self, message: bytes) -> bytes:
        """
        Sign a message.

        Args:
            message: Message to sign

        Returns:
            64-byte Ed25519 signature
        """
        return self._crypto_key.sign(message)

    def __repr__(self) -> str:
        return f"Ed25519PrivateKey(public='{self._public_key.account_id()}')"


class Ed25519KeyPair:
    """
    Ed25519 key pair. The private half is optional: a key pair built from an
    account id can verify but not sign.
    """

    def __init__(self, public_key: Ed25519PublicKey, private_key: Union[Ed25519PrivateKey, None] = None):
        self.public_key = public_key
        self.private_key = private_key

    @classmethod
    def random(cls) -> Ed25519KeyPair:
        """Generate a new random key pair."""
        private_key = Ed25519PrivateKey.generate()
        return cls(private_key.public_key(), private_key)

    @classmethod
    def from_raw_seed(cls, seed: bytes) -> Ed25519KeyPair:
        """
        Create key pair from a raw 32-byte seed.

        Raises:
            Ed25519Error: If seed is not exactly 32 bytes
        """
        private_key = Ed25519PrivateKey(seed)
        return cls(private_key.public_key(), private_key)

    @classmethod
    def from_secret(cls, secret: str) -> Ed25519KeyPair:
        """Create key pair from an ``S...`` secret."""
        return cls.from_raw_seed(decode_ed25519_secret_seed(secret))

    @classmethod
    def from_seed(cls, seed: Union[str, bytes]) -> Ed25519KeyPair:
        """Create deterministic key pair by hashing an arbitrary seed."""
        private_key = Ed25519PrivateKey.from_seed(seed)
        return cls(private_key.public_key(), private_key)

    @classmethod
    def from_public_key(cls, account_id: str) -> Ed25519KeyPair:
        """Create a verify-only key pair from a ``G...`` account id."""
        return cls(Ed25519PublicKey.from_account_id(account_id))

    def can_sign(self) -> bool:
        return self.private_key is not None

    def account_id(self) -> str:
        return self.public_key.account_id()

    def secret(self) -> str:
        """The ``S...`` secret for this key pair."""
        if self.private_key is None:
            raise Ed25519Error("key pair has no private key")
        return encode_ed25519_secret_seed(self.private_key.to_bytes())

    def raw_public_key(self) -> bytes:
        return self.public_key.to_bytes()

    def signature_hint(self) -> bytes:
        """Last four bytes of the public key."""
        return self.public_key.to_bytes()[-SIGNATURE_HINT_LENGTH:]

    def sign(self, message: bytes) -> bytes:
        """Sign a message and return signature bytes."""
        if self.private_key is None:
            raise Ed25519Error("cannot sign: key pair has no private key")
        return self.private_key.sign(message)

    def sign_decorated(self, message: bytes) -> DecoratedSignature:
        """Sign a message and attach this key's signature hint."""
        return DecoratedSignature(hint=self.signature_hint(), signature=self.sign(message))

    def verify(self, message: bytes, signature: bytes) -> bool:
        """
        Verify a signature against a message.

        Args:
            message: Message that was signed
            signature: 64-byte Ed25519 signature

        Returns:
            True if signature is valid
        """
        return self.public_key.verify(signature, message)

    def __repr__(self) -> str:
        return f"Ed25519KeyPair(account_id='{self.account_id()}')"


__all__ = [
    "DecoratedSignature",
    "Ed25519PublicKey",
    "Ed25519PrivateKey",
    "Ed25519KeyPair",
    "Ed25519Error",
]
