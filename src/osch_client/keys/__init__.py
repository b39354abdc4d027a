"""
Key encodings for the osch ledger.
"""

from .strkey import (
    VersionByte,
    encode_ed25519_public_key,
    decode_ed25519_public_key,
    is_valid_ed25519_public_key,
    encode_ed25519_secret_seed,
    decode_ed25519_secret_seed,
    is_valid_ed25519_secret_seed,
)

__all__ = [
    "VersionByte",
    "encode_ed25519_public_key",
    "decode_ed25519_public_key",
    "is_valid_ed25519_public_key",
    "encode_ed25519_secret_seed",
    "decode_ed25519_secret_seed",
    "is_valid_ed25519_secret_seed",
]
