"""
Hash Functions

SHA-256 helpers used for network ids and transaction hashes.
"""

import hashlib
from typing import Union


def sha256_bytes(input_bytes: Union[bytes, str]) -> bytes:
    """
    Compute SHA-256 hash of input bytes.

    Strings are hashed as their UTF-8 encoding.

    Args:
        input_bytes: Input bytes to hash

    Returns:
        SHA-256 hash as bytes (32 bytes)
    """
    if isinstance(input_bytes, str):
        input_bytes = input_bytes.encode('utf-8')
    return hashlib.sha256(input_bytes).digest()


def sha256_hex(input_bytes: Union[bytes, str]) -> str:
    """SHA-256 hash as lowercase hex."""
    return sha256_bytes(input_bytes).hex()
