"""
StrKey identity codec.

Account ids and secret seeds travel as checksummed base32 strings: one version
byte, the 32-byte key, and a CRC16-XModem checksum of both (little-endian),
base32-encoded per RFC 4648. An ed25519 public key encodes to 56 characters
starting with ``G``; an ed25519 seed starts with ``S``.
"""

from __future__ import annotations
import base64
import binascii
import struct
from enum import IntEnum
from typing import Any

from ..runtime.errors import InvalidIdentityError

KEY_LENGTH = 32
ENCODED_LENGTH = 56


class VersionByte(IntEnum):
    """StrKey version bytes."""

    ED25519_PUBLIC_KEY = 6 << 3  # 'G'
    ED25519_SECRET_SEED = 18 << 3  # 'S'


def crc16_xmodem(data: bytes) -> int:
    """CRC16-XModem (CCITT polynomial 0x1021, initial value 0)."""
    return binascii.crc_hqx(data, 0)


def _encode_check(version: VersionByte, data: bytes) -> str:
    if not isinstance(data, (bytes, bytearray)):
        raise InvalidIdentityError(f"cannot encode {type(data).__name__}, expected bytes")
    if len(data) != KEY_LENGTH:
        raise InvalidIdentityError(f"key must be {KEY_LENGTH} bytes, got {len(data)}")
    payload = bytes([version]) + bytes(data)
    checksum = struct.pack('<H', crc16_xmodem(payload))
    return base64.b32encode(payload + checksum).decode('ascii')


def _decode_check(version: VersionByte, encoded: Any) -> bytes:
    if not isinstance(encoded, str):
        raise InvalidIdentityError(f"encoded key must be a string, got {type(encoded).__name__}")
    if len(encoded) != ENCODED_LENGTH:
        raise InvalidIdentityError(f"encoded key must be {ENCODED_LENGTH} characters, got {len(encoded)}")
    try:
        decoded = base64.b32decode(encoded.encode('ascii'))
    except (binascii.Error, UnicodeEncodeError) as e:
        raise InvalidIdentityError("encoded key is not valid base32", cause=e)

    version_byte, payload, checksum = decoded[0], decoded[1:-2], decoded[-2:]
    if version_byte != version:
        raise InvalidIdentityError(
            f"invalid version byte: expected {int(version)}, got {version_byte}"
        )
    expected = struct.pack('<H', crc16_xmodem(decoded[:-2]))
    if checksum != expected:
        raise InvalidIdentityError("invalid checksum")
    return payload


def _is_valid(version: VersionByte, encoded: Any) -> bool:
    try:
        _decode_check(version, encoded)
    except InvalidIdentityError:
        return False
    return True


def encode_ed25519_public_key(data: bytes) -> str:
    """
    Encode a raw ed25519 public key as an account id.

    Args:
        data: 32-byte public key

    Returns:
        ``G...`` account id
    """
    return _encode_check(VersionByte.ED25519_PUBLIC_KEY, data)


def decode_ed25519_public_key(account_id: str) -> bytes:
    """
    Decode an account id to its raw ed25519 public key.

    Raises:
        InvalidIdentityError: If the string is not a valid account id
    """
    return _decode_check(VersionByte.ED25519_PUBLIC_KEY, account_id)


def is_valid_ed25519_public_key(account_id: Any) -> bool:
    """True if account_id is a well-formed, checksum-valid ``G...`` key."""
    return _is_valid(VersionByte.ED25519_PUBLIC_KEY, account_id)


def encode_ed25519_secret_seed(data: bytes) -> str:
    """Encode a raw 32-byte ed25519 seed as an ``S...`` secret."""
    return _encode_check(VersionByte.ED25519_SECRET_SEED, data)


def decode_ed25519_secret_seed(secret: str) -> bytes:
    """Decode an ``S...`` secret to its raw 32-byte seed."""
    return _decode_check(VersionByte.ED25519_SECRET_SEED, secret)


def is_valid_ed25519_secret_seed(secret: Any) -> bool:
    """True if secret is a well-formed, checksum-valid ``S...`` seed."""
    return _is_valid(VersionByte.ED25519_SECRET_SEED, secret)


__all__ = [
    "VersionByte",
    "crc16_xmodem",
    "encode_ed25519_public_key",
    "decode_ed25519_public_key",
    "is_valid_ed25519_public_key",
    "encode_ed25519_secret_seed",
    "decode_ed25519_secret_seed",
    "is_valid_ed25519_secret_seed",
]
