"""
Transaction memos.

A memo is a tagged value attached to a transaction: nothing, a short text, a
64-bit id, or a 32-byte hash. Memos are immutable; build them with the
factory methods, which raise InvalidMemoError for values that do not fit
their memo type.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, model_validator
from pydantic import ValidationError as PydanticValidationError

from .runtime.errors import InvalidMemoError

MAX_TEXT_BYTES = 28
HASH_LENGTH = 32
UINT64_MAX = (1 << 64) - 1


class MemoType(IntEnum):
    """Memo discriminants on the wire."""

    NONE = 0
    TEXT = 1
    ID = 2
    HASH = 3
    RETURN = 4


def _hash_bytes(v: Any) -> bytes:
    if isinstance(v, str):
        try:
            v = bytes.fromhex(v)
        except ValueError:
            raise ValueError("hash memo must be 32 bytes or a 64 character hex string")
    if not isinstance(v, (bytes, bytearray)) or len(v) != HASH_LENGTH:
        raise ValueError(f"hash memo must be exactly {HASH_LENGTH} bytes")
    return bytes(v)


class Memo(BaseModel):
    """
    Immutable transaction memo.

    ``value`` is ``None`` for MemoType.NONE, ``str`` for TEXT, ``int`` for ID
    and ``bytes`` for HASH and RETURN.
    """
    type: MemoType = MemoType.NONE
    value: Optional[Union[int, bytes, str]] = None

    model_config = {"frozen": True}

    @model_validator(mode='before')
    @classmethod
    def normalize_value(cls, data: Any) -> Any:
        """Check and normalize the value for the memo type."""
        if not isinstance(data, dict):
            return data
        memo_type = MemoType(data.get('type', MemoType.NONE))
        value = data.get('value')

        if memo_type == MemoType.NONE:
            if value is not None:
                raise ValueError("none memo cannot carry a value")
        elif memo_type == MemoType.TEXT:
            if not isinstance(value, str):
                raise ValueError("text memo must be a string")
            if len(value.encode('utf-8')) > MAX_TEXT_BYTES:
                raise ValueError(f"text memo must be {MAX_TEXT_BYTES} bytes or fewer")
        elif memo_type == MemoType.ID:
            if isinstance(value, str) and value.isascii() and value.isdigit():
                value = int(value)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError("id memo must be an unsigned 64-bit integer")
            if value < 0 or value > UINT64_MAX:
                raise ValueError("id memo must be an unsigned 64-bit integer")
        else:
            value = _hash_bytes(value)

        return {'type': memo_type, 'value': value}

    @classmethod
    def _create(cls, memo_type: MemoType, value: Any) -> Memo:
        try:
            return cls(type=memo_type, value=value)
        except PydanticValidationError as e:
            raise InvalidMemoError(
                f"Invalid {memo_type.name.lower()} memo: {e.errors()[0]['msg']}",
                cause=e,
            )

    @classmethod
    def none(cls) -> Memo:
        """Memo carrying nothing."""
        return cls()

    @classmethod
    def text(cls, text: str) -> Memo:
        """Text memo, at most 28 bytes of UTF-8."""
        return cls._create(MemoType.TEXT, text)

    @classmethod
    def id(cls, memo_id: Union[int, str]) -> Memo:
        """64-bit unsigned id memo, given as int or decimal string."""
        return cls._create(MemoType.ID, memo_id)

    @classmethod
    def hash(cls, memo_hash: Union[bytes, str]) -> Memo:
        """32-byte hash memo, given as bytes or hex."""
        return cls._create(MemoType.HASH, memo_hash)

    @classmethod
    def return_hash(cls, memo_hash: Union[bytes, str]) -> Memo:
        """32-byte hash of the transaction being refunded."""
        return cls._create(MemoType.RETURN, memo_hash)

    def is_none(self) -> bool:
        return self.type == MemoType.NONE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        if self.type == MemoType.NONE:
            return {"type": "none"}
        value = self.value.hex() if isinstance(self.value, bytes) else self.value
        return {"type": self.type.name.lower(), "value": value}


__all__ = [
    "MemoType",
    "Memo",
    "MAX_TEXT_BYTES",
]
