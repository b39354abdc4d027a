"""
XDR Writer

Implements RFC 4506 (XDR) encoding for the primitives used by osch ledger
structures: big-endian integers, fixed and variable opaque data padded to a
4-byte boundary, and length-prefixed strings.
"""

import struct
from typing import List

from ..runtime.errors import EncodingError

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
UINT32_MAX = (1 << 32) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1


def _pad_length(n: int) -> int:
    return (4 - n % 4) % 4


class XdrWriter:
    """
    XDR writer accumulating encoded bytes.

    Values outside the range of the requested wire type raise EncodingError
    instead of being truncated.
    """

    def __init__(self):
        """Initialize writer with empty byte buffer."""
        self._bb: List[int] = []

    def _check_range(self, v: int, lo: int, hi: int, kind: str) -> None:
        if isinstance(v, bool) or not isinstance(v, int):
            raise EncodingError(f"{kind} value must be an integer, got {type(v).__name__}")
        if v < lo or v > hi:
            raise EncodingError(f"{kind} value out of range: {v}")

    def int32(self, v: int) -> None:
        """Write signed 32-bit integer."""
        self._check_range(v, INT32_MIN, INT32_MAX, "int32")
        self._bb.extend(struct.pack('>i', v))

    def uint32(self, v: int) -> None:
        """Write unsigned 32-bit integer."""
        self._check_range(v, 0, UINT32_MAX, "uint32")
        self._bb.extend(struct.pack('>I', v))

    def int64(self, v: int) -> None:
        """Write signed 64-bit integer (XDR hyper)."""
        self._check_range(v, INT64_MIN, INT64_MAX, "int64")
        self._bb.extend(struct.pack('>q', v))

    def uint64(self, v: int) -> None:
        """Write unsigned 64-bit integer (XDR unsigned hyper)."""
        self._check_range(v, 0, UINT64_MAX, "uint64")
        self._bb.extend(struct.pack('>Q', v))

    def boolean(self, v: bool) -> None:
        """Write XDR bool as int32 0/1."""
        self.int32(1 if v else 0)

    def opaque_fixed(self, v: bytes, size: int) -> None:
        """
        Write fixed-length opaque data.

        Args:
            v: Bytes to write, exactly size long
            size: Declared length of the field
        """
        if len(v) != size:
            raise EncodingError(f"opaque[{size}] expects {size} bytes, got {len(v)}")
        self._bb.extend(v)
        self._bb.extend(b"\x00" * _pad_length(size))

    def opaque_var(self, v: bytes, max_size: int = UINT32_MAX) -> None:
        """
        Write variable-length opaque data with uint32 length prefix.

        Args:
            v: Bytes to write
            max_size: Declared maximum length of the field
        """
        if len(v) > max_size:
            raise EncodingError(f"opaque<{max_size}> cannot hold {len(v)} bytes")
        self.uint32(len(v))
        self._bb.extend(v)
        self._bb.extend(b"\x00" * _pad_length(len(v)))

    def string(self, s: str, max_size: int = UINT32_MAX) -> None:
        """Write UTF-8 string with length prefix."""
        self.opaque_var(s.encode('utf-8'), max_size)

    def raw(self, v: bytes) -> None:
        """
        Write pre-encoded XDR without length prefix or padding.

        Args:
            v: Bytes already in XDR form
        """
        if len(v) % 4 != 0:
            raise EncodingError(f"pre-encoded XDR must be 4-byte aligned, got {len(v)} bytes")
        self._bb.extend(v)

    def to_bytes(self) -> bytes:
        """
        Return accumulated bytes as immutable bytes object.

        Returns:
            Bytes containing all written data
        """
        return bytes(self._bb)
