"""
XDR Reader

Decodes the XDR primitives written by XdrWriter. Reading past the end of the
buffer, a non-zero padding byte or an over-long variable field raise
UnmarshalError.
"""

import builtins
import struct

from ..runtime.errors import UnmarshalError


def _pad_length(n: int) -> int:
    return (4 - n % 4) % 4


class XdrReader:
    """
    XDR reader over an immutable byte buffer.
    """

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = bytes(buf)
        self._off = 0

    @property
    def eof(self) -> bool:
        """
        Check if at end of buffer.

        Returns:
            True if at end of buffer
        """
        return self._off >= len(self._buf)

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._buf) - self._off

    def _take(self, n: int) -> builtins.bytes:
        if self._off + n > len(self._buf):
            raise UnmarshalError(
                f"Buffer overflow: need {n} bytes at offset {self._off}, have {self.remaining}"
            )
        val = self._buf[self._off:self._off + n]
        self._off += n
        return val

    def _skip_padding(self, n: int) -> None:
        padding = self._take(_pad_length(n))
        if padding.strip(b"\x00"):
            raise UnmarshalError("non-zero XDR padding")

    def int32(self) -> int:
        """Read signed 32-bit integer."""
        return struct.unpack('>i', self._take(4))[0]

    def uint32(self) -> int:
        """Read unsigned 32-bit integer."""
        return struct.unpack('>I', self._take(4))[0]

    def int64(self) -> int:
        """Read signed 64-bit integer."""
        return struct.unpack('>q', self._take(8))[0]

    def uint64(self) -> int:
        """Read unsigned 64-bit integer."""
        return struct.unpack('>Q', self._take(8))[0]

    def boolean(self) -> bool:
        """Read XDR bool."""
        v = self.int32()
        if v not in (0, 1):
            raise UnmarshalError(f"invalid XDR bool value: {v}")
        return v == 1

    def opaque_fixed(self, size: int) -> builtins.bytes:
        """
        Read fixed-length opaque data.

        Args:
            size: Declared length of the field

        Returns:
            The field bytes without padding
        """
        val = self._take(size)
        self._skip_padding(size)
        return val

    def opaque_var(self, max_size: int = (1 << 32) - 1) -> builtins.bytes:
        """
        Read variable-length opaque data.

        Args:
            max_size: Declared maximum length of the field

        Returns:
            The field bytes without length prefix or padding
        """
        n = self.uint32()
        if n > max_size:
            raise UnmarshalError(f"opaque<{max_size}> length prefix too large: {n}")
        return self.opaque_fixed(n)

    def string(self, max_size: int = (1 << 32) - 1) -> str:
        """Read UTF-8 string."""
        data = self.opaque_var(max_size)
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise UnmarshalError("string is not valid UTF-8", cause=e)

    def done(self) -> None:
        """
        Assert the whole buffer was consumed.

        Raises:
            UnmarshalError: If unread bytes remain
        """
        if not self.eof:
            raise UnmarshalError(f"{self.remaining} trailing bytes after XDR value")
