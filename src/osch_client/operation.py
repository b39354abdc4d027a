"""
Operation seam.

Operations are opaque to the transaction builder: it appends them in order and
the codec writes whatever XDR each operation produces for itself.
"""

from __future__ import annotations
import base64
from abc import ABC, abstractmethod
from typing import Union

from .runtime.errors import EncodingError


class Operation(ABC):
    """
    Base class for ledger operations.

    Subclasses own their wire format and return it from to_xdr_bytes().
    """

    @abstractmethod
    def to_xdr_bytes(self) -> bytes:
        """
        Encode this operation.

        Returns:
            The operation's XDR, 4-byte aligned
        """
        pass


class RawOperation(Operation):
    """
    Operation that is already XDR encoded.

    Useful for operations built by another tool or received over the wire.
    """

    def __init__(self, xdr: Union[bytes, str]):
        """
        Args:
            xdr: Operation XDR as bytes or base64 text
        """
        if isinstance(xdr, str):
            try:
                xdr = base64.b64decode(xdr, validate=True)
            except ValueError as e:
                raise EncodingError("operation XDR is not valid base64", cause=e)
        if len(xdr) == 0 or len(xdr) % 4 != 0:
            raise EncodingError(f"operation XDR must be non-empty and 4-byte aligned, got {len(xdr)} bytes")
        self._xdr = bytes(xdr)

    def to_xdr_bytes(self) -> bytes:
        return self._xdr

    def __eq__(self, other) -> bool:
        if not isinstance(other, RawOperation):
            return False
        return self._xdr == other._xdr

    def __hash__(self) -> int:
        return hash(self._xdr)

    def __repr__(self) -> str:
        return f"RawOperation({base64.b64encode(self._xdr).decode('ascii')!r})"


__all__ = [
    "Operation",
    "RawOperation",
]
