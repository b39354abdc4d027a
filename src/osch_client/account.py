"""
Source account sequence tracking.

An Account is a local snapshot of a ledger account: its id and the sequence
number the ledger reported. TransactionBuilder reads the sequence to number a
new transaction and advances it by one on every successful build.
"""

from __future__ import annotations
import threading

from .keys.strkey import is_valid_ed25519_public_key
from .runtime.errors import InvalidIdentityError, InvalidSequenceFormatError


class Account:
    """
    Account id plus its current sequence number.

    The sequence is held as a Python int so values beyond 64 bits never lose
    precision. The builder holds ``lock`` while it reads and increments the
    sequence; share one Account between threads only through that lock, or
    fetch a fresh Account from the ledger for each transaction.

    Args:
        account_id: ``G...`` account id
        sequence: Current sequence number as a decimal string
    """

    def __init__(self, account_id: str, sequence: str):
        if not is_valid_ed25519_public_key(account_id):
            raise InvalidIdentityError(details={"account_id": str(account_id)})
        if not isinstance(sequence, str):
            raise InvalidSequenceFormatError(
                f"sequence must be of type string, got {type(sequence).__name__}"
            )
        if not (sequence.isascii() and sequence.isdigit()):
            raise InvalidSequenceFormatError(
                f"sequence must be a non-negative integer string, got {sequence!r}"
            )

        self._account_id = account_id
        self.sequence = int(sequence)
        self.lock = threading.RLock()

    def account_id(self) -> str:
        """Returns the account id, ex. ``GB3KJPLFUYN5VL6R3GU3EGCGVCKFDSD7BEDX42HWG5BWFKB3KQGJJRMA``."""
        return self._account_id

    def sequence_number(self) -> str:
        """Current sequence number as an exact decimal string."""
        return str(self.sequence)

    def increment_sequence_number(self) -> None:
        """Increments sequence number in this object by one."""
        with self.lock:
            self.sequence += 1

    def __repr__(self) -> str:
        return f"Account(account_id='{self._account_id}', sequence='{self.sequence}')"


__all__ = ["Account"]
