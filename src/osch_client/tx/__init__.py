"""
Transaction construction for the osch ledger.

Provides the TransactionBuilder state machine, its options, and the immutable
Transaction and TransactionEnvelope values it produces.
"""

from .options import (
    BASE_FEE,
    TIMEOUT_INFINITE,
    BuilderOptions,
    TimeBounds,
    is_valid_date,
)
from .transaction import Transaction, TransactionEnvelope
from .builder import TransactionBuilder

__all__ = [
    "BASE_FEE",
    "TIMEOUT_INFINITE",
    "BuilderOptions",
    "TimeBounds",
    "is_valid_date",
    "Transaction",
    "TransactionEnvelope",
    "TransactionBuilder",
]
