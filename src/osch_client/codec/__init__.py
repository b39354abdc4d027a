"""
Osch XDR Codec Module

Canonical binary encoding of ledger structures following RFC 4506 (XDR).

Key components:
- writer.py: XDR primitive writer
- reader.py: XDR primitive reader
- transaction_codec.py: account ids, assets, memos, transactions, envelopes
- hashes.py: SHA-256 helpers
"""

from .hashes import sha256_bytes, sha256_hex
from .reader import XdrReader
from .transaction_codec import TransactionCodec
from .writer import XdrWriter

__all__ = [
    "XdrReader",
    "XdrWriter",
    "TransactionCodec",
    "sha256_bytes",
    "sha256_hex",
]
