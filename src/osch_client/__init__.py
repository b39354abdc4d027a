"""
Osch Python SDK

Builds canonical transaction envelopes for the osch ledger: source account
sequence tracking, asset identities, network selection, and the
TransactionBuilder that turns them into signable transactions.
"""

from .account import Account
from .asset import Asset, AssetType, CanonicalAsset, NATIVE_ASSET_CODE
from .memo import Memo, MemoType
from .network import Network, Networks
from .operation import Operation, RawOperation
from .crypto import DecoratedSignature, Ed25519KeyPair
from .keys import (
    encode_ed25519_public_key,
    decode_ed25519_public_key,
    is_valid_ed25519_public_key,
)
from .runtime.errors import *
from .tx import (
    BASE_FEE,
    TIMEOUT_INFINITE,
    BuilderOptions,
    TimeBounds,
    Transaction,
    TransactionEnvelope,
    TransactionBuilder,
)

__version__ = "0.1.0"
__all__ = [
    # Core types
    "Account",
    "Asset",
    "AssetType",
    "CanonicalAsset",
    "NATIVE_ASSET_CODE",
    "Memo",
    "MemoType",
    "Network",
    "Networks",
    "Operation",
    "RawOperation",

    # Keys and signing
    "DecoratedSignature",
    "Ed25519KeyPair",
    "encode_ed25519_public_key",
    "decode_ed25519_public_key",
    "is_valid_ed25519_public_key",

    # Transaction building
    "BASE_FEE",
    "TIMEOUT_INFINITE",
    "BuilderOptions",
    "TimeBounds",
    "Transaction",
    "TransactionEnvelope",
    "TransactionBuilder",

    # All errors are included via *
]
