"""
Built transactions and signed envelopes.

A Transaction is an immutable snapshot of builder state at build time. Signing
binds it to one network: the signature covers the network id, the envelope
type and the transaction XDR.
"""

from __future__ import annotations
import base64
import logging
from typing import Any, Dict, List, Optional, Tuple, Union
from pydantic import BaseModel, Field

from ..codec.transaction_codec import TransactionCodec
from ..crypto.ed25519 import DecoratedSignature
from ..memo import Memo
from ..network import Network
from ..runtime.errors import InvalidNetworkError, NetworkNotSelectedError
from .options import TimeBounds

logger = logging.getLogger(__name__)

NetworkLike = Union[Network, str, None]


class Transaction(BaseModel):
    """
    Immutable transaction representation.

    Contains the source account, total fee, sequence number, optional time
    bounds, memo and operations, ready for signing.
    """
    source_account: str = Field(..., description="Source account id")
    fee: int = Field(..., ge=0, description="Total fee in stroops")
    sequence: int = Field(..., ge=0, description="Sequence number of this transaction")
    memo: Memo = Field(default_factory=Memo.none)
    time_bounds: Optional[TimeBounds] = Field(default=None)
    operations: Tuple[Any, ...] = Field(default=())
    ext: int = Field(default=0, description="Reserved extension discriminant")
    network_passphrase: Optional[str] = Field(
        default=None,
        description="Network chosen at build time, used when signing without an explicit network"
    )

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True,
    }

    def sequence_number(self) -> str:
        return str(self.sequence)

    def resolve_network(self, network: NetworkLike = None) -> Network:
        """
        Pick the network to bind signatures to.

        Order: the explicit argument, the passphrase given at build time,
        then the process-wide Network.current().

        Raises:
            InvalidNetworkError: If network is neither a Network, a passphrase nor None
            NetworkNotSelectedError: If none of them is set
        """
        if isinstance(network, Network):
            return network
        if isinstance(network, str):
            return Network(network)
        if network is not None:
            raise InvalidNetworkError(f"expected a Network or passphrase, got {type(network).__name__}")
        if self.network_passphrase is not None:
            return Network(self.network_passphrase)
        current = Network.current()
        if current is None:
            raise NetworkNotSelectedError()
        return current

    def to_xdr_bytes(self) -> bytes:
        """Transaction XDR."""
        return TransactionCodec.encode_transaction(self)

    def signature_base(self, network: NetworkLike = None) -> bytes:
        """
        Bytes that are hashed and signed for this transaction.

        Args:
            network: Network or passphrase; see resolve_network()
        """
        return TransactionCodec.signature_base(self, self.resolve_network(network).network_id())

    def hash(self, network: NetworkLike = None) -> bytes:
        """
        Transaction hash (SHA-256 of the signature base).

        Args:
            network: Network or passphrase; see resolve_network()

        Returns:
            32-byte hash
        """
        return TransactionCodec.hash_transaction(self, self.resolve_network(network).network_id())

    def hash_hex(self, network: NetworkLike = None) -> str:
        return self.hash(network).hex()

    def to_envelope(self) -> TransactionEnvelope:
        """Unsigned envelope for this transaction."""
        return TransactionEnvelope(transaction=self)

    def sign(self, *keypairs: Any, network: NetworkLike = None) -> TransactionEnvelope:
        """
        Sign with one or more key pairs.

        Args:
            *keypairs: Objects providing sign_decorated(bytes)
            network: Network or passphrase; see resolve_network()

        Returns:
            A new envelope carrying the signatures
        """
        return self.to_envelope().sign(*keypairs, network=network)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary representation.

        Operations are shown as base64 XDR.
        """
        result: Dict[str, Any] = {
            "sourceAccount": self.source_account,
            "fee": self.fee,
            "seqNum": str(self.sequence),
            "memo": self.memo.to_dict(),
            "operations": [
                base64.b64encode(op.to_xdr_bytes()).decode('ascii') for op in self.operations
            ],
            "ext": self.ext,
        }
        if self.time_bounds is not None:
            result["timeBounds"] = self.time_bounds.to_dict()
        return result

    def __str__(self) -> str:
        return f"Transaction({self.source_account}, seq={self.sequence}, ops={len(self.operations)})"


class TransactionEnvelope(BaseModel):
    """
    Transaction plus decorated signatures.

    Immutable: sign() and add_signature() return a new envelope.
    """
    transaction: Transaction = Field(..., description="The signed transaction")
    signatures: Tuple[DecoratedSignature, ...] = Field(default=())

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True,
    }

    def add_signature(self, signature: DecoratedSignature) -> TransactionEnvelope:
        """Return a copy with an additional signature."""
        return TransactionEnvelope(
            transaction=self.transaction,
            signatures=self.signatures + (signature,),
        )

    def sign(self, *keypairs: Any, network: NetworkLike = None) -> TransactionEnvelope:
        """
        Return a copy signed by each key pair, in order.

        Args:
            *keypairs: Objects providing sign_decorated(bytes)
            network: Network or passphrase; see Transaction.resolve_network()
        """
        tx_hash = self.transaction.hash(network)
        signatures: List[DecoratedSignature] = list(self.signatures)
        for keypair in keypairs:
            signatures.append(keypair.sign_decorated(tx_hash))
            logger.debug(f"Signed transaction {tx_hash.hex()[:16]}... with {keypair!r}")
        return TransactionEnvelope(transaction=self.transaction, signatures=tuple(signatures))

    def hash(self, network: NetworkLike = None) -> bytes:
        """Hash of the enclosed transaction."""
        return self.transaction.hash(network)

    def to_xdr_bytes(self) -> bytes:
        """Envelope XDR."""
        return TransactionCodec.encode_envelope(self.transaction, self.signatures)

    def to_xdr(self) -> str:
        """Envelope XDR as base64, the form submitted to the ledger."""
        return base64.b64encode(self.to_xdr_bytes()).decode('ascii')

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "tx": self.transaction.to_dict(),
            "signatures": [sig.to_dict() for sig in self.signatures],
        }


__all__ = [
    "Transaction",
    "TransactionEnvelope",
]
