"""
Transaction Codec

XDR encoding of the structures owned by this library: account ids, assets,
time bounds, memos, transactions, envelopes and the signature base that is
hashed for signing.
"""

from typing import Any, Iterable, Tuple

from .hashes import sha256_bytes
from .writer import XdrWriter
from .reader import XdrReader
from ..keys.strkey import decode_ed25519_public_key, encode_ed25519_public_key
from ..memo import Memo, MemoType, MAX_TEXT_BYTES
from ..runtime.errors import EncodingError, InvalidAssetTypeError, InvalidIdentityError, UnmarshalError

PUBLIC_KEY_TYPE_ED25519 = 0
ENVELOPE_TYPE_TX = 2

ASSET_TYPE_NATIVE = 0
ASSET_TYPE_CREDIT_ALPHANUM4 = 1
ASSET_TYPE_CREDIT_ALPHANUM12 = 2

ASSET_CODE_SLOTS = {
    ASSET_TYPE_CREDIT_ALPHANUM4: 4,
    ASSET_TYPE_CREDIT_ALPHANUM12: 12,
}

MAX_OPERATIONS = 100
MAX_SIGNATURES = 20
SIGNATURE_HINT_LENGTH = 4
MAX_SIGNATURE_LENGTH = 64


class TransactionCodec:
    """
    XDR codec for osch ledger structures.

    Operations are opaque: each one is written from its own to_xdr_bytes().
    """

    @staticmethod
    def write_account_id(writer: XdrWriter, account_id: str) -> None:
        """Write an AccountID (ed25519 public key union)."""
        try:
            key = decode_ed25519_public_key(account_id)
        except InvalidIdentityError as e:
            raise EncodingError(f"cannot encode account id {account_id!r}", cause=e)
        writer.int32(PUBLIC_KEY_TYPE_ED25519)
        writer.opaque_fixed(key, 32)

    @staticmethod
    def read_account_id(reader: XdrReader) -> bytes:
        """Read an AccountID and return the raw 32-byte key."""
        key_type = reader.int32()
        if key_type != PUBLIC_KEY_TYPE_ED25519:
            raise UnmarshalError(f"unsupported public key type: {key_type}")
        return reader.opaque_fixed(32)

    @staticmethod
    def write_asset(writer: XdrWriter, asset_type: int, code: bytes, issuer: bytes) -> None:
        """
        Write an Asset union.

        Args:
            writer: Target writer
            asset_type: Asset discriminant
            code: Code slot bytes, already padded to the slot width
            issuer: Raw 32-byte issuer key (ignored for native)
        """
        if asset_type == ASSET_TYPE_NATIVE:
            writer.int32(asset_type)
            return
        if asset_type not in ASSET_CODE_SLOTS:
            raise InvalidAssetTypeError(f"Invalid asset type: {asset_type}")
        writer.int32(asset_type)
        writer.opaque_fixed(code, ASSET_CODE_SLOTS[asset_type])
        writer.int32(PUBLIC_KEY_TYPE_ED25519)
        writer.opaque_fixed(issuer, 32)

    @staticmethod
    def read_asset(reader: XdrReader) -> Tuple[int, bytes, bytes]:
        """
        Read an Asset union.

        Returns:
            Tuple of (asset_type, code slot bytes, raw issuer key)

        Raises:
            InvalidAssetTypeError: For unknown discriminants
        """
        asset_type = reader.int32()
        if asset_type == ASSET_TYPE_NATIVE:
            return asset_type, b"", b""
        if asset_type not in ASSET_CODE_SLOTS:
            raise InvalidAssetTypeError(f"Invalid asset type: {asset_type}")
        code = reader.opaque_fixed(ASSET_CODE_SLOTS[asset_type])
        issuer = TransactionCodec.read_account_id(reader)
        return asset_type, code, issuer

    @staticmethod
    def write_time_bounds(writer: XdrWriter, min_time: int, max_time: int) -> None:
        """Write TimeBounds as two uint64 epoch-second values."""
        writer.uint64(min_time)
        writer.uint64(max_time)

    @staticmethod
    def write_memo(writer: XdrWriter, memo: Memo) -> None:
        """Write a Memo union."""
        writer.int32(int(memo.type))
        if memo.type == MemoType.TEXT:
            writer.string(memo.value, MAX_TEXT_BYTES)
        elif memo.type == MemoType.ID:
            writer.uint64(memo.value)
        elif memo.type in (MemoType.HASH, MemoType.RETURN):
            writer.opaque_fixed(memo.value, 32)

    @staticmethod
    def write_operations(writer: XdrWriter, operations: Iterable[Any]) -> None:
        """Write the operation array: uint32 count, then each operation."""
        ops = list(operations)
        if len(ops) > MAX_OPERATIONS:
            raise EncodingError(f"transaction cannot hold more than {MAX_OPERATIONS} operations, got {len(ops)}")
        writer.uint32(len(ops))
        for op in ops:
            to_xdr = getattr(op, "to_xdr_bytes", None)
            if to_xdr is None:
                raise EncodingError(f"operation {op!r} does not provide to_xdr_bytes()")
            writer.raw(to_xdr())

    @staticmethod
    def write_transaction(writer: XdrWriter, tx: Any) -> None:
        """
        Write a Transaction.

        Layout: source account, fee (uint32), sequence (int64), optional time
        bounds, memo, operations, ext (int32 0).
        """
        TransactionCodec.write_account_id(writer, tx.source_account)
        writer.uint32(tx.fee)
        writer.int64(tx.sequence)
        if tx.time_bounds is not None:
            writer.boolean(True)
            TransactionCodec.write_time_bounds(writer, tx.time_bounds.min_time, tx.time_bounds.max_time)
        else:
            writer.boolean(False)
        TransactionCodec.write_memo(writer, tx.memo)
        TransactionCodec.write_operations(writer, tx.operations)
        writer.int32(tx.ext)

    @staticmethod
    def encode_transaction(tx: Any) -> bytes:
        """
        Encode a Transaction to XDR bytes.

        Args:
            tx: Transaction to encode

        Returns:
            Transaction XDR
        """
        writer = XdrWriter()
        TransactionCodec.write_transaction(writer, tx)
        return writer.to_bytes()

    @staticmethod
    def encode_envelope(tx: Any, signatures: Iterable[Any]) -> bytes:
        """
        Encode a TransactionEnvelope: the transaction followed by its
        decorated signatures.
        """
        sigs = list(signatures)
        if len(sigs) > MAX_SIGNATURES:
            raise EncodingError(f"envelope cannot hold more than {MAX_SIGNATURES} signatures, got {len(sigs)}")
        writer = XdrWriter()
        TransactionCodec.write_transaction(writer, tx)
        writer.uint32(len(sigs))
        for sig in sigs:
            writer.opaque_fixed(sig.hint, SIGNATURE_HINT_LENGTH)
            writer.opaque_var(sig.signature, MAX_SIGNATURE_LENGTH)
        return writer.to_bytes()

    @staticmethod
    def signature_base(tx: Any, network_id: bytes) -> bytes:
        """
        Build the bytes that get hashed and signed.

        Args:
            tx: Transaction
            network_id: 32-byte network id used as domain separator

        Returns:
            network_id + ENVELOPE_TYPE_TX + transaction XDR
        """
        if len(network_id) != 32:
            raise EncodingError(f"network id must be 32 bytes, got {len(network_id)}")
        writer = XdrWriter()
        writer.opaque_fixed(network_id, 32)
        writer.int32(ENVELOPE_TYPE_TX)
        TransactionCodec.write_transaction(writer, tx)
        return writer.to_bytes()

    @staticmethod
    def hash_transaction(tx: Any, network_id: bytes) -> bytes:
        """SHA-256 of the signature base."""
        return sha256_bytes(TransactionCodec.signature_base(tx, network_id))

    @staticmethod
    def account_id_from_key(key: bytes) -> str:
        """Encode a raw key read from XDR as an account id."""
        try:
            return encode_ed25519_public_key(key)
        except InvalidIdentityError as e:
            raise UnmarshalError("invalid account id key", cause=e)


__all__ = [
    "TransactionCodec",
    "ENVELOPE_TYPE_TX",
    "ASSET_TYPE_NATIVE",
    "ASSET_TYPE_CREDIT_ALPHANUM4",
    "ASSET_TYPE_CREDIT_ALPHANUM12",
    "MAX_OPERATIONS",
    "MAX_SIGNATURES",
]
