"""
Asset identity and canonical binary form.

An asset is either the native currency or a (code, issuer) pair. Its canonical
form is the XDR Asset union: the native variant carries no payload, credit
assets use a 4-byte code slot when the code has at most 4 characters and a
12-byte slot otherwise, padded with NUL bytes, followed by the issuer key.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Union

from .codec.reader import XdrReader
from .codec.transaction_codec import (
    TransactionCodec,
    ASSET_TYPE_NATIVE,
    ASSET_TYPE_CREDIT_ALPHANUM4,
    ASSET_TYPE_CREDIT_ALPHANUM12,
)
from .codec.writer import XdrWriter
from .keys.strkey import (
    decode_ed25519_public_key,
    is_valid_ed25519_public_key,
)
from .runtime.errors import (
    InvalidAssetCodeError,
    InvalidAssetTypeError,
    InvalidIssuerError,
    MissingIssuerError,
    UnmarshalError,
)

NATIVE_ASSET_CODE = "XLM"

_ASSET_CODE_RE = re.compile(r"[A-Za-z0-9]{1,12}")


class AssetType(IntEnum):
    """Asset union discriminants."""

    NATIVE = ASSET_TYPE_NATIVE
    CREDIT_ALPHANUM4 = ASSET_TYPE_CREDIT_ALPHANUM4
    CREDIT_ALPHANUM12 = ASSET_TYPE_CREDIT_ALPHANUM12


@dataclass(frozen=True)
class CanonicalAsset:
    """
    Variant-tagged asset representation.

    ``code`` is the NUL-padded code slot (4 or 12 bytes) and ``issuer`` the
    raw 32-byte issuer key; both are empty for the native variant.
    """

    asset_type: int
    code: bytes = b""
    issuer: bytes = b""

    def to_bytes(self) -> bytes:
        """Encode as XDR."""
        writer = XdrWriter()
        TransactionCodec.write_asset(writer, self.asset_type, self.code, self.issuer)
        return writer.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> CanonicalAsset:
        """
        Decode from XDR.

        Raises:
            InvalidAssetTypeError: For unknown discriminants
            UnmarshalError: For truncated or trailing data
        """
        reader = XdrReader(data)
        asset_type, code, issuer = TransactionCodec.read_asset(reader)
        reader.done()
        return cls(asset_type=asset_type, code=code, issuer=issuer)


class Asset:
    """
    Native currency or a (code, issuer) pair.

    Args:
        code: 1-12 alphanumeric characters
        issuer: Issuer account id; omit for the native asset
    """

    def __init__(self, code: str, issuer: Optional[str] = None):
        if not isinstance(code, str) or not _ASSET_CODE_RE.fullmatch(code):
            raise InvalidAssetCodeError(details={"code": str(code)})
        if code.lower() != NATIVE_ASSET_CODE.lower() and not issuer:
            raise MissingIssuerError(details={"code": code})
        if issuer and not is_valid_ed25519_public_key(issuer):
            raise InvalidIssuerError(details={"issuer": str(issuer)})

        # the native asset is always spelled NATIVE_ASSET_CODE
        self._code = code if issuer else NATIVE_ASSET_CODE
        self._issuer = issuer or None

    @classmethod
    def native(cls) -> Asset:
        """Returns an asset object for the native asset."""
        return cls(NATIVE_ASSET_CODE)

    @classmethod
    def from_canonical_form(cls, encoded: Union[CanonicalAsset, bytes]) -> Asset:
        """
        Returns an asset object from its canonical representation.

        Args:
            encoded: CanonicalAsset or its XDR bytes

        Raises:
            InvalidAssetTypeError: For unrecognized discriminants
        """
        if isinstance(encoded, (bytes, bytearray)):
            encoded = CanonicalAsset.from_bytes(bytes(encoded))

        asset_type = encoded.asset_type
        if asset_type == AssetType.NATIVE:
            return cls.native()
        if asset_type in (AssetType.CREDIT_ALPHANUM4, AssetType.CREDIT_ALPHANUM12):
            try:
                code = encoded.code.rstrip(b"\x00").decode("ascii")
            except UnicodeDecodeError as e:
                raise UnmarshalError("malformed credit asset code", cause=e)
            issuer = TransactionCodec.account_id_from_key(encoded.issuer)
            return cls(code, issuer)
        raise InvalidAssetTypeError(f"Invalid asset type: {asset_type}")

    def to_canonical_form(self) -> CanonicalAsset:
        """
        Returns the canonical representation of this asset.

        The slot is chosen from the code length alone: up to 4 characters use
        the 4-byte slot, 5 to 12 the 12-byte slot.
        """
        if self.is_native():
            return CanonicalAsset(asset_type=AssetType.NATIVE)

        if len(self._code) <= 4:
            asset_type, width = AssetType.CREDIT_ALPHANUM4, 4
        else:
            asset_type, width = AssetType.CREDIT_ALPHANUM12, 12

        # pad code with null bytes if necessary
        padded = self._code.encode("ascii").ljust(width, b"\x00")
        return CanonicalAsset(
            asset_type=asset_type,
            code=padded,
            issuer=decode_ed25519_public_key(self._issuer),
        )

    def to_xdr_bytes(self) -> bytes:
        """Canonical form encoded as XDR."""
        return self.to_canonical_form().to_bytes()

    @property
    def code(self) -> str:
        return self._code

    @property
    def issuer(self) -> Optional[str]:
        return self._issuer

    def get_code(self) -> str:
        return self._code

    def get_issuer(self) -> Optional[str]:
        return self._issuer

    def asset_type(self) -> Optional[str]:
        """
        Returns:
            One of ``native``, ``credit_alphanum4``, ``credit_alphanum12``,
            or None for codes outside 1-12 characters
        """
        if self.is_native():
            return "native"
        if 1 <= len(self._code) <= 4:
            return "credit_alphanum4"
        if 5 <= len(self._code) <= 12:
            return "credit_alphanum12"
        return None

    def is_native(self) -> bool:
        """True if this asset object is the native asset."""
        return not self._issuer

    def equals(self, other: Any) -> bool:
        """True if other has the same code and issuer."""
        if not isinstance(other, Asset):
            return False
        return self._code == other.get_code() and self._issuer == other.get_issuer()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Asset):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self._code, self._issuer))

    def __str__(self) -> str:
        if self.is_native():
            return "native"
        return f"{self._code}:{self._issuer}"

    def __repr__(self) -> str:
        if self.is_native():
            return "Asset.native()"
        return f"Asset('{self._code}', '{self._issuer}')"


__all__ = [
    "NATIVE_ASSET_CODE",
    "AssetType",
    "CanonicalAsset",
    "Asset",
]
