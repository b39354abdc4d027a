"""
Unit tests for Asset identity and canonical form.
"""

import pytest

from osch_client.asset import Asset, AssetType, CanonicalAsset, NATIVE_ASSET_CODE
from osch_client.runtime.errors import (
    InvalidAssetCodeError,
    InvalidAssetTypeError,
    InvalidIssuerError,
    MissingIssuerError,
    UnmarshalError,
)

from helpers import ISSUER_ID, ONES_ACCOUNT_ID


class TestAssetCreation:
    """Tests for Asset construction and validation."""

    def test_credit_asset(self):
        """Test a credit asset keeps its code and issuer."""
        asset = Asset("USD", ISSUER_ID)
        assert asset.get_code() == "USD"
        assert asset.get_issuer() == ISSUER_ID
        assert asset.code == "USD"
        assert asset.issuer == ISSUER_ID
        assert not asset.is_native()

    @pytest.mark.parametrize("code", ["", "ABCDEFGHIJKLM", "US D", "US-D", "ÜSD", None, 5])
    def test_invalid_code(self, code):
        """Test codes outside 1-12 ASCII alphanumerics are rejected."""
        with pytest.raises(InvalidAssetCodeError):
            Asset(code, ISSUER_ID)

    def test_code_checked_before_issuer(self):
        """Test a bad code is reported even when the issuer is missing."""
        with pytest.raises(InvalidAssetCodeError):
            Asset("TOO-LONG-CODE-X")

    def test_missing_issuer(self):
        """Test a non-native code without issuer is rejected."""
        with pytest.raises(MissingIssuerError):
            Asset("USD")

    def test_invalid_issuer(self):
        """Test a malformed issuer is rejected."""
        with pytest.raises(InvalidIssuerError):
            Asset("USD", "GNOTAVALIDISSUER")

    @pytest.mark.parametrize("code", ["XLM", "xlm", "Xlm"])
    def test_native_code_without_issuer(self, code):
        """Test the native code needs no issuer, in any case."""
        asset = Asset(code)
        assert asset.is_native()
        assert asset.asset_type() == "native"
        assert asset.get_code() == NATIVE_ASSET_CODE
        assert asset == Asset.native()

    def test_native(self):
        """Test the native asset factory."""
        asset = Asset.native()
        assert asset.is_native()
        assert asset.get_code() == NATIVE_ASSET_CODE
        assert asset.get_issuer() is None
        assert asset.asset_type() == "native"
        assert str(asset) == "native"


class TestAssetType:
    """Tests for asset_type() classification."""

    @pytest.mark.parametrize("code,expected", [
        ("A", "credit_alphanum4"),
        ("USD", "credit_alphanum4"),
        ("ABCD", "credit_alphanum4"),
        ("ABCDE", "credit_alphanum12"),
        ("LONGCODE12", "credit_alphanum12"),
        ("ABCDEFGHIJKL", "credit_alphanum12"),
    ])
    def test_variant_by_length(self, code, expected):
        """Test the variant depends only on code length."""
        assert Asset(code, ISSUER_ID).asset_type() == expected


class TestCanonicalForm:
    """Tests for canonical encoding and decoding."""

    def test_alphanum4_slot(self):
        """Test short codes are NUL padded into the 4-byte slot."""
        canonical = Asset("USD", ONES_ACCOUNT_ID).to_canonical_form()
        assert canonical.asset_type == AssetType.CREDIT_ALPHANUM4
        assert canonical.code == b"USD\x00"
        assert canonical.issuer == b"\x01" * 32

    def test_alphanum12_slot(self):
        """Test long codes are NUL padded into the 12-byte slot."""
        canonical = Asset("LONGCODE12", ONES_ACCOUNT_ID).to_canonical_form()
        assert canonical.asset_type == AssetType.CREDIT_ALPHANUM12
        assert canonical.code == b"LONGCODE12\x00\x00"
        assert len(canonical.code) == 12

    def test_native_has_no_payload(self):
        """Test the native canonical form carries no code or issuer."""
        canonical = Asset.native().to_canonical_form()
        assert canonical == CanonicalAsset(asset_type=AssetType.NATIVE)
        assert canonical.code == b""
        assert canonical.issuer == b""

    def test_alphanum4_xdr(self):
        """Test the XDR bytes of a 4-character asset."""
        expected = (
            bytes.fromhex("00000001") + b"USD\x00"
            + bytes.fromhex("00000000") + b"\x01" * 32
        )
        assert Asset("USD", ONES_ACCOUNT_ID).to_xdr_bytes() == expected

    def test_alphanum12_xdr(self):
        """Test the XDR bytes of a 12-slot asset."""
        expected = (
            bytes.fromhex("00000002") + b"LONGCODE12\x00\x00"
            + bytes.fromhex("00000000") + b"\x01" * 32
        )
        assert Asset("LONGCODE12", ONES_ACCOUNT_ID).to_xdr_bytes() == expected

    def test_native_xdr(self):
        """Test the native asset is a bare discriminant."""
        assert Asset.native().to_xdr_bytes() == b"\x00\x00\x00\x00"

    @pytest.mark.parametrize("code", ["A", "USD", "ABCD", "ABCDE", "LONGCODE12", "ABCDEFGHIJKL"])
    def test_round_trip(self, code):
        """Test canonical form decodes back to an equal asset."""
        asset = Asset(code, ISSUER_ID)
        assert Asset.from_canonical_form(asset.to_canonical_form()) == asset
        assert Asset.from_canonical_form(asset.to_xdr_bytes()) == asset

    def test_native_round_trip(self):
        """Test the native asset round trips."""
        decoded = Asset.from_canonical_form(Asset.native().to_xdr_bytes())
        assert decoded.is_native()
        assert decoded == Asset.native()

    @pytest.mark.parametrize("code", ["XLM", "xlm", "Xlm"])
    def test_native_spellings_round_trip(self, code):
        """Test every spelling of the native code round trips to an equal asset."""
        asset = Asset(code)
        assert Asset.from_canonical_form(asset.to_canonical_form()) == asset
        assert Asset.from_canonical_form(asset.to_xdr_bytes()) == asset
        assert hash(Asset.from_canonical_form(asset.to_xdr_bytes())) == hash(asset)

    def test_issuer_key_wrong_length(self):
        """Test a canonical form with a short issuer key is rejected."""
        encoded = CanonicalAsset(asset_type=AssetType.CREDIT_ALPHANUM4, code=b"USD\x00", issuer=b"\x01" * 31)
        with pytest.raises(UnmarshalError):
            Asset.from_canonical_form(encoded)

    def test_unknown_discriminant(self):
        """Test unknown discriminants are rejected."""
        with pytest.raises(InvalidAssetTypeError):
            Asset.from_canonical_form(CanonicalAsset(asset_type=3))
        with pytest.raises(InvalidAssetTypeError):
            Asset.from_canonical_form(b"\x00\x00\x00\x07")

    def test_truncated_bytes(self):
        """Test truncated XDR is rejected."""
        data = Asset("USD", ISSUER_ID).to_xdr_bytes()
        with pytest.raises(UnmarshalError):
            Asset.from_canonical_form(data[:-1])

    def test_trailing_bytes(self):
        """Test XDR with trailing data is rejected."""
        data = Asset.native().to_xdr_bytes() + b"\x00\x00\x00\x00"
        with pytest.raises(UnmarshalError):
            Asset.from_canonical_form(data)


class TestAssetEquality:
    """Tests for equality and hashing."""

    def test_equal_assets(self):
        """Test assets with the same code and issuer are equal."""
        a = Asset("USD", ISSUER_ID)
        b = Asset("USD", ISSUER_ID)
        assert a == b
        assert a.equals(b)
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_code_is_case_sensitive(self):
        """Test codes differing only in case are different assets."""
        assert Asset("usd", ISSUER_ID) != Asset("USD", ISSUER_ID)

    def test_different_issuer(self):
        """Test the issuer is part of the identity."""
        assert Asset("USD", ISSUER_ID) != Asset("USD", ONES_ACCOUNT_ID)

    def test_native_not_equal_to_credit(self):
        """Test the native asset differs from credit assets."""
        assert Asset.native() != Asset("XLM", ISSUER_ID)

    def test_other_types(self):
        """Test comparison with non-assets is False."""
        assert not Asset.native().equals("native")
        assert Asset.native() != "native"
        assert Asset.native().__eq__("native") is NotImplemented

    def test_str(self):
        """Test string form of a credit asset."""
        assert str(Asset("USD", ISSUER_ID)) == f"USD:{ISSUER_ID}"
