"""
Unit tests for the StrKey identity codec.
"""

import pytest

from osch_client.keys.strkey import (
    VersionByte,
    crc16_xmodem,
    decode_ed25519_public_key,
    decode_ed25519_secret_seed,
    encode_ed25519_public_key,
    encode_ed25519_secret_seed,
    is_valid_ed25519_public_key,
    is_valid_ed25519_secret_seed,
)
from osch_client.runtime.errors import InvalidIdentityError

from helpers import ACCOUNT_ID, ISSUER_ID, ONES_ACCOUNT_ID, ZERO_ACCOUNT_ID, ZERO_SECRET_SEED


class TestChecksum:
    """Tests for the CRC16-XModem checksum."""

    def test_check_value(self):
        """Test the standard CRC16-XModem check value."""
        assert crc16_xmodem(b"123456789") == 0x31C3

    def test_empty(self):
        """Test the checksum of no data."""
        assert crc16_xmodem(b"") == 0

    def test_version_bytes(self):
        """Test the version bytes that produce G and S prefixes."""
        assert VersionByte.ED25519_PUBLIC_KEY == 48
        assert VersionByte.ED25519_SECRET_SEED == 144


class TestPublicKey:
    """Tests for G... account ids."""

    def test_encode_zero_key(self):
        """Test the encoding of an all-zero key."""
        assert encode_ed25519_public_key(bytes(32)) == ZERO_ACCOUNT_ID

    def test_encode_ones_key(self):
        """Test the encoding of an all-0x01 key."""
        assert encode_ed25519_public_key(b"\x01" * 32) == ONES_ACCOUNT_ID

    def test_decode(self):
        """Test decoding back to the raw key."""
        assert decode_ed25519_public_key(ONES_ACCOUNT_ID) == b"\x01" * 32

    def test_round_trip(self):
        """Test decode then encode returns the same id."""
        for account_id in (ACCOUNT_ID, ISSUER_ID):
            assert encode_ed25519_public_key(decode_ed25519_public_key(account_id)) == account_id

    @pytest.mark.parametrize("account_id", [ACCOUNT_ID, ISSUER_ID, ZERO_ACCOUNT_ID, ONES_ACCOUNT_ID])
    def test_valid(self, account_id):
        """Test well-formed ids are valid."""
        assert is_valid_ed25519_public_key(account_id)

    @pytest.mark.parametrize("account_id", [
        "",
        "GB3KJPLFUYN5VL6R3GU3EGCGVCKFDSD7BEDX42HWG5BWFKB3KQGJJRM",
        "GB3KJPLFUYN5VL6R3GU3EGCGVCKFDSD7BEDX42HWG5BWFKB3KQGJJRMB",
        "gb3kjplfuyn5vl6r3gu3egcgvckfdsd7bedx42hwg5bwfkb3kqgjjrma",
        "GB3KJPLFUYN5VL6R3GU3EGCGVCKFDSD7BEDX42HWG5BWFKB3KQGJJR1A",
        ZERO_SECRET_SEED,
        None,
        b"GB3KJPLFUYN5VL6R3GU3EGCGVCKFDSD7BEDX42HWG5BWFKB3KQGJJRMA",
    ])
    def test_invalid(self, account_id):
        """Test malformed ids are invalid."""
        assert not is_valid_ed25519_public_key(account_id)

    def test_decode_invalid_raises(self):
        """Test decoding a malformed id raises InvalidIdentityError."""
        with pytest.raises(InvalidIdentityError):
            decode_ed25519_public_key("GBAD")

    @pytest.mark.parametrize("data", [b"", b"\x00" * 31, b"\x00" * 33, "0" * 32])
    def test_encode_wrong_length(self, data):
        """Test only 32-byte keys can be encoded."""
        with pytest.raises(InvalidIdentityError):
            encode_ed25519_public_key(data)


class TestSecretSeed:
    """Tests for S... secret seeds."""

    def test_encode_zero_seed(self):
        """Test the encoding of an all-zero seed."""
        assert encode_ed25519_secret_seed(bytes(32)) == ZERO_SECRET_SEED

    def test_decode(self):
        """Test decoding a seed."""
        assert decode_ed25519_secret_seed(ZERO_SECRET_SEED) == bytes(32)

    def test_valid(self):
        """Test seed validity check."""
        assert is_valid_ed25519_secret_seed(ZERO_SECRET_SEED)
        assert not is_valid_ed25519_secret_seed(ZERO_ACCOUNT_ID)

    def test_account_id_is_not_a_seed(self):
        """Test version bytes are checked."""
        with pytest.raises(InvalidIdentityError):
            decode_ed25519_secret_seed(ACCOUNT_ID)
