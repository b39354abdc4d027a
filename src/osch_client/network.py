"""
Network selection.

Signatures are bound to one ledger instance by prepending the network id, the
SHA-256 hash of the network passphrase, to every signed payload.

The process-wide selection made with ``Network.use()`` is plain global state
with no synchronization. Code that signs from several threads, or for several
networks, should pass a Network explicitly to the signing calls instead.
"""

from __future__ import annotations
import logging
from typing import Optional

from .codec.hashes import sha256_bytes
from .runtime.errors import InvalidNetworkError

logger = logging.getLogger(__name__)


class Networks:
    """Passphrases of the well known osch networks."""

    PUBLIC = "osch public network"
    TESTNET = "osch test network"


_current: Optional["Network"] = None


class Network:
    """
    A ledger instance identified by its passphrase.

    Args:
        network_passphrase: Network passphrase
    """

    def __init__(self, network_passphrase: str):
        if not isinstance(network_passphrase, str):
            raise InvalidNetworkError(
                f"network passphrase must be a string, got {type(network_passphrase).__name__}"
            )
        self._network_passphrase = network_passphrase
        self._network_id: Optional[bytes] = None

    @classmethod
    def use_public_network(cls) -> None:
        """Use the osch public network."""
        cls.use(cls(Networks.PUBLIC))

    @classmethod
    def use_test_network(cls) -> None:
        """Use the osch test network."""
        cls.use(cls(Networks.TESTNET))

    @staticmethod
    def use(network: Optional[Network]) -> None:
        """
        Select the network used when signing without an explicit network.

        Args:
            network: Network to use, or None to reset the selection

        Raises:
            InvalidNetworkError: If network is neither a Network nor None
        """
        global _current
        if network is not None and not isinstance(network, Network):
            raise InvalidNetworkError(f"expected a Network, got {type(network).__name__}")
        _current = network
        if network is None:
            logger.debug("Cleared network selection")
        else:
            logger.debug(f"Selected network: {network.network_passphrase()!r}")

    @staticmethod
    def current() -> Optional[Network]:
        """Currently selected network, or None if none was selected."""
        return _current

    @staticmethod
    def clear() -> None:
        """Reset the selection to unset."""
        global _current
        _current = None

    def network_passphrase(self) -> str:
        return self._network_passphrase

    def network_id(self) -> bytes:
        """
        Network ID (SHA-256 hash of network passphrase).

        Returns:
            32-byte digest
        """
        if self._network_id is None:
            self._network_id = sha256_bytes(self._network_passphrase)
        return self._network_id

    def __eq__(self, other) -> bool:
        if not isinstance(other, Network):
            return False
        return self._network_passphrase == other._network_passphrase

    def __hash__(self) -> int:
        return hash(self._network_passphrase)

    def __repr__(self) -> str:
        return f"Network('{self._network_passphrase}')"


__all__ = [
    "Networks",
    "Network",
]
