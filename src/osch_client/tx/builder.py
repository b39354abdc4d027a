"""
Transaction builder for the osch ledger.

TransactionBuilder assembles a source Account, operations, a memo, a fee and a
validity window into an immutable Transaction. The transaction takes the
account's current sequence number plus one, and building increments the
account's sequence number by one.

Building increments the sequence even if the transaction is never submitted.
After abandoning a built transaction, discard the Account and fetch it again
from the ledger before building the next one.

Example:
    ```python
    tx = (
        TransactionBuilder(source, {"fee": 100})
        .add_operation(op)
        .add_memo(Memo.text("rent"))
        .set_timeout(30)
        .build()
    )
    envelope = tx.sign(keypair, network=Network(Networks.TESTNET))
    ```
"""

from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional, Tuple, Union

from ..account import Account
from ..memo import Memo
from ..runtime.errors import (
    BuilderConsumedError,
    InvalidMemoError,
    InvalidTimeoutError,
    MissingSourceAccountError,
    MissingTimeBoundsError,
    NegativeTimeoutError,
    TimeBoundsConflictError,
)
from .options import BASE_FEE, BuilderOptions, TimeBounds
from .transaction import Transaction

logger = logging.getLogger(__name__)


def _now_seconds() -> int:
    """Current UTC wall clock in whole epoch seconds."""
    return int(datetime.now(timezone.utc).timestamp())


class TransactionBuilder:
    """
    Builds a Transaction from a source account.

    Two phases: while assembling, add_operation(), add_memo() and
    set_timeout() mutate the builder and return it for chaining; build() ends
    the builder's life and any further call raises BuilderConsumedError.

    Args:
        source_account: Account the transaction is sent from. The builder keeps
            a reference to it and advances its sequence on build().
        options: BuilderOptions or a mapping with keys ``fee``, ``timebounds``,
            ``memo`` and ``network_passphrase``
    """

    def __init__(
        self,
        source_account: Account,
        options: Union[BuilderOptions, Mapping[str, Any], None] = None
    ):
        if source_account is None:
            raise MissingSourceAccountError()
        if not isinstance(source_account, Account):
            raise MissingSourceAccountError(
                f"source account must be an Account, got {type(source_account).__name__}"
            )

        opts = BuilderOptions.coerce(options)

        self.source = source_account
        self._operations: List[Any] = []

        if opts.fee is None:
            logger.warning(
                f"[TransactionBuilder] The `fee` option is required; using the default base fee of {BASE_FEE} stroops."
            )
        self.base_fee: int = BASE_FEE if opts.fee is None else opts.fee
        self.timebounds: Optional[TimeBounds] = (
            opts.timebounds.model_copy(deep=True) if opts.timebounds is not None else None
        )
        self.memo: Memo = opts.memo if opts.memo is not None else Memo.none()
        self.network_passphrase: Optional[str] = opts.network_passphrase
        self.timeout_set = False
        self._built = False

    @property
    def operations(self) -> Tuple[Any, ...]:
        """Operations added so far, in order."""
        return tuple(self._operations)

    def is_built(self) -> bool:
        return self._built

    def _ensure_assembling(self) -> None:
        if self._built:
            raise BuilderConsumedError()

    def _has_max_time(self) -> bool:
        return self.timebounds is not None and self.timebounds.max_time_seconds() > 0

    def add_operation(self, operation: Any) -> TransactionBuilder:
        """
        Adds an operation to the transaction.

        Args:
            operation: Operation providing to_xdr_bytes()

        Returns:
            Self for method chaining
        """
        self._ensure_assembling()
        self._operations.append(operation)
        return self

    def add_memo(self, memo: Memo) -> TransactionBuilder:
        """
        Sets the memo, replacing any previous one.

        Args:
            memo: Memo object

        Returns:
            Self for method chaining
        """
        self._ensure_assembling()
        if not isinstance(memo, Memo):
            raise InvalidMemoError(f"memo must be a Memo, got {type(memo).__name__}")
        self.memo = memo
        return self

    def set_timeout(self, timeout: int) -> TransactionBuilder:
        """
        Sets the transaction's max_time to now + timeout seconds.

        Calling set_timeout() is required unless the options already carry a
        positive max_time. Pass TIMEOUT_INFINITE (0) for a transaction without
        an upper time bound; min_time is kept as configured. Uses the machine's
        UTC clock.

        Args:
            timeout: Number of seconds the transaction is valid. Can't be negative.

        Returns:
            Self for method chaining
        """
        self._ensure_assembling()
        if isinstance(timeout, bool) or not isinstance(timeout, int):
            raise InvalidTimeoutError(details={"timeout": repr(timeout)})
        if timeout < 0:
            raise NegativeTimeoutError(details={"timeout": timeout})
        if self._has_max_time():
            raise TimeBoundsConflictError()
        if self.timeout_set:
            raise TimeBoundsConflictError("timeout has already been set")

        if timeout > 0:
            min_time = self.timebounds.min_time if self.timebounds is not None else 0
            self.timebounds = TimeBounds(min_time=min_time, max_time=_now_seconds() + timeout)
        self.timeout_set = True
        return self

    def build(self) -> Transaction:
        """
        This will build the transaction.

        It will also increment the source account's sequence number by 1.

        Returns:
            The built Transaction

        Raises:
            MissingTimeBoundsError: If neither a positive max_time nor a timeout was set
            BuilderConsumedError: If build() was already called
        """
        self._ensure_assembling()
        if not self._has_max_time() and not self.timeout_set:
            raise MissingTimeBoundsError()

        time_bounds = self.timebounds.normalized() if self.timebounds is not None else None

        with self.source.lock:
            sequence = int(self.source.sequence_number()) + 1
            tx = Transaction(
                source_account=self.source.account_id(),
                fee=self.base_fee * len(self._operations),
                sequence=sequence,
                memo=self.memo,
                time_bounds=time_bounds,
                operations=tuple(self._operations),
                network_passphrase=self.network_passphrase,
            )
            self.source.increment_sequence_number()

        self._built = True
        logger.debug(
            f"Built transaction for {tx.source_account}: seq={tx.sequence}, "
            f"ops={len(tx.operations)}, fee={tx.fee}"
        )
        return tx

    def __repr__(self) -> str:
        return (
            f"TransactionBuilder(source='{self.source.account_id()}', "
            f"operations={len(self._operations)}, built={self._built})"
        )


__all__ = [
    "TransactionBuilder",
]
