"""
Transaction builder options.

BuilderOptions lists every option TransactionBuilder recognizes, with its
default; unknown keys are rejected. TimeBounds is the validity window of a
transaction in epoch seconds.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Union
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..memo import Memo
from ..runtime.errors import InvalidBuilderOptionsError

# Stroops per operation when no fee is given
BASE_FEE = 100

# Pass to TransactionBuilder.set_timeout() for a transaction valid forever
TIMEOUT_INFINITE = 0

UINT64_MAX = (1 << 64) - 1


def is_valid_date(d: Any) -> bool:
    """Checks whether a provided object is a datetime."""
    return isinstance(d, datetime)


def to_epoch_seconds(value: Union[int, datetime]) -> int:
    """
    Convert a time bound to whole epoch seconds.

    Naive datetimes are taken as UTC.
    """
    if is_valid_date(value):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    return value


class TimeBounds(BaseModel):
    """
    Inclusive validity window of a transaction.

    Bounds are 64-bit unsigned epoch seconds, given as ints, digit strings or
    datetimes. A ``max_time`` of 0 means no upper bound.
    """
    min_time: Union[int, datetime] = Field(
        default=0,
        alias="minTime",
        description="Earliest ledger close time, epoch seconds"
    )
    max_time: Union[int, datetime] = Field(
        default=0,
        alias="maxTime",
        description="Latest ledger close time, epoch seconds (0 = unbounded)"
    )

    model_config = {
        "populate_by_name": True,
        "frozen": True,
        "extra": "forbid",
    }

    @field_validator('min_time', 'max_time', mode='before')
    @classmethod
    def validate_bound(cls, v: Any) -> Union[int, datetime]:
        """Accept datetimes, unsigned 64-bit ints and digit strings."""
        if isinstance(v, datetime):
            seconds = to_epoch_seconds(v)
            if seconds < 0 or seconds > UINT64_MAX:
                raise ValueError(f"time bound must not precede the epoch, got {v.isoformat()}")
            return v
        if isinstance(v, str) and v.isascii() and v.isdigit():
            v = int(v)
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"time bound must be an integer, digit string or datetime, got {type(v).__name__}")
        if v < 0 or v > UINT64_MAX:
            raise ValueError(f"time bound must be an unsigned 64-bit integer, got {v}")
        return v

    def max_time_seconds(self) -> int:
        return to_epoch_seconds(self.max_time)

    def normalized(self) -> TimeBounds:
        """Copy with both bounds as integer epoch seconds."""
        return TimeBounds(
            min_time=to_epoch_seconds(self.min_time),
            max_time=to_epoch_seconds(self.max_time),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        bounds = self.normalized()
        return {"minTime": bounds.min_time, "maxTime": bounds.max_time}


class BuilderOptions(BaseModel):
    """
    Options recognized by TransactionBuilder.
    """
    fee: Optional[int] = Field(
        default=None,
        ge=0,
        description="Max fee per operation in stroops (defaults to BASE_FEE)"
    )
    timebounds: Optional[TimeBounds] = Field(
        default=None,
        alias="timeBounds",
        description="Validity window of the transaction"
    )
    memo: Optional[Memo] = Field(
        default=None,
        description="Transaction memo (defaults to Memo.none())"
    )
    network_passphrase: Optional[str] = Field(
        default=None,
        alias="networkPassphrase",
        description="Network the transaction will be signed for"
    )

    model_config = {
        "populate_by_name": True,
        "extra": "forbid",
    }

    @field_validator('fee', mode='before')
    @classmethod
    def validate_fee(cls, v: Any) -> Optional[int]:
        """Fees are whole stroops; floats and bools are rejected."""
        if v is None:
            return None
        if isinstance(v, str) and v.isascii() and v.isdigit():
            return int(v)
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"fee must be an integer number of stroops, got {type(v).__name__}")
        return v

    @classmethod
    def coerce(cls, options: Union[BuilderOptions, Mapping[str, Any], None]) -> BuilderOptions:
        """
        Build validated options from a BuilderOptions, a mapping or None.

        Raises:
            InvalidBuilderOptionsError: For unknown keys or malformed values
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options.model_copy(deep=True)
        if not isinstance(options, Mapping):
            raise InvalidBuilderOptionsError(
                f"options must be a BuilderOptions or a mapping, got {type(options).__name__}"
            )
        try:
            return cls.model_validate(dict(options))
        except PydanticValidationError as e:
            problems = [
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            ]
            raise InvalidBuilderOptionsError(
                f"Invalid builder options: {'; '.join(problems)}",
                details={"errors": problems},
                cause=e,
            )


__all__ = [
    "BASE_FEE",
    "TIMEOUT_INFINITE",
    "TimeBounds",
    "BuilderOptions",
    "is_valid_date",
    "to_epoch_seconds",
]
