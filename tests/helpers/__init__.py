from .factories import (
    ACCOUNT_ID,
    ISSUER_ID,
    ZERO_ACCOUNT_ID,
    ONES_ACCOUNT_ID,
    ZERO_SECRET_SEED,
    FIXED_NOW,
    mk_account,
    mk_keypair,
    mk_operation,
    mk_builder,
)

__all__ = [
    "ACCOUNT_ID",
    "ISSUER_ID",
    "ZERO_ACCOUNT_ID",
    "ONES_ACCOUNT_ID",
    "ZERO_SECRET_SEED",
    "FIXED_NOW",
    "mk_account",
    "mk_keypair",
    "mk_operation",
    "mk_builder",
]
