"""
Serialization Package

JSON encoding and decoding of accounts and balances.
"""

from bookkeeping.serialization.json_codec import (
    AccountRecord,
    NullTimeRecord,
    decode_account,
    decode_balance,
    decode_balances,
    encode_account,
    encode_balance,
    encode_balances,
)

__all__ = [
    "AccountRecord",
    "NullTimeRecord",
    "decode_account",
    "decode_balance",
    "decode_balances",
    "encode_account",
    "encode_balance",
    "encode_balances",
]
