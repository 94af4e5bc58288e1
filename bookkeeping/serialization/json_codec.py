"""
JSON Codec

Round-trips accounts and balances through JSON.

Wire shapes:
    Balance:  {"date": "<RFC 3339>", "amount": <int>}
    Balances: [<Balance>, ...]
    Account:  {"name": str, "currency": "EUR", "opened": "<RFC 3339>",
               "closed": {"valid": bool, "time": "<RFC 3339>" | null}}

DESIGN DECISION: Decoding an account goes through Account.create(),
so a decoded account obeys exactly the same construction rules as one
built in code. Malformed payloads raise pydantic's ValidationError;
payloads that parse but describe an invalid account raise the
matching BookkeepingError.
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field, model_validator

from bookkeeping.config import get_settings
from bookkeeping.models.account import Account, AccountInterface, close_time
from bookkeeping.models.balance import Balance, Balances
from bookkeeping.models.currency import parse_currency_code


class NullTimeRecord(BaseModel):
    """An instant plus a flag saying whether it is set."""

    valid: bool = False
    time: Optional[datetime] = None

    @model_validator(mode='after')
    def validate_presence(self) -> 'NullTimeRecord':
        if self.valid and self.time is None:
            raise ValueError("time is required when valid is true")
        return self


class AccountRecord(BaseModel):
    """Wire representation of an account."""

    name: str
    currency: str = Field(..., description="Currency code token")
    opened: datetime
    closed: NullTimeRecord = Field(default_factory=NullTimeRecord)


def _indent(indent: Optional[int]) -> Optional[int]:
    return get_settings().json_indent if indent is None else indent


def encode_balance(balance: Balance, indent: Optional[int] = None) -> str:
    return balance.model_dump_json(indent=_indent(indent))


def decode_balance(data: Union[str, bytes]) -> Balance:
    return Balance.model_validate_json(data)


def encode_balances(balances: Balances, indent: Optional[int] = None) -> str:
    return balances.model_dump_json(indent=_indent(indent))


def decode_balances(data: Union[str, bytes]) -> Balances:
    return Balances.model_validate_json(data)


def account_to_record(account: AccountInterface) -> AccountRecord:
    end = account.time_range.end
    return AccountRecord(
        name=account.name,
        currency=str(account.currency_code),
        opened=account.time_range.start,
        closed=NullTimeRecord(valid=end is not None, time=end),
    )


def record_to_account(record: AccountRecord) -> Account:
    """
    Rebuild an account from its wire record.

    Raises:
        InvalidCurrencyCodeError: If the currency token is invalid
        EmptyNameError: If the name is empty
        InvalidTimeRangeError: If the account closes before it opens
    """
    currency_code = parse_currency_code(record.currency)
    options = []
    if record.closed.valid:
        options.append(close_time(record.closed.time))
    return Account.create(record.name, currency_code, record.opened, *options)


def encode_account(account: AccountInterface, indent: Optional[int] = None) -> str:
    """Encode any account to a JSON string."""
    return account_to_record(account).model_dump_json(indent=_indent(indent))


def decode_account(data: Union[str, bytes]) -> Account:
    """Decode an account from JSON."""
    return record_to_account(AccountRecord.model_validate_json(data))
