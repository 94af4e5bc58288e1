"""
Account Model

An Account is a named, currency-denominated ledger that exists for a
span of time. It does not hold balances itself; it only knows how to
check whether a given balance belongs inside its lifetime.

DESIGN DECISION: Accounts are built with Account.create(), which folds
a sequence of options over an initial account. Each option takes an
account and returns a new one, or raises. Construction is all or
nothing: the first failing option aborts it, and a final validation
pass guarantees no invalid account is ever handed back.

Lifecycle: Open (no close instant) -> Closed (close instant set).
The only way to close an account is the close_time() option.
There is no way back to Open.
"""

from datetime import datetime
from typing import Callable, Optional, Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from bookkeeping.models.balance import Balance
from bookkeeping.models.currency import CurrencyCode
from bookkeeping.models.errors import (
    DateOutOfAccountTimeRange,
    EmptyNameError,
    FieldError,
)
from bookkeeping.models.time_range import TimeRange


@runtime_checkable
class AccountInterface(Protocol):
    """
    Behavioral contract of an account.

    Serialization and any storage adapter depend on this contract,
    not on the concrete Account layout.
    """

    @property
    def name(self) -> str: ...

    @property
    def currency_code(self) -> CurrencyCode: ...

    @property
    def time_range(self) -> TimeRange: ...

    def validate(self) -> Optional[FieldError]: ...

    def validate_balance(
        self, balance: Balance
    ) -> Optional[Union[FieldError, DateOutOfAccountTimeRange]]: ...

    def equals(self, other: "AccountInterface") -> bool: ...


Option = Callable[["Account"], "Account"]


class Account(BaseModel):
    """
    The concrete account.

    Immutable (frozen=True). Use Account.create() rather than the
    constructor: the constructor does not trim or validate the name.

    Equality compares name and time range only. The currency code is
    NOT part of account equality.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="Account name (trimmed)"
    )
    currency_code: CurrencyCode = Field(
        ...,
        description="Currency the account is denominated in"
    )
    time_range: TimeRange = Field(
        ...,
        description="Lifetime of the account"
    )

    @classmethod
    def create(
        cls,
        name: str,
        currency_code: CurrencyCode,
        opened: datetime,
        *options: Optional[Option],
    ) -> 'Account':
        """
        Create a new account.

        Args:
            name: Account name. Surrounding whitespace is removed.
            currency_code: Currency of the account
            opened: When the account opened
            options: Applied in order. None entries are skipped.

        Raises:
            EmptyNameError: If the trimmed name is empty
            BookkeepingError: Whatever the first failing option raises
            FieldError: If the resulting account fails validation
        """
        trimmed = name.strip()
        if len(trimmed) == 0:
            raise EmptyNameError()

        account = cls(
            name=trimmed,
            currency_code=currency_code,
            time_range=TimeRange(start=opened),
        )
        for option in options:
            if option is None:
                continue
            account = option(account)

        error = account.validate()
        if error is not None:
            raise error
        return account

    @property
    def opened(self) -> datetime:
        return self.time_range.start

    @property
    def closed(self) -> Optional[datetime]:
        """Close instant, or None if the account has not been closed."""
        return self.time_range.end

    def is_open(self) -> bool:
        """
        True if the account has no close instant.

        This is a field presence check only. It does not consider any
        reference time; see open_at() for that.
        """
        return not self.time_range.has_end

    def open_at(self, instant: datetime) -> bool:
        """
        True if the account is open at instant.

        The close instant itself counts as closed, as does any instant
        before the account opened.
        """
        return self.time_range.contains(instant)

    def validate(self) -> Optional[FieldError]:
        """Check the account for structural errors, returning all of them at once."""
        from bookkeeping.validation.validator import validate_account

        return validate_account(self)

    def validate_balance(
        self, balance: Balance
    ) -> Optional[Union[FieldError, DateOutOfAccountTimeRange]]:
        """
        Validate a balance against this account.

        The account is validated first. If it is invalid, that error is
        returned and the balance is not looked at.
        """
        from bookkeeping.validation.validator import validate_balance

        return validate_balance(self, balance)

    def equals(self, other: AccountInterface) -> bool:
        return self.name == other.name and self.time_range.equals(other.time_range)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AccountInterface):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.name, self.time_range))


def close_time(instant: datetime) -> Option:
    """
    Option that closes an account at instant.

    Raises (when applied):
        InvalidTimeRangeError: If instant is before the account opened
    """
    def apply(account: Account) -> Account:
        return account.model_copy(
            update={"time_range": account.time_range.set_end(instant)}
        )
    return apply
