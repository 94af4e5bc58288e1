"""
Error Taxonomy for Bookkeeping

Every failure in the package belongs to a small, closed set of kinds.
Each kind is a distinct exception class carrying only the structured
fields needed to diagnose it.

DESIGN DECISION: The message text is NOT part of an error's identity.
Two errors are equal when their kind and fields are equal. The text
returned by str() is looked up from the kind and is purely presentational.

Validation operations return these errors as values (or None).
Construction and queries raise them.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from bookkeeping.models.time_range import TimeRange


class ErrorKind(str, Enum):
    """The closed set of error kinds."""
    EMPTY_NAME = "empty_name"
    FIELD_ERROR = "field_error"
    EMPTY_COLLECTION = "empty_collection"
    NO_QUALIFYING_BALANCE = "no_qualifying_balance"
    DATE_OUT_OF_ACCOUNT_TIME_RANGE = "date_out_of_account_time_range"
    INVALID_TIME_RANGE = "invalid_time_range"
    INVALID_CURRENCY_CODE = "invalid_currency_code"


MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.EMPTY_NAME: "Empty name.",
    ErrorKind.FIELD_ERROR: "FieldError:",
    ErrorKind.EMPTY_COLLECTION: "empty Balances",
    ErrorKind.NO_QUALIFYING_BALANCE: "no Balances",
    ErrorKind.DATE_OUT_OF_ACCOUNT_TIME_RANGE: "Balance Date is outside of Account Time Range.",
    ErrorKind.INVALID_TIME_RANGE: "end of time range is before its start",
    ErrorKind.INVALID_CURRENCY_CODE: "invalid currency code",
}

# Field violation description used inside FieldError
EMPTY_NAME_DESCRIPTION = MESSAGES[ErrorKind.EMPTY_NAME]


class BookkeepingError(Exception):
    """Base exception for every bookkeeping error."""

    kind: ErrorKind

    def _fields(self) -> tuple[Any, ...]:
        return ()

    def __str__(self) -> str:
        return MESSAGES[self.kind]

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self._fields()!r}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BookkeepingError):
            return NotImplemented
        return self.kind == other.kind and self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash((self.kind, self._fields()))

    def to_log_dict(self) -> dict:
        """Structured representation for logging."""
        return {"error_kind": self.kind.value, "error_message": str(self)}


class EmptyNameError(BookkeepingError):
    """Account name is empty after trimming."""
    kind = ErrorKind.EMPTY_NAME


class FieldError(BookkeepingError):
    """
    Aggregate of one or more field violations on an Account.

    Equality is order-sensitive and duplicate descriptions are
    counted individually.
    """
    kind = ErrorKind.FIELD_ERROR

    def __init__(self, descriptions: Iterable[str] = ()):
        self.descriptions = list(descriptions)
        super().__init__(*self.descriptions)

    def _fields(self) -> tuple[Any, ...]:
        return tuple(self.descriptions)

    def __str__(self) -> str:
        return " ".join([MESSAGES[self.kind], *self.descriptions])

    def __len__(self) -> int:
        return len(self.descriptions)

    def equals(self, other: "FieldError") -> bool:
        return self.descriptions == other.descriptions


class EmptyCollectionError(BookkeepingError):
    """Earliest/latest requested from an empty Balances collection."""
    kind = ErrorKind.EMPTY_COLLECTION


class NoQualifyingBalanceError(BookkeepingError):
    """No Balance exists at or before the queried instant."""
    kind = ErrorKind.NO_QUALIFYING_BALANCE

    def __init__(self, at: datetime):
        self.at = at
        super().__init__(at)

    def _fields(self) -> tuple[Any, ...]:
        return (self.at,)


class DateOutOfAccountTimeRange(BookkeepingError):
    """
    A Balance date falls outside the Account's time range.

    Carries both the offending date and the account's range so the
    caller can see exactly where the discrepancy is.
    """
    kind = ErrorKind.DATE_OUT_OF_ACCOUNT_TIME_RANGE

    def __init__(self, balance_date: datetime, account_time_range: "TimeRange"):
        self.balance_date = balance_date
        self.account_time_range = account_time_range
        super().__init__(balance_date, account_time_range)

    def _fields(self) -> tuple[Any, ...]:
        return (self.balance_date, self.account_time_range)

    def to_log_dict(self) -> dict:
        log_dict = super().to_log_dict()
        log_dict["balance_date"] = self.balance_date.isoformat()
        log_dict["account_start"] = self.account_time_range.start.isoformat()
        log_dict["account_end"] = (
            self.account_time_range.end.isoformat()
            if self.account_time_range.end is not None
            else None
        )
        return log_dict


class InvalidTimeRangeError(BookkeepingError):
    """A time range would end before it starts."""
    kind = ErrorKind.INVALID_TIME_RANGE

    def __init__(self, start: datetime, end: datetime):
        self.start = start
        self.end = end
        super().__init__(start, end)

    def _fields(self) -> tuple[Any, ...]:
        return (self.start, self.end)


class InvalidCurrencyCodeError(BookkeepingError):
    """A currency code token could not be parsed."""
    kind = ErrorKind.INVALID_CURRENCY_CODE

    def __init__(self, code: str):
        self.code = code
        super().__init__(code)

    def _fields(self) -> tuple[Any, ...]:
        return (self.code,)

    def __str__(self) -> str:
        return f"{MESSAGES[self.kind]}: {self.code!r}"
