"""
Data Models Package

This package contains the value types of the bookkeeping core:
accounts, balances, time ranges, currency codes, and the error
taxonomy shared by all of them.
"""

from bookkeeping.models.errors import (
    BookkeepingError,
    DateOutOfAccountTimeRange,
    EmptyCollectionError,
    EmptyNameError,
    ErrorKind,
    FieldError,
    InvalidCurrencyCodeError,
    InvalidTimeRangeError,
    NoQualifyingBalanceError,
)
from bookkeeping.models.time_range import TimeRange, to_instant
from bookkeeping.models.currency import CurrencyCode, parse_currency_code
from bookkeeping.models.balance import Balance, Balances
from bookkeeping.models.account import Account, AccountInterface, Option, close_time
from bookkeeping.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Errors
    "BookkeepingError",
    "DateOutOfAccountTimeRange",
    "EmptyCollectionError",
    "EmptyNameError",
    "ErrorKind",
    "FieldError",
    "InvalidCurrencyCodeError",
    "InvalidTimeRangeError",
    "NoQualifyingBalanceError",
    # Collaborators
    "CurrencyCode",
    "TimeRange",
    "parse_currency_code",
    "to_instant",
    # Core models
    "Account",
    "AccountInterface",
    "Balance",
    "Balances",
    "Option",
    "close_time",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
