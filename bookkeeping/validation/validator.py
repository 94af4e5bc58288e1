"""
Two-Stage Account Validation

DESIGN DECISION: Validating a balance against an account happens in
two distinct stages:

STAGE 1 - ACCOUNT VALIDATION:
- Structural checks on the account itself (non-empty name)
- ALL violations are collected into one FieldError so the caller
  sees every problem in a single pass

STAGE 2 - BALANCE VALIDATION:
- The balance date must fall inside the account's time range
- A balance dated exactly at the close instant is always accepted,
  even though the range itself excludes its end

Stage 2 is skipped entirely if stage 1 fails.

IMPORTANT: Validation NEVER raises and NEVER fixes anything.
Errors are returned as values for the caller to inspect.
"""

from typing import TYPE_CHECKING, Optional, Union

import structlog

from bookkeeping.models.balance import Balance
from bookkeeping.models.errors import (
    EMPTY_NAME_DESCRIPTION,
    DateOutOfAccountTimeRange,
    FieldError,
)

if TYPE_CHECKING:
    from bookkeeping.models.account import AccountInterface


logger = structlog.get_logger(__name__)


def validate_account(account: "AccountInterface") -> Optional[FieldError]:
    """
    Stage 1: structural validation of an account.

    Returns a FieldError aggregating every violation, or None if the
    account is valid.
    """
    descriptions = []

    if len(account.name.strip()) == 0:
        descriptions.append(EMPTY_NAME_DESCRIPTION)

    if descriptions:
        logger.debug(
            "account_validation_failed",
            account_name=account.name,
            violations=descriptions,
        )
        return FieldError(descriptions)
    return None


def validate_balance(
    account: "AccountInterface",
    balance: Balance,
) -> Optional[Union[FieldError, DateOutOfAccountTimeRange]]:
    """
    Stage 1 + Stage 2: validate a balance against an account.

    Returns:
        The account's FieldError if the account itself is invalid,
        DateOutOfAccountTimeRange if the balance date is not acceptable,
        None otherwise.
    """
    account_error = validate_account(account)
    if account_error is not None:
        return account_error

    time_range = account.time_range
    if time_range.contains(balance.date):
        return None
    if time_range.end is not None and time_range.end == balance.date:
        return None

    logger.debug(
        "balance_date_out_of_range",
        account_name=account.name,
        balance_date=balance.date.isoformat(),
        account_start=time_range.start.isoformat(),
        account_end=time_range.end.isoformat() if time_range.end is not None else None,
    )
    return DateOutOfAccountTimeRange(
        balance_date=balance.date,
        account_time_range=time_range,
    )
