"""
Balance Admission Orchestrator

Ties accounts, balances and the audit trail together into the one
flow the bookkeeping core supports:

1. Open an account (name, currency, opening instant, options)
2. For each candidate balance: validate it against the account
3. Admit it into a Balances collection only if validation passed

DESIGN DECISION: The orchestrator enforces the boundaries:
- No balance enters a collection without being validated first
- Every decision is audited
- Failures are re-raised unchanged after being audited

The account never owns the collection. The caller keeps the Balances
value and passes it back in for each admission.
"""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from bookkeeping.audit import AuditLogger
from bookkeeping.models.account import Account, AccountInterface, Option
from bookkeeping.models.balance import Balance, Balances
from bookkeeping.models.currency import CurrencyCode, parse_currency_code


class BalanceAdmissionFlow:
    """
    Orchestrates account opening and balance admission.

    Flow:
    1. open_account → build and validate an Account
    2. admit → validate a Balance against the Account, then append it
    """

    def __init__(
        self,
        audit_logger: Optional[AuditLogger] = None,
        correlation_id: Optional[UUID] = None,
    ):
        self._audit_logger = audit_logger or AuditLogger()
        self._correlation_id = correlation_id

    def open_account(
        self,
        name: str,
        currency: Union[CurrencyCode, str],
        opened: datetime,
        *options: Optional[Option],
    ) -> Account:
        """
        Open a new account.

        The currency may be given as a CurrencyCode or as its string token.

        Every failure is audited before it is re-raised, including ones
        that are not BookkeepingErrors (malformed input, failing options).

        Raises:
            BookkeepingError: If the currency token or any account field is invalid
            ValidationError: If opened is not a datetime
        """
        try:
            currency_code = (
                currency
                if isinstance(currency, CurrencyCode)
                else parse_currency_code(currency)
            )
            account = Account.create(name, currency_code, opened, *options)
        except Exception as e:
            self._audit_logger.log_account_creation_failed(
                account_name=name,
                error=e,
                correlation_id=self._correlation_id,
            )
            raise

        self._audit_logger.log_account_opened(
            account_name=account.name,
            currency=str(account.currency_code),
            opened=account.opened,
            closed=account.closed,
            correlation_id=self._correlation_id,
        )
        return account

    def admit(
        self,
        account: AccountInterface,
        balances: Balances,
        balance: Balance,
    ) -> Balances:
        """
        Validate a balance against an account and append it.

        Returns a new Balances collection; the one passed in is untouched.

        Raises:
            FieldError: If the account itself is invalid
            DateOutOfAccountTimeRange: If the balance falls outside the account's lifetime
        """
        error = account.validate_balance(balance)
        if error is not None:
            self._audit_logger.log_balance_rejected(
                account_name=account.name,
                balance_date=balance.date,
                amount=balance.amount,
                error=error,
                correlation_id=self._correlation_id,
            )
            raise error

        self._audit_logger.log_balance_accepted(
            account_name=account.name,
            balance_date=balance.date,
            amount=balance.amount,
            correlation_id=self._correlation_id,
        )
        return balances.with_balance(balance)
