"""
Audit Models for Bookkeeping

Every account opening and every balance admission decision is
recorded as an audit event. This provides:
1. Traceability of which balances were admitted to which account
2. The exact reason a balance or account was refused
3. A structured record suitable for logging

DESIGN DECISION: Audit events are append-only values. They are never
modified after creation.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from bookkeeping.models.errors import BookkeepingError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Accounts
    ACCOUNT_OPENED = "account_opened"
    ACCOUNT_CREATION_FAILED = "account_creation_failed"

    # Balances
    BALANCE_ACCEPTED = "balance_accepted"
    BALANCE_REJECTED = "balance_rejected"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Which account this is about
    account_name: Optional[str] = Field(
        default=None,
        description="Name of the account the event relates to"
    )

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g. one import run)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_kind: Optional[str] = None
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "account_name": self.account_name,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_kind": self.error_kind,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.account_opened(name, currency, opened)
        event = AuditEventBuilder.balance_rejected(name, date, amount, error)
    """

    @staticmethod
    def account_opened(
        account_name: str,
        currency: str,
        opened: datetime,
        closed: Optional[datetime] = None,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ACCOUNT_OPENED,
            account_name=account_name,
            correlation_id=correlation_id,
            description=f"Account opened ({currency})",
            details={
                "currency": currency,
                "opened": opened.isoformat(),
                "closed": closed.isoformat() if closed else None,
            },
        )

    @staticmethod
    def account_creation_failed(
        account_name: str,
        error: Exception,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        """
        Build the event for a refused account construction.

        Bookkeeping errors are recorded by kind. Anything else (a pydantic
        ValidationError, an error raised inside an option) is recorded by
        exception class name at ERROR severity.
        """
        if isinstance(error, BookkeepingError):
            error_kind = error.kind.value
            severity = AuditSeverity.WARNING
        else:
            error_kind = type(error).__name__
            severity = AuditSeverity.ERROR

        return AuditEvent(
            event_type=AuditEventType.ACCOUNT_CREATION_FAILED,
            severity=severity,
            account_name=account_name if isinstance(account_name, str) else None,
            correlation_id=correlation_id,
            description=f"Account could not be created: {error_kind}",
            error_kind=error_kind,
            error_message=str(error),
        )

    @staticmethod
    def balance_accepted(
        account_name: str,
        balance_date: datetime,
        amount: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BALANCE_ACCEPTED,
            account_name=account_name,
            correlation_id=correlation_id,
            description=f"Balance admitted for {balance_date.isoformat()}",
            details={
                "balance_date": balance_date.isoformat(),
                "amount": amount,
            },
        )

    @staticmethod
    def balance_rejected(
        account_name: str,
        balance_date: datetime,
        amount: int,
        error: BookkeepingError,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BALANCE_REJECTED,
            severity=AuditSeverity.WARNING,
            account_name=account_name,
            correlation_id=correlation_id,
            description=f"Balance rejected: {error.kind.value}",
            details={
                "balance_date": balance_date.isoformat(),
                "amount": amount,
                **error.to_log_dict(),
            },
            error_kind=error.kind.value,
            error_message=str(error),
        )
