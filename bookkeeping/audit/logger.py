"""
Audit Logger

DESIGN DECISION: Every account opening and balance admission decision
is logged. This provides:
1. Complete traceability
2. Debugging capability
3. The reason behind every refusal

The audit logger is synchronous and writes only to the structured
local log. The bookkeeping core performs no I/O of its own, so there
is no persistent audit store.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

import structlog

from bookkeeping.config import BookkeepingSettings, get_settings
from bookkeeping.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from bookkeeping.models.errors import BookkeepingError


def configure_logging(settings: Optional[BookkeepingSettings] = None) -> None:
    """
    Configure structlog for local logging.

    Uses JSON lines by default, or a console renderer when log_json is off.
    """
    settings = settings or get_settings()

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )

    logging.basicConfig(format="%(message)s", level=settings.log_level)
    logging.getLogger("bookkeeping").setLevel(settings.log_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    Logs every event to the structured local log at the event's severity.
    """

    def __init__(self, enabled: Optional[bool] = None):
        """
        Initialize audit logger.

        Args:
            enabled: Whether to emit events.
                    If None, taken from settings.
        """
        self._enabled = get_settings().audit_enabled if enabled is None else enabled
        self._logger = structlog.get_logger("bookkeeping.audit")

    @property
    def enabled(self) -> bool:
        return self._enabled

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns True if the event was emitted.
        """
        if not self._enabled:
            return False

        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        return True

    def log_account_opened(
        self,
        account_name: str,
        currency: str,
        opened: datetime,
        closed: Optional[datetime],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a successful account construction."""
        self.log(AuditEventBuilder.account_opened(
            account_name=account_name,
            currency=currency,
            opened=opened,
            closed=closed,
            correlation_id=correlation_id,
        ))

    def log_account_creation_failed(
        self,
        account_name: str,
        error: Exception,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a refused account construction."""
        self.log(AuditEventBuilder.account_creation_failed(
            account_name=account_name,
            error=error,
            correlation_id=correlation_id,
        ))

    def log_balance_accepted(
        self,
        account_name: str,
        balance_date: datetime,
        amount: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a balance admitted to a collection."""
        self.log(AuditEventBuilder.balance_accepted(
            account_name=account_name,
            balance_date=balance_date,
            amount=amount,
            correlation_id=correlation_id,
        ))

    def log_balance_rejected(
        self,
        account_name: str,
        balance_date: datetime,
        amount: int,
        error: BookkeepingError,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a balance refused by account validation."""
        self.log(AuditEventBuilder.balance_rejected(
            account_name=account_name,
            balance_date=balance_date,
            amount=amount,
            error=error,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a batch of work (e.g. importing a statement).
    Pass it through all subsequent operations.
    """
    return uuid4()
