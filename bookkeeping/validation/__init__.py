"""Validation package."""

from bookkeeping.validation.validator import validate_account, validate_balance

__all__ = ["validate_account", "validate_balance"]
