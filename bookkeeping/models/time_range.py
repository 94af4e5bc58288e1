"""
Time Range

The lifetime of an account: a start instant that is always set and an
optional end instant. The range is half-open: the start is contained,
the end (when set) is not.

DESIGN DECISION: All instants are timezone-aware. Naive datetimes are
interpreted as UTC on the way in, so any two instants can be ordered
and compared without raising.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bookkeeping.models.errors import InvalidTimeRangeError


def to_instant(value: datetime) -> datetime:
    """Return value as an aware datetime, treating naive values as UTC."""
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class TimeRange(BaseModel):
    """
    An account's open/close interval.

    Immutable (frozen=True). The set_* methods return a new range.
    """
    model_config = ConfigDict(frozen=True)

    start: datetime = Field(
        ...,
        description="When the range opens (inclusive)"
    )
    end: Optional[datetime] = Field(
        default=None,
        description="When the range closes (exclusive), None if open ended"
    )

    @field_validator('start', 'end')
    @classmethod
    def normalize_instant(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is None:
            return v
        return to_instant(v)

    @model_validator(mode='after')
    def validate_order(self) -> 'TimeRange':
        """End must not be before start."""
        if self.end is not None and self.end < self.start:
            raise InvalidTimeRangeError(start=self.start, end=self.end)
        return self

    @property
    def has_end(self) -> bool:
        return self.end is not None

    def contains(self, instant: datetime) -> bool:
        """True if instant is at or after start and strictly before end."""
        instant = to_instant(instant)
        if instant < self.start:
            return False
        if self.end is not None and not instant < self.end:
            return False
        return True

    def equals(self, other: 'TimeRange') -> bool:
        """True if both ranges start at the same instant and end at the same instant (or both are open)."""
        return self == other

    def set_start(self, instant: datetime) -> 'TimeRange':
        """
        Return a copy of this range starting at instant.

        Raises:
            InvalidTimeRangeError: If the existing end is before instant
        """
        return TimeRange(start=instant, end=self.end)

    def set_end(self, instant: datetime) -> 'TimeRange':
        """
        Return a copy of this range ending at instant.

        Raises:
            InvalidTimeRangeError: If instant is before the start
        """
        return TimeRange(start=self.start, end=instant)
