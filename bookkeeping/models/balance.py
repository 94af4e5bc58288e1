"""
Balance Models

A Balance is a point-in-time snapshot of an amount held in an account.
Balances are collected into an ordered Balances collection which
answers the deterministic temporal queries: sum, earliest, latest
and balance-as-of-time.

DESIGN DECISION: Amounts are plain signed integers in minor currency
units. There is no rounding or fractional handling in this layer.

TIE-BREAKING (contractual, do not "fix"):
- earliest(): first-seen balance wins among equal earliest dates
- latest() and at_time(): last-seen balance wins among equal dates
Later records for the same date are treated as corrections of
earlier ones, while the first record is the canonical opening snapshot.
"""

from datetime import datetime
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel, StrictInt, field_validator

from bookkeeping.models.errors import EmptyCollectionError, NoQualifyingBalanceError
from bookkeeping.models.time_range import to_instant


class Balance(BaseModel):
    """
    A single (instant, amount) pair.

    Immutable (frozen=True). Equality is structural: two balances are
    equal when their amounts match and their dates are the same instant,
    even if expressed with different UTC offsets.
    """
    model_config = ConfigDict(frozen=True)

    date: datetime = Field(
        ...,
        description="Instant the balance was recorded for"
    )
    amount: StrictInt = Field(
        default=0,
        description="Signed amount in minor currency units"
    )

    @field_validator('date')
    @classmethod
    def normalize_date(cls, v: datetime) -> datetime:
        return to_instant(v)

    @classmethod
    def create(cls, date: datetime, amount: int = 0) -> 'Balance':
        """Create a Balance. Any signed integer amount is valid."""
        return cls(date=date, amount=amount)

    def equals(self, other: 'Balance') -> bool:
        return self.amount == other.amount and self.date == other.date


class Balances(RootModel[list[Balance]]):
    """
    An ordered collection of Balance items.

    Dates need not be unique and insertion order is preserved. Queries
    only look at date ordering, using the tie-break rules above.
    Treat a Balances value as a snapshot: with_balance() returns a new
    collection rather than modifying this one.
    """
    root: list[Balance] = Field(default_factory=list)

    def __iter__(self) -> Iterator[Balance]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Balance:
        return self.root[index]

    def with_balance(self, balance: Balance) -> 'Balances':
        """Return a new collection with balance appended."""
        return Balances([*self.root, balance])

    def sum(self) -> int:
        """Sum of all amounts. An empty collection sums to 0."""
        total = 0
        for b in self.root:
            total += b.amount
        return total

    def earliest(self) -> Balance:
        """
        Balance with the earliest date.

        If several balances share the earliest date, the one encountered
        first is returned.

        Raises:
            EmptyCollectionError: If there are no balances
        """
        if not self.root:
            raise EmptyCollectionError()
        earliest = self.root[0]
        for b in self.root:
            if b.date < earliest.date:
                earliest = b
        return earliest

    def latest(self) -> Balance:
        """
        Balance with the latest date.

        If several balances share the latest date, the one encountered
        last is returned.

        Raises:
            EmptyCollectionError: If there are no balances
        """
        if not self.root:
            raise EmptyCollectionError()
        latest = self.root[0]
        for b in self.root:
            if not latest.date > b.date:
                latest = b
        return latest

    def at_time(self, t: datetime) -> Balance:
        """
        The balance as of instant t.

        Returns the latest balance dated at or before t. Balances after t
        are ignored, even if they are the only ones. Among several balances
        sharing that latest qualifying date, the last encountered wins.

        Raises:
            NoQualifyingBalanceError: If no balance is dated at or before t
        """
        t = to_instant(t)
        at: Optional[Balance] = None
        for b in self.root:
            if b.date > t:
                continue
            if at is None or not at.date > b.date:
                at = b
        if at is None:
            raise NoQualifyingBalanceError(at=t)
        return at
