"""
Common Value Objects

- DateRange: a stay from check-in (inclusive) to check-out (exclusive)
"""

from dataclasses import dataclass
from datetime import date

from shared.domain.base import ValueObject


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a range from start_date (inclusive) to end_date (exclusive).
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.start_date >= self.end_date:
            raise ValueError(f"Start date ({self.start_date}) must be before end date ({self.end_date})")

    def __len__(self) -> int:
        """Number of nights in the stay"""
        return (self.end_date - self.start_date).days

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
