"""
Enrollment data models and type definitions.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional

from ..config import (
    CLASS_COLUMN,
    ENROLL_DATE_COLUMN,
    SESSION_COLUMN,
    UNKNOWN_CLASS_CATEGORY,
)


class CalendarKey(NamedTuple):
    """Identifies the month containing a session: (year, month)."""
    year: int
    month: int

    def __str__(self) -> str:
        return f"{self.year}-{self.month}"


@dataclass(frozen=True)
class SessionDate:
    """A single class day resolved from a session schedule fragment."""
    year: int
    month: int
    day: int


@dataclass(frozen=True)
class EnrollDate:
    """
    Parsed MM/DD/YYYY enrollment date.

    Attributes:
        month: Month number as written (not range checked)
        day: Day number, or None when the day part is not numeric
        year: Four digit year, or None when the year part is not numeric
    """
    month: int
    day: Optional[int]
    year: Optional[int]


@dataclass(frozen=True)
class EnrollmentRecord:
    """
    Represents a single row of the enrollment CSV.

    Attributes:
        row_number: 1-based data row index in the source file
        enroll_date: Raw "Enroll Date" text (MM/DD/YYYY)
        session: Raw "Session" text with a parenthesized schedule fragment
        class_category: "Class" value, "Unknown" when absent or empty
    """
    row_number: int
    enroll_date: str
    session: str
    class_category: str = UNKNOWN_CLASS_CATEGORY

    @property
    def has_required_fields(self) -> bool:
        """Whether both the enrollment date and the session text are present."""
        return bool(self.enroll_date) and bool(self.session)

    @classmethod
    def from_dict(cls, data: dict, row_number: int = 0) -> 'EnrollmentRecord':
        """Create an EnrollmentRecord from a CSV row mapping."""
        return cls(
            row_number=row_number,
            enroll_date=data.get(ENROLL_DATE_COLUMN) or "",
            session=data.get(SESSION_COLUMN) or "",
            class_category=data.get(CLASS_COLUMN) or UNKNOWN_CLASS_CATEGORY,
        )
