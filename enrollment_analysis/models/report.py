"""
Classification results: monthly tallies and the final enrollment report.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict

from ..exceptions import EmptyEnrollmentDataError
from .enrollment import CalendarKey


class MonthlyTally:
    """Counts of late enrollments per (year, month), broken down by class category."""

    def __init__(self):
        self._counts: Dict[CalendarKey, Counter] = {}

    def increment(self, key: CalendarKey, class_category: str) -> None:
        self._counts.setdefault(key, Counter())[class_category] += 1

    def by_class(self) -> Dict[CalendarKey, Dict[str, int]]:
        """Per-month class counts, months in first-seen order."""
        return {key: dict(counts) for key, counts in self._counts.items()}

    def monthly_totals(self) -> Dict[CalendarKey, int]:
        """Sum of all class category counts for each month."""
        return {key: sum(counts.values()) for key, counts in self._counts.items()}


@dataclass(frozen=True)
class EnrollmentReport:
    """
    Result of the classification pass.

    Attributes:
        total_rows: Every data row scanned, including skipped rows
        after_grace_period: Rows enrolled after first class day + grace period
        grace_period_days: Grace period used for the threshold
        monthly_counts: Late enrollments per month per class category
        rows_ignored: Rows skipped because their session was ignored
        rows_unclassified: Rows skipped for any other reason
    """
    total_rows: int
    after_grace_period: int
    grace_period_days: int
    monthly_counts: Dict[CalendarKey, Dict[str, int]] = field(default_factory=dict)
    rows_ignored: int = 0
    rows_unclassified: int = 0

    @property
    def is_empty(self) -> bool:
        return self.total_rows == 0

    @property
    def late_percentage(self) -> float:
        """
        Percentage of all rows enrolled after the grace period.

        Raises:
            EmptyEnrollmentDataError: If no rows were processed
        """
        if self.total_rows == 0:
            raise EmptyEnrollmentDataError("No enrollment rows were processed")
        return self.after_grace_period / self.total_rows * 100

    @property
    def monthly_totals(self) -> Dict[CalendarKey, int]:
        return {key: sum(counts.values()) for key, counts in self.monthly_counts.items()}

    @property
    def fraction(self) -> str:
        """Late enrollments as "after / total"."""
        return f"{self.after_grace_period} / {self.total_rows}"

    def to_dict(self) -> dict:
        """Convert report to a JSON-serializable dictionary."""
        return {
            'total_rows': self.total_rows,
            'after_grace_period': self.after_grace_period,
            'grace_period_days': self.grace_period_days,
            'late_percentage': None if self.is_empty else round(self.late_percentage, 2),
            'rows_ignored': self.rows_ignored,
            'rows_unclassified': self.rows_unclassified,
            'monthly_counts': {
                str(key): dict(sorted(self.monthly_counts[key].items()))
                for key in sorted(self.monthly_counts)
            },
            'monthly_totals': {
                str(key): total for key, total in sorted(self.monthly_totals.items())
            },
        }
