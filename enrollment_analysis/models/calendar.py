"""
Session calendar: the distinct class days observed per (year, month).
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Optional, Set

from .enrollment import CalendarKey, SessionDate


class SessionCalendar:
    """
    Mapping from CalendarKey to the set of days on which a class occurs.

    Days are added while the calendar is being built. Once freeze() is
    called the calendar is read-only and add_day() raises RuntimeError.
    """

    def __init__(self):
        self._days: Dict[CalendarKey, Set[int]] = {}
        self._frozen = False

    def add_day(self, year: int, month: int, day: int) -> None:
        """Record a class on the given day."""
        if self._frozen:
            raise RuntimeError("SessionCalendar is frozen")
        self._days.setdefault(CalendarKey(year, month), set()).add(day)

    def add_dates(self, dates: Iterable[SessionDate]) -> None:
        for date in dates:
            self.add_day(date.year, date.month, date.day)

    def first_class_day(self, month: int, year: int) -> Optional[int]:
        """
        Get the first day of a month on which classes start.

        Args:
            month: Month number (1-12)
            year: Four digit year

        Returns:
            Smallest recorded day, or None when nothing is recorded for the month
        """
        days = self.days_for(year, month)
        if not days:
            return None
        return min(days)

    def days_for(self, year: int, month: int) -> FrozenSet[int]:
        return frozenset(self._days.get(CalendarKey(year, month), ()))

    def freeze(self) -> 'SessionCalendar':
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def keys(self) -> list[CalendarKey]:
        return sorted(self._days)

    def __len__(self) -> int:
        return len(self._days)

    def to_dict(self) -> dict:
        """Convert calendar to {"year-month": [sorted days]}."""
        return {str(key): sorted(self._days[key]) for key in self.keys()}


@dataclass(frozen=True)
class CalendarBuildResult:
    """
    Output of the calendar-building pass.

    Attributes:
        calendar: Frozen session calendar
        ignored_sessions: Raw session strings excluded from classification
        rows_read: Number of rows scanned
        rows_used: Number of rows that contributed at least one class day
    """
    calendar: SessionCalendar
    ignored_sessions: FrozenSet[str] = field(default_factory=frozenset)
    rows_read: int = 0
    rows_used: int = 0

    def is_ignored(self, session: str) -> bool:
        """Check if a session string has been marked as one to ignore."""
        return session in self.ignored_sessions
