"""
Calendar service - first pass over the enrollment data.
Compiles the days of the year(s) on which classes happen.
"""

from typing import Iterable

from ..logger import setup_logger
from ..models.calendar import CalendarBuildResult, SessionCalendar
from ..models.enrollment import EnrollmentRecord
from ..parsing.enroll_date import parse_enroll_date
from ..parsing.session_dates import resolve_session_dates

logger = setup_logger(__name__)


class SessionCalendarBuilder:
    """
    Accumulates session days and ignored sessions one record at a time.

    Each builder is used for a single pass; build() freezes the calendar and
    hands it off, after which the builder must not be fed more records.
    """

    def __init__(self):
        self._calendar = SessionCalendar()
        self._ignored: set[str] = set()
        self._rows_read = 0
        self._rows_used = 0
        self._built = False

    def add_record(self, record: EnrollmentRecord) -> None:
        """
        Record the class days described by one enrollment row.

        Rows missing a date or session, or whose enrollment date does not
        parse to a month and year, are skipped.
        """
        if self._built:
            raise RuntimeError("Calendar has already been built")

        self._rows_read += 1

        if not record.has_required_fields:
            logger.debug(f"Row {record.row_number}: missing enroll date or session")
            return

        enroll_date = parse_enroll_date(record.enroll_date)
        if enroll_date is None or enroll_date.year is None:
            logger.debug(f"Row {record.row_number}: unparseable enroll date '{record.enroll_date}'")
            return

        resolution = resolve_session_dates(record.session, enroll_date.year, enroll_date.month)
        if resolution.ignored:
            self._ignored.add(record.session)
            return

        if resolution.dates:
            self._calendar.add_dates(resolution.dates)
            self._rows_used += 1

    def add_records(self, records: Iterable[EnrollmentRecord]) -> 'SessionCalendarBuilder':
        for record in records:
            self.add_record(record)
        return self

    def build(self) -> CalendarBuildResult:
        """Freeze the calendar and return it with the ignored sessions."""
        self._built = True
        result = CalendarBuildResult(
            calendar=self._calendar.freeze(),
            ignored_sessions=frozenset(self._ignored),
            rows_read=self._rows_read,
            rows_used=self._rows_used,
        )
        logger.info(
            f"Session calendar: {len(result.calendar)} months from "
            f"{result.rows_used}/{result.rows_read} rows, "
            f"{len(result.ignored_sessions)} sessions ignored"
        )
        logger.debug(f"Session days: {result.calendar.to_dict()}")
        return result


def build_session_calendar(records: Iterable[EnrollmentRecord]) -> CalendarBuildResult:
    """
    Run the calendar pass over every record.

    Args:
        records: Enrollment records in file order

    Returns:
        Frozen calendar and the set of ignored session strings
    """
    return SessionCalendarBuilder().add_records(records).build()
