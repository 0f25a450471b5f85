"""
Classifier service - second pass over the enrollment data.
Counts enrollments made after the first week (grace period) of their session.
"""

from enum import Enum
from typing import Iterable, Optional

from ..config import DEFAULT_GRACE_PERIOD_DAYS, MONTH_NAMES
from ..logger import setup_logger
from ..models.calendar import CalendarBuildResult
from ..models.enrollment import CalendarKey, EnrollmentRecord
from ..models.report import EnrollmentReport, MonthlyTally
from ..parsing.enroll_date import parse_enroll_date
from ..parsing.year_inference import infer_session_year

logger = setup_logger(__name__)


class Classification(Enum):
    """Outcome of classifying one enrollment row."""
    LATE = "late"
    ON_TIME = "on_time"
    IGNORED_SESSION = "ignored_session"
    MISSING_FIELDS = "missing_fields"
    INVALID_DATE = "invalid_date"
    MONTH_MISMATCH = "month_mismatch"
    NO_CALENDAR_DATA = "no_calendar_data"


def is_after_grace_period(enroll_day: int, first_class_day: int, grace_period_days: int) -> bool:
    """Whether an enrollment day falls strictly after first class day + grace period.

    Examples:
        is_after_grace_period(10, 3, 7) -> False
        is_after_grace_period(11, 3, 7) -> True
    """
    return enroll_day > first_class_day + grace_period_days


def session_matches_month(session: str, month: int) -> bool:
    """Check if the session title starts with the month name (case-insensitive)."""
    return session.lower().startswith(MONTH_NAMES[month - 1].lower())


class EnrollmentClassifier:
    """
    Classifies enrollment rows against a finished session calendar.

    Counters and the monthly tally live on the instance, so each pass uses
    its own classifier.
    """

    def __init__(
        self,
        calendar_result: CalendarBuildResult,
        grace_period_days: Optional[int] = None,
    ):
        if grace_period_days is None:
            grace_period_days = DEFAULT_GRACE_PERIOD_DAYS
        if grace_period_days < 0:
            raise ValueError("Grace period must not be negative")

        self.calendar_result = calendar_result
        self.grace_period_days = grace_period_days
        self._total_rows = 0
        self._after_grace_period = 0
        self._tally = MonthlyTally()
        self._outcomes: dict[Classification, int] = {}

    def classify(self, record: EnrollmentRecord) -> Classification:
        """
        Classify a single row and update the counters.

        Every row counts towards the total, including rows that are skipped.
        """
        self._total_rows += 1
        outcome = self._classify(record)
        self._outcomes[outcome] = self._outcomes.get(outcome, 0) + 1
        return outcome

    def _classify(self, record: EnrollmentRecord) -> Classification:
        if self.calendar_result.is_ignored(record.session):
            return Classification.IGNORED_SESSION

        if not record.has_required_fields:
            return Classification.MISSING_FIELDS

        enroll_date = parse_enroll_date(record.enroll_date)
        if (
            enroll_date is None
            or enroll_date.day is None
            or enroll_date.year is None
            or not 1 <= enroll_date.month <= 12
        ):
            logger.debug(f"Row {record.row_number}: unparseable enroll date '{record.enroll_date}'")
            return Classification.INVALID_DATE

        month = enroll_date.month
        if not session_matches_month(record.session, month):
            return Classification.MONTH_MISMATCH

        # The prefix check above ties the session month to the enrollment month
        year = infer_session_year(month, month, enroll_date.year)

        first_class_day = self.calendar_result.calendar.first_class_day(month, year)
        if first_class_day is None:
            logger.debug(f"Row {record.row_number}: no class days recorded for {year}-{month}")
            return Classification.NO_CALENDAR_DATA

        if not is_after_grace_period(enroll_date.day, first_class_day, self.grace_period_days):
            return Classification.ON_TIME

        self._after_grace_period += 1
        self._tally.increment(CalendarKey(year, month), record.class_category)
        return Classification.LATE

    def classify_all(self, records: Iterable[EnrollmentRecord]) -> 'EnrollmentClassifier':
        for record in records:
            self.classify(record)
        return self

    def outcome_count(self, outcome: Classification) -> int:
        return self._outcomes.get(outcome, 0)

    def report(self) -> EnrollmentReport:
        """Summarize the rows classified so far."""
        counted = self.outcome_count(Classification.LATE) + self.outcome_count(Classification.ON_TIME)
        ignored = self.outcome_count(Classification.IGNORED_SESSION)
        report = EnrollmentReport(
            total_rows=self._total_rows,
            after_grace_period=self._after_grace_period,
            grace_period_days=self.grace_period_days,
            monthly_counts=self._tally.by_class(),
            rows_ignored=ignored,
            rows_unclassified=self._total_rows - counted - ignored,
        )
        logger.info(
            f"Classified {counted}/{report.total_rows} rows: "
            f"{report.after_grace_period} after {self.grace_period_days}-day grace period"
        )
        return report


def classify_enrollments(
    records: Iterable[EnrollmentRecord],
    calendar_result: CalendarBuildResult,
    grace_period_days: Optional[int] = None,
) -> EnrollmentReport:
    """
    Run the classification pass over every record.

    Args:
        records: Enrollment records in file order
        calendar_result: Output of the calendar pass
        grace_period_days: Days after the first class day before an
            enrollment counts as late (defaults to config)

    Returns:
        EnrollmentReport with totals and monthly tallies
    """
    return EnrollmentClassifier(calendar_result, grace_period_days).classify_all(records).report()
