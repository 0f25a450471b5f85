"""
Unit tests for enrollment date parsing and the calendar pass
"""
import pytest

from enrollment_analysis.models import CalendarKey, EnrollDate, SessionCalendar
from enrollment_analysis.parsing import parse_enroll_date
from enrollment_analysis.services import SessionCalendarBuilder, build_session_calendar

from conftest import JUNE_DAY, MAY_EVENING, MAY_INTRO, MAY_WORKSHOP


@pytest.mark.unit
class TestParseEnrollDate:
    """Test parse_enroll_date."""

    def test_valid_date(self):
        assert parse_enroll_date("05/14/2024") == EnrollDate(month=5, day=14, year=2024)

    @pytest.mark.parametrize("date_str", ["2024-05-14", "05/14", "05/14/2024/1", "", "May/14/2024"])
    def test_invalid_dates(self, date_str):
        """Test wrong slash counts and non-numeric months are rejected."""
        assert parse_enroll_date(date_str) is None

    def test_non_numeric_day_kept_as_none(self):
        """Test month and year survive a malformed day."""
        assert parse_enroll_date("05/xx/2024") == EnrollDate(month=5, day=None, year=2024)

    def test_non_numeric_year_kept_as_none(self):
        assert parse_enroll_date("05/14/yyyy") == EnrollDate(month=5, day=14, year=None)


@pytest.mark.unit
class TestSessionCalendar:
    """Test SessionCalendar."""

    def test_first_class_day_is_minimum(self):
        calendar = SessionCalendar()
        for day in (20, 6, 13, 6):
            calendar.add_day(2024, 5, day)

        assert calendar.first_class_day(5, 2024) == 6
        assert calendar.days_for(2024, 5) == frozenset({6, 13, 20})

    def test_first_class_day_missing(self):
        """Test months without recorded days return None rather than 0."""
        calendar = SessionCalendar()
        calendar.add_day(2024, 5, 6)

        assert calendar.first_class_day(6, 2024) is None
        assert calendar.first_class_day(5, 2025) is None

    def test_frozen_calendar_rejects_days(self):
        calendar = SessionCalendar().freeze()

        with pytest.raises(RuntimeError):
            calendar.add_day(2024, 5, 6)

    def test_to_dict(self):
        calendar = SessionCalendar()
        calendar.add_day(2024, 6, 10)
        calendar.add_day(2024, 6, 3)
        calendar.add_day(2024, 5, 6)

        assert calendar.to_dict() == {"2024-5": [6], "2024-6": [3, 10]}


@pytest.mark.unit
class TestBuildSessionCalendar:
    """Test the calendar pass."""

    def test_sample_calendar(self, sample_calendar):
        """Test days and ignored sessions collected from the sample rows."""
        calendar = sample_calendar.calendar

        assert calendar.is_frozen
        assert calendar.keys() == [CalendarKey(2024, 5), CalendarKey(2024, 6)]
        assert calendar.days_for(2024, 5) == frozenset({6, 13, 20, 27})
        assert calendar.days_for(2024, 6) == frozenset({3, 10, 17, 24})
        assert sample_calendar.ignored_sessions == frozenset({MAY_WORKSHOP, MAY_INTRO})
        assert sample_calendar.rows_read == 10
        assert sample_calendar.rows_used == 7

    def test_ignored_session_contributes_no_days(self, make_record):
        """Test the consecutive block does not add May 5-8."""
        result = build_session_calendar([make_record("05/01/2024", MAY_WORKSHOP)])

        assert len(result.calendar) == 0
        assert result.is_ignored(MAY_WORKSHOP)

    def test_session_without_schedule_not_ignored(self, make_record):
        result = build_session_calendar([make_record("05/01/2024", "May Evening")])

        assert len(result.calendar) == 0
        assert result.ignored_sessions == frozenset()

    @pytest.mark.parametrize("enroll_date,session", [
        ("", MAY_EVENING),
        ("05/01/2024", ""),
        ("2024-05-01", MAY_EVENING),
        ("05/01/yyyy", MAY_EVENING),
        ("xx/01/2024", MAY_EVENING),
    ])
    def test_malformed_rows_skipped(self, make_record, enroll_date, session):
        """Test rows with missing fields or bad dates are silently skipped."""
        result = build_session_calendar([make_record(enroll_date, session)])

        assert len(result.calendar) == 0
        assert result.ignored_sessions == frozenset()
        assert result.rows_read == 1

    def test_bad_day_still_builds_calendar(self, make_record):
        """Test only month and year are needed in the calendar pass."""
        result = build_session_calendar([make_record("06/xx/2024", JUNE_DAY)])

        assert result.calendar.first_class_day(6, 2024) == 3

    def test_later_enrollment_rolls_year(self, make_record):
        """Test a December enrollment for a May session lands next year."""
        result = build_session_calendar([make_record("12/01/2024", MAY_EVENING)])

        assert result.calendar.first_class_day(5, 2025) == 6
        assert result.calendar.first_class_day(5, 2024) is None

    def test_builder_cannot_be_reused(self, make_record):
        builder = SessionCalendarBuilder()
        builder.build()

        with pytest.raises(RuntimeError):
            builder.add_record(make_record("05/01/2024", MAY_EVENING))
