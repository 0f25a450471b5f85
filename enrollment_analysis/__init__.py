"""
Enrollment analysis: share of class enrollments made after the grace period
following the first class day of their session.

Two passes over the same CSV:
1. build_session_calendar() infers class days from the "Session" schedule text
2. classify_enrollments() compares each "Enroll Date" with the first class day
"""

__version__ = "1.0.0"

from .exceptions import EmptyEnrollmentDataError, EnrollmentAnalysisError, EnrollmentDataError
from .models import (
    CalendarBuildResult,
    CalendarKey,
    EnrollmentRecord,
    EnrollmentReport,
    SessionCalendar,
)
from .processor import AnalysisResult, analyze_enrollment_csv, run_analysis
from .services import build_session_calendar, classify_enrollments

__all__ = [
    '__version__',
    'EmptyEnrollmentDataError',
    'EnrollmentAnalysisError',
    'EnrollmentDataError',
    'CalendarBuildResult',
    'CalendarKey',
    'EnrollmentRecord',
    'EnrollmentReport',
    'SessionCalendar',
    'AnalysisResult',
    'analyze_enrollment_csv',
    'run_analysis',
    'build_session_calendar',
    'classify_enrollments',
]
