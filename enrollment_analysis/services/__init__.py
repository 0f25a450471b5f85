"""
Services package - the two passes of the enrollment analysis.
"""

from .calendar_service import SessionCalendarBuilder, build_session_calendar
from .classifier_service import Classification, EnrollmentClassifier, classify_enrollments

__all__ = [
    'SessionCalendarBuilder',
    'build_session_calendar',
    'Classification',
    'EnrollmentClassifier',
    'classify_enrollments',
]
