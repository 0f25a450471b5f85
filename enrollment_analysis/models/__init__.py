"""
Models package - Data models and type definitions.
"""

from .enrollment import CalendarKey, EnrollDate, EnrollmentRecord, SessionDate
from .calendar import CalendarBuildResult, SessionCalendar
from .report import EnrollmentReport, MonthlyTally

__all__ = [
    'CalendarKey',
    'EnrollDate',
    'EnrollmentRecord',
    'SessionDate',
    'CalendarBuildResult',
    'SessionCalendar',
    'EnrollmentReport',
    'MonthlyTally',
]
