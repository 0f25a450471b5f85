"""
Enrollment date parsing (MM/DD/YYYY).
"""

from typing import Optional

from ..config import ENROLL_DATE_PARTS, ENROLL_DATE_SEPARATOR
from ..models.enrollment import EnrollDate
from .integers import parse_leading_int


def parse_enroll_date(date_str: str) -> Optional[EnrollDate]:
    """
    Parse an "Enroll Date" value written as MM/DD/YYYY.

    Each part is parsed independently so the calendar pass, which needs only
    month and year, can use rows whose day is malformed.

    Args:
        date_str: Raw date text like "05/14/2024"

    Returns:
        EnrollDate, or None when the text does not split into exactly three
        slash-separated parts or the month is not numeric
    """
    parts = date_str.split(ENROLL_DATE_SEPARATOR)
    if len(parts) != ENROLL_DATE_PARTS:
        return None

    month = parse_leading_int(parts[0])
    if month is None:
        return None

    return EnrollDate(
        month=month,
        day=parse_leading_int(parts[1]),
        year=parse_leading_int(parts[2]),
    )
