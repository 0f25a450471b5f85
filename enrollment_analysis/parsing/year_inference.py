"""
Year inference for session months written without a year.
Uses Forward Chronological Year Inference relative to the enrollment date.
"""

from ..logger import setup_logger

logger = setup_logger(__name__)


def infer_session_year(session_month: int, enroll_month: int, enroll_year: int) -> int:
    """
    Infer the year of a session month from the enrollment it was booked with.

    Uses Forward Chronological Year Inference:
    - Enrollments are booked ahead of a session, so if the enrollment month
      is greater than the session month the session must be next year.

    Args:
        session_month: Month number named in the session schedule
        enroll_month: Month number of the enrollment date
        enroll_year: Year of the enrollment date

    Returns:
        Year in which the session month falls

    Examples:
        infer_session_year(1, 12, 2023) -> 2024
        infer_session_year(5, 5, 2024) -> 2024
    """
    year = enroll_year

    # e.g., enrolling in December for a January session means next January
    if enroll_month > session_month:
        year += 1

    logger.debug(f"Inferred year for month {session_month} (enrolled {enroll_month}/{enroll_year}): {year}")
    return year
