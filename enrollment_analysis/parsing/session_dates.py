"""
Session date resolver.
Turns schedule tokens into concrete class dates, rejecting schedules that are
too sparse or that describe a single fixed block of consecutive days.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..config import CONSECUTIVE_BLOCK_TOKENS, MIN_SESSION_DAY_TOKENS
from ..logger import setup_logger
from ..models.enrollment import SessionDate
from .session_tokens import SessionDateToken, tokenize_session
from .year_inference import infer_session_year

logger = setup_logger(__name__)


@dataclass(frozen=True)
class SessionResolution:
    """
    Dates resolved from one session string.

    Attributes:
        dates: Class dates in schedule order
        ignored: Whether the session was rejected as ambiguous
        reason: Why the session was ignored, if it was
    """
    dates: tuple[SessionDate, ...] = ()
    ignored: bool = False
    reason: Optional[str] = None


def is_consecutive_block(tokens: Sequence[SessionDateToken]) -> bool:
    """Check for the fixed "<Month> d d+1 d+2 d+3" block pattern.

    Examples:
        'May 5 6 7 8' -> True
        'May 5 6 7 9' -> False
    """
    if len(tokens) != CONSECUTIVE_BLOCK_TOKENS or not tokens[0].is_month:
        return False

    days = tokens[1:]
    if not all(token.is_day for token in days):
        return False

    return all(
        current.value == previous.value + 1
        for previous, current in zip(days, days[1:])
    )


def resolve_session_tokens(
    tokens: Sequence[SessionDateToken],
    enroll_year: int,
    enroll_month: int,
) -> SessionResolution:
    """
    Resolve schedule tokens into class dates.

    Args:
        tokens: Output of tokenize_session()
        enroll_year: Year of the enrollment date
        enroll_month: Month of the enrollment date

    Returns:
        SessionResolution with the resolved dates, or flagged as ignored
    """
    day_count = sum(1 for token in tokens if token.is_day)
    if day_count <= MIN_SESSION_DAY_TOKENS:
        return SessionResolution(ignored=True, reason=f"only {day_count} day tokens")

    if is_consecutive_block(tokens):
        return SessionResolution(ignored=True, reason="fixed consecutive block")

    current_month: Optional[int] = None
    dates = []
    for token in tokens:
        if token.is_month:
            current_month = token.value
        elif token.is_day and current_month is not None:
            year = infer_session_year(current_month, enroll_month, enroll_year)
            dates.append(SessionDate(year, current_month, token.value))

    return SessionResolution(dates=tuple(dates))


def resolve_session_dates(session: str, enroll_year: int, enroll_month: int) -> SessionResolution:
    """
    Parse the "Session" column into class dates.

    A session without a parenthesized schedule yields no dates and is not
    ignored.

    Args:
        session: Raw "Session" column value
        enroll_year: Year of the enrollment date
        enroll_month: Month of the enrollment date

    Returns:
        SessionResolution for the session
    """
    tokens = tokenize_session(session)
    if tokens is None:
        return SessionResolution()

    resolution = resolve_session_tokens(tokens, enroll_year, enroll_month)
    if resolution.ignored:
        logger.debug(f"Ignoring session '{session}': {resolution.reason}")
    return resolution
