"""
Session text tokenizer.
Extracts the parenthesized schedule fragment from a "Session" value and splits
it into month and day tokens.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import MONTH_NUMBERS
from .integers import parse_leading_int

_SCHEDULE_FRAGMENT = re.compile(r"\(([^)]+)\)")
_TOKEN_SEPARATORS = re.compile(r"[ .]+")


class TokenKind(Enum):
    """Session token categories."""
    MONTH = "month"
    DAY = "day"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class SessionDateToken:
    """
    One token of a schedule fragment.

    Attributes:
        text: Token as written
        kind: Month, day or unrecognized
        value: Month number for month tokens, day number for day tokens
    """
    text: str
    kind: TokenKind
    value: Optional[int] = None

    @property
    def is_month(self) -> bool:
        return self.kind is TokenKind.MONTH

    @property
    def is_day(self) -> bool:
        return self.kind is TokenKind.DAY


def extract_schedule_fragment(session: str) -> Optional[str]:
    """Return the stripped text inside the first parenthesis pair, or None.

    Examples:
        'May (May 5 12 19 26)' -> 'May 5 12 19 26'
        'May Evening' -> None
    """
    match = _SCHEDULE_FRAGMENT.search(session)
    if match is None:
        return None
    return match.group(1).strip()


def classify_token(text: str) -> SessionDateToken:
    """Classify a single token as a month name, a day number, or neither.

    Month names match case-sensitively against the full English names.
    """
    month = MONTH_NUMBERS.get(text)
    if month is not None:
        return SessionDateToken(text, TokenKind.MONTH, month)

    day = parse_leading_int(text)
    if day is not None:
        return SessionDateToken(text, TokenKind.DAY, day)

    return SessionDateToken(text, TokenKind.UNRECOGNIZED)


def tokenize_session(session: str) -> Optional[list[SessionDateToken]]:
    """
    Tokenize the schedule fragment of a session string.

    The fragment is split on runs of spaces and periods and empty tokens are
    dropped.

    Args:
        session: Raw "Session" column value

    Returns:
        Tokens in their original order, or None when the session has no
        parenthesized schedule
    """
    fragment = extract_schedule_fragment(session)
    if fragment is None:
        return None
    return tokenize_fragment(fragment)


def tokenize_fragment(fragment: str) -> list[SessionDateToken]:
    """Split a schedule fragment into classified tokens."""
    return [
        classify_token(text)
        for text in _TOKEN_SEPARATORS.split(fragment)
        if text.strip()
    ]
