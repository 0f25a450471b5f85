"""Lenient integer parsing shared by the session and enrollment date parsers."""

import re
from typing import Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(text: str) -> Optional[int]:
    """Parse the base-10 integer at the start of text.

    Surrounding whitespace is skipped and anything after the digits is
    ignored, so schedule tokens like "5th" still count as day numbers.

    Examples:
        parse_leading_int('05') -> 5
        parse_leading_int('12th') -> 12
        parse_leading_int('Mon') -> None
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))
