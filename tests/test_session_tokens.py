"""
Unit tests for the session text tokenizer
"""
import pytest

from enrollment_analysis.parsing.integers import parse_leading_int
from enrollment_analysis.parsing.session_tokens import (
    TokenKind,
    classify_token,
    extract_schedule_fragment,
    tokenize_session,
)


@pytest.mark.unit
class TestExtractScheduleFragment:
    """Test extraction of the parenthesized schedule text."""

    def test_first_parenthesis_pair(self):
        """Test only the first pair is used."""
        assert extract_schedule_fragment("May (May 5 12) (June 2)") == "May 5 12"

    def test_fragment_is_stripped(self):
        """Test surrounding whitespace is removed."""
        assert extract_schedule_fragment("May ( May 5 12 )") == "May 5 12"

    def test_no_parentheses(self):
        """Test sessions without a schedule return None."""
        assert extract_schedule_fragment("May Evening Class") is None

    def test_empty_parentheses_skipped(self):
        """Test an empty pair does not count as a schedule."""
        assert extract_schedule_fragment("May () (May 5 6)") == "May 5 6"


@pytest.mark.unit
class TestClassifyToken:
    """Test token classification."""

    @pytest.mark.parametrize("text,kind,value", [
        ("May", TokenKind.MONTH, 5),
        ("December", TokenKind.MONTH, 12),
        ("12", TokenKind.DAY, 12),
        ("05", TokenKind.DAY, 5),
        ("5th", TokenKind.DAY, 5),
        ("may", TokenKind.UNRECOGNIZED, None),
        ("Sept", TokenKind.UNRECOGNIZED, None),
        ("Mon", TokenKind.UNRECOGNIZED, None),
    ])
    def test_classification(self, text, kind, value):
        """Test month names are case-sensitive and days use leading digits."""
        token = classify_token(text)

        assert token.kind is kind
        assert token.value == value
        assert token.text == text


@pytest.mark.unit
class TestTokenizeSession:
    """Test full session tokenization."""

    def test_splits_on_spaces_and_periods(self):
        """Test runs of spaces and periods separate tokens."""
        tokens = tokenize_session("Summer (June 3.  10..17 July 1)")

        assert [t.text for t in tokens] == ["June", "3", "10", "17", "July", "1"]
        assert [t.kind for t in tokens] == [
            TokenKind.MONTH, TokenKind.DAY, TokenKind.DAY,
            TokenKind.DAY, TokenKind.MONTH, TokenKind.DAY,
        ]

    def test_no_parentheses_yields_no_tokens(self):
        """Test sessions without a schedule fragment produce no token list."""
        assert tokenize_session("May Evening") is None

    def test_blank_fragment_yields_empty_list(self):
        """Test a blank schedule is still a schedule, just without tokens."""
        assert tokenize_session("Blank ( )") == []

    def test_unrecognized_tokens_kept_in_order(self):
        """Test unrecognized tokens are reported but not interpreted."""
        tokens = tokenize_session("(May Mon 6 Wed 8)")

        assert [t.kind for t in tokens] == [
            TokenKind.MONTH, TokenKind.UNRECOGNIZED, TokenKind.DAY,
            TokenKind.UNRECOGNIZED, TokenKind.DAY,
        ]


@pytest.mark.unit
class TestParseLeadingInt:
    """Test lenient integer parsing."""

    @pytest.mark.parametrize("text,expected", [
        ("7", 7),
        (" 07", 7),
        ("2024 ", 2024),
        ("12th", 12),
        ("-3", -3),
        ("", None),
        ("abc", None),
        ("x12", None),
    ])
    def test_values(self, text, expected):
        assert parse_leading_int(text) == expected
