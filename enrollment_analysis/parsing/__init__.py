"""Parsing package for CSV ingestion, session schedules and date handling."""

from .year_inference import infer_session_year
from .enroll_date import parse_enroll_date
from .session_tokens import SessionDateToken, TokenKind, tokenize_session
from .session_dates import SessionResolution, resolve_session_dates
from .csv_reader import parse_enrollment_csv, read_enrollment_csv
