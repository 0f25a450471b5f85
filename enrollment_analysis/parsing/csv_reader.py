"""
CSV reading module for enrollment exports.
Handles file reading, column checks, and conversion into EnrollmentRecords.
"""

from pathlib import Path
from typing import Iterator

import pandas as pd

from ..config import (
    CSV_ENCODING,
    CSV_SEPARATOR,
    REQUIRED_COLUMNS,
)
from ..exceptions import EnrollmentDataError
from ..logger import setup_logger
from ..models.enrollment import EnrollmentRecord

logger = setup_logger(__name__)


def read_enrollment_csv(filepath: str | Path) -> pd.DataFrame:
    """
    Read an enrollment CSV file with every cell kept as text.

    Args:
        filepath: Path to the CSV file

    Returns:
        DataFrame of raw string cells; empty cells are empty strings

    Raises:
        FileNotFoundError: If CSV file doesn't exist
        EnrollmentDataError: If the file is not readable CSV or lacks a
            required column
    """
    filepath = Path(filepath)

    if not filepath.exists():
        logger.error(f"CSV file not found: {filepath}")
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    logger.info(f"Reading CSV file: {filepath.name}")

    try:
        df = pd.read_csv(
            filepath,
            sep=CSV_SEPARATOR,
            encoding=CSV_ENCODING,
            encoding_errors="replace",
            dtype=str,
            keep_default_na=False,
            # Keep rows with a trailing delimiter aligned with the header
            index_col=False,
        )
    except pd.errors.EmptyDataError:
        # A zero-byte file has no header; treat it as zero rows
        logger.warning(f"CSV file is empty: {filepath.name}")
        return pd.DataFrame(columns=REQUIRED_COLUMNS)
    except pd.errors.ParserError as e:
        logger.error(f"Failed to read CSV: {e}")
        raise EnrollmentDataError(f"Invalid CSV file: {e}") from e

    df.columns = df.columns.str.strip()

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise EnrollmentDataError(f"CSV missing required columns: {missing}")

    # Short rows are padded with NaN even when default NA values are disabled
    df = df.fillna("")

    logger.debug(f"CSV loaded: {len(df)} rows, {len(df.columns)} columns")
    return df


def iter_enrollment_records(df: pd.DataFrame) -> Iterator[EnrollmentRecord]:
    """
    Yield one EnrollmentRecord per DataFrame row, in file order.

    Args:
        df: DataFrame returned by read_enrollment_csv()
    """
    for row_number, row in enumerate(df.to_dict('records'), start=1):
        yield EnrollmentRecord.from_dict(row, row_number=row_number)


def parse_enrollment_csv(filepath: str | Path) -> Iterator[EnrollmentRecord]:
    """
    Read an enrollment CSV file and yield its rows as EnrollmentRecords.

    The file is read in full before the first record is yielded, so a read
    failure surfaces before any row is processed.

    Args:
        filepath: Path to the CSV file

    Returns:
        Iterator over the records in file order
    """
    df = read_enrollment_csv(filepath)
    return iter_enrollment_records(df)
