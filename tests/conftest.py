"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from enrollment_analysis.models import EnrollmentRecord  # noqa: E402
from enrollment_analysis.services import build_session_calendar  # noqa: E402

MAY_EVENING = "May Evening (May 6 13 20 27)"
MAY_WORKSHOP = "May Workshop (May 5 6 7 8)"
MAY_INTRO = "May Intro (May 9)"
JUNE_DAY = "June Day (June 3 10 17 24)"

# 10 rows: 2 ignored sessions, 3 enrollments after the 7-day grace period
SAMPLE_ROWS = [
    ("05/01/2024", MAY_EVENING, "Math"),
    ("05/13/2024", MAY_EVENING, "Math"),
    ("05/14/2024", MAY_EVENING, "Math"),
    ("05/20/2024", MAY_EVENING, "Art"),
    ("05/02/2024", MAY_WORKSHOP, "Art"),
    ("05/03/2024", MAY_INTRO, "Art"),
    ("06/01/2024", JUNE_DAY, "Science"),
    ("06/11/2024", JUNE_DAY, ""),
    ("05/25/2024", JUNE_DAY, "Science"),
    ("", MAY_EVENING, "Math"),
]


def _csv_text(rows, header=("Enroll Date", "Session", "Class")):
    lines = [",".join(header)]
    lines.extend(",".join(row) for row in rows)
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_csv(tmp_path):
    """Write rows to a CSV file in tmp_path and return its path."""
    def _write(rows, header=("Enroll Date", "Session", "Class"), name="enrollments.csv"):
        path = tmp_path / name
        path.write_text(_csv_text(rows, header), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_csv(write_csv):
    """The 10-row sample enrollment export."""
    return write_csv(SAMPLE_ROWS)


@pytest.fixture
def make_record():
    """Create EnrollmentRecords with sequential row numbers."""
    counter = {"row": 0}

    def _make(enroll_date, session, class_category="Unknown"):
        counter["row"] += 1
        return EnrollmentRecord(
            row_number=counter["row"],
            enroll_date=enroll_date,
            session=session,
            class_category=class_category or "Unknown",
        )
    return _make


@pytest.fixture
def sample_records(make_record):
    """SAMPLE_ROWS as EnrollmentRecords."""
    return [make_record(*row) for row in SAMPLE_ROWS]


@pytest.fixture
def sample_calendar(sample_records):
    """Calendar pass over the sample records."""
    return build_session_calendar(sample_records)


@pytest.fixture(autouse=True)
def clear_grace_period_env(monkeypatch):
    """Keep a grace period set in the shell or .env out of the tests."""
    monkeypatch.delenv("ENROLLMENT_GRACE_PERIOD_DAYS", raising=False)
