"""
Processor module - orchestrates the two passes over an enrollment CSV.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .logger import setup_logger
from .models.calendar import CalendarBuildResult
from .models.report import EnrollmentReport
from .parsing import parse_enrollment_csv
from .services import build_session_calendar, classify_enrollments

logger = setup_logger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Calendar from the first pass and report from the second."""
    calendar_result: CalendarBuildResult
    report: EnrollmentReport


def run_analysis(filepath: str | Path, grace_period_days: Optional[int] = None) -> AnalysisResult:
    """
    Complete pipeline: build the session calendar, then classify enrollments.

    The file is read once per pass. The calendar pass must finish before
    classification starts since the first class day of a month depends on
    every session in the file.

    Args:
        filepath: Path to the enrollment CSV
        grace_period_days: Days after the first class day before an
            enrollment counts as late (defaults to config)

    Returns:
        AnalysisResult with the calendar and the final report
    """
    logger.info(f"Building session calendar from {filepath}")
    calendar_result = build_session_calendar(parse_enrollment_csv(filepath))

    logger.info(f"Classifying enrollments in {filepath}")
    report = classify_enrollments(parse_enrollment_csv(filepath), calendar_result, grace_period_days)

    return AnalysisResult(calendar_result=calendar_result, report=report)


def analyze_enrollment_csv(filepath: str | Path, grace_period_days: Optional[int] = None) -> EnrollmentReport:
    """Run both passes and return only the enrollment report."""
    return run_analysis(filepath, grace_period_days).report
