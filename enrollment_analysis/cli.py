"""
Command-line interface for enrollment analysis.

Usage:
    python -m enrollment_analysis <path/to/file.csv> [grace_period_days]
"""

import argparse
import os
import sys
from typing import Optional, Sequence

from .config import DEFAULT_GRACE_PERIOD_DAYS, GRACE_PERIOD_ENV_VAR
from .export import generate_report_json, generate_report_text
from .logger import set_package_log_level
from .processor import analyze_enrollment_csv

USAGE = "Usage: enrollment-analysis <path/to/file.csv> [grace_period_days]"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="enrollment-analysis",
        description=(
            "Report the share of class enrollments made after the grace period "
            "following the first class day of their session."
        ),
    )
    parser.add_argument("csv_path", nargs="?", help="Path to the enrollment CSV export")
    parser.add_argument(
        "grace_period",
        nargs="?",
        default=None,
        help="Days after the first class day before an enrollment counts as late "
             f"(default: ${GRACE_PERIOD_ENV_VAR} or {DEFAULT_GRACE_PERIOD_DAYS})",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format (default: %(default)s)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def parse_grace_period(value: Optional[str]) -> Optional[int]:
    """
    Parse the grace period argument.

    Falls back to the ENROLLMENT_GRACE_PERIOD_DAYS environment variable, and
    returns None (the built-in default) when neither is set.

    Raises:
        ValueError: If the value is not a non-negative integer
    """
    if value is None:
        value = os.environ.get(GRACE_PERIOD_ENV_VAR) or None
    if value is None:
        return None
    days = int(value)
    if days < 0:
        raise ValueError(f"grace period must not be negative: {days}")
    return days


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the analysis and print the report to stdout.

    Returns:
        Process exit code: 1 for usage errors, otherwise 0. File read
        errors are not caught.
    """
    args = build_parser().parse_args(argv)

    if not args.csv_path:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        grace_period_days = parse_grace_period(args.grace_period)
    except ValueError as e:
        print(f"Invalid grace period: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    if args.verbose:
        set_package_log_level("DEBUG")

    report = analyze_enrollment_csv(args.csv_path, grace_period_days)

    if args.format == "json":
        print(generate_report_json(report))
    else:
        print(generate_report_text(report))

    return 0


if __name__ == "__main__":
    sys.exit(main())
