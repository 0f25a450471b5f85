"""
Export functionality for enrollment reports.
Renders an EnrollmentReport as console text or JSON.
"""

import json

from .models.report import EnrollmentReport

NO_DATA_MESSAGE = "No enrollment rows found."


def format_late_fraction(report: EnrollmentReport) -> str:
    """
    Format late enrollments as "after / total (pct%)".

    Raises:
        EmptyEnrollmentDataError: If the report has no rows
    """
    return f"{report.fraction} ({report.late_percentage:.2f}%)"


def generate_report_text(report: EnrollmentReport) -> str:
    """
    Generate the plain text report printed by the command line tool.

    Args:
        report: Result of the classification pass

    Returns:
        Multi-line report text
    """
    if report.is_empty:
        return NO_DATA_MESSAGE

    lines = [
        f"Enrollments after the first week of session: {format_late_fraction(report)}",
        "Monthly Enrollment Counts (by Class):",
    ]

    monthly_counts = report.monthly_counts
    if not monthly_counts:
        lines.append("  (none)")
    for key in sorted(monthly_counts):
        classes = ", ".join(
            f"{category}={count}"
            for category, count in sorted(monthly_counts[key].items())
        )
        lines.append(f"  {key}: {classes}")

    lines.append("Overall Monthly Totals:")
    monthly_totals = report.monthly_totals
    if not monthly_totals:
        lines.append("  (none)")
    for key in sorted(monthly_totals):
        lines.append(f"  {key}: {monthly_totals[key]}")

    return "\n".join(lines)


def generate_report_json(report: EnrollmentReport) -> str:
    """Serialize the report to an indented JSON document."""
    return json.dumps(report.to_dict(), indent=2)
