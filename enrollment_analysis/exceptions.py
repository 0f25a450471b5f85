"""
Exception types raised by enrollment analysis.
"""


class EnrollmentAnalysisError(Exception):
    """Base class for all enrollment analysis errors."""


class EnrollmentDataError(EnrollmentAnalysisError, ValueError):
    """The enrollment CSV could not be read or lacks a required column."""


class EmptyEnrollmentDataError(EnrollmentDataError):
    """No enrollment rows were processed, so no percentage can be computed."""
