"""Custom exceptions for G-Dep Tree."""


class GDepError(Exception):
    """Base exception for G-Dep Tree."""


class ReportNotFoundError(GDepError):
    """Raised when a dependency report file cannot be found."""


class ReportReadError(GDepError):
    """Raised when a dependency report stream cannot be read or decoded."""
