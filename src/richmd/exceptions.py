"""Custom exceptions for richmd."""


class RichMDError(Exception):
    """Base exception for all richmd errors."""

    pass


class DocumentLoadError(RichMDError):
    """Raised when a rich text document file cannot be read or decoded."""

    pass
