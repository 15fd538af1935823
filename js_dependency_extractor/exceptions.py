"""Custom exceptions for js-dependency-extractor."""

from __future__ import annotations


class ExtractionError(Exception):
    """Raised when dependencies cannot be extracted from a path.

    *cause* is the underlying error (missing file, permission denied,
    not a directory, ...). It is also chained as ``__cause__`` when the
    error is raised with ``raise ... from``.
    """

    code = "dependency-extraction-error"

    def __init__(self, message: str, cause: BaseException | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)
