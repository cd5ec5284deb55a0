"""Custom exceptions for paper page generation."""

from pathlib import Path


class PaperPagesError(Exception):
    """Base exception for all generation errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class CatalogueError(PaperPagesError):
    """Raised when the catalogue cannot be read or fails validation.

    Attributes:
        errors: One readable line per validation problem
    """

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)


class OutputWriteError(PaperPagesError):
    """Raised when a generated document cannot be written."""

    def __init__(self, message: str, path: Path | str, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)
