"""Exception classes for persisted settings documents.

The configuration processor recovers from every one of these. They exist
so that the store can say precisely what went wrong and the processor can
decide how loudly to report it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class DocumentError(Exception):
    """Problem reading or writing a settings document."""

    def __init__(
        self, path: Path, message: str, original_error: Optional[Exception] = None
    ) -> None:
        """Initialize the exception.

        Args:
            path: Document the operation was working on
            message: Human-readable error message
            original_error: The underlying exception, if any
        """
        super().__init__(f"{path}: {message}")
        self.path: Path = path
        self.message: str = message
        self.original_error: Optional[Exception] = original_error


class DocumentUnreadableError(DocumentError):
    """Raised when the document is missing or cannot be parsed."""

    @property
    def is_missing(self) -> bool:
        """True when the file does not exist at all."""
        return isinstance(self.original_error, FileNotFoundError)


class SectionMissingError(DocumentError):
    """Raised when the document has no section with the requested name."""

    def __init__(self, path: Path, section: str) -> None:
        super().__init__(path, f"no section named {section!r}")
        self.section = section


class DocumentWriteError(DocumentError):
    """Raised when the updated document could not be written back."""

    pass
