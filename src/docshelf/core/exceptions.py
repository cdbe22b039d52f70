"""
Docshelf exception hierarchy.

All docshelf exceptions inherit from DocshelfError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.

Load-time errors (CorpusError and subclasses) are fatal to registry construction.
Request-time errors (UnknownIdError) are reported to the caller and leave the
registry untouched.
"""

from __future__ import annotations

from collections.abc import Iterable


class DocshelfError(Exception):
    """Base exception class for all docshelf errors."""


class ConfigurationError(DocshelfError):
    """Raised for configuration errors (missing keys, invalid values)."""


class FileIOError(DocshelfError):
    """Raised for file I/O errors."""


class CorpusError(DocshelfError):
    """Raised when the document corpus cannot be loaded."""


class MalformedDocumentError(CorpusError):
    """Raised when a raw document has no usable front matter or misses a required field."""

    def __init__(self, reason: str, source: str | None = None):
        self.reason = reason
        self.source = source
        message = f"{source}: {reason}" if source else reason
        super().__init__(message)


class DuplicateIdError(CorpusError):
    """Raised when two corpus entries share an id."""

    def __init__(self, doc_id: str):
        self.doc_id = doc_id
        super().__init__(f"Duplicate document id: {doc_id}")


class UnknownIdError(DocshelfError, KeyError):
    """Raised when one or more requested document ids are not in the registry."""

    def __init__(self, ids: Iterable[str]):
        self.ids = tuple(dict.fromkeys(ids))
        super().__init__(self.ids)

    def __str__(self) -> str:
        return f"Unknown document id(s): {', '.join(self.ids)}"
