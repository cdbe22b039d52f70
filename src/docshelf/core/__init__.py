"""Core infrastructure: configuration, exceptions, logging, and the CLI."""

from .config import Config
from .exceptions import (
    ConfigurationError,
    CorpusError,
    DocshelfError,
    DuplicateIdError,
    FileIOError,
    MalformedDocumentError,
    UnknownIdError,
)

__all__ = [
    "Config",
    "ConfigurationError",
    "CorpusError",
    "DocshelfError",
    "DuplicateIdError",
    "FileIOError",
    "MalformedDocumentError",
    "UnknownIdError",
]
