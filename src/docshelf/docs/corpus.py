"""
Corpus sources.

A corpus directory holds an ``entry.md`` overview plus one markdown file per
topic under ``topics/``::

    resources/
        entry.md
        topics/
            01-getting-started.md
            02-configuration.md

Topic ids are file stems and ingestion order is sorted file-name order.
The bundled corpus ships as package data; ``directory_corpus()`` reads the
same layout from disk.
"""

from __future__ import annotations

from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path

from loguru import logger

from docshelf.core.exceptions import ConfigurationError, FileIOError
from docshelf.core.types import PathLike, RawCorpus

from .registry import DocumentRegistry, build_registry

ENTRY_FILE = "entry.md"
TOPICS_DIR = "topics"
TOPIC_SUFFIX = ".md"


class Corpus:
    """Reads raw documents from a corpus root (package resources or a Path)."""

    def __init__(self, root: Traversable, name: str | None = None):
        self.root = root
        self.name = name or str(root)

    def _read(self, item: Traversable) -> str:
        try:
            return item.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise FileIOError(f"Could not read {item.name} from corpus {self.name}: {e}") from e

    def entry(self) -> str:
        """Return the overview document, or an empty string if there is none."""
        entry = self.root.joinpath(ENTRY_FILE)
        if not entry.is_file():
            return ""
        return self._read(entry).strip()

    def raw_documents(self) -> RawCorpus:
        """Return ``(id, raw text)`` pairs in ingestion order."""
        topics_dir = self.root.joinpath(TOPICS_DIR)
        if not topics_dir.is_dir():
            raise ConfigurationError(f"Corpus {self.name} has no '{TOPICS_DIR}' directory")

        items = sorted(
            (item for item in topics_dir.iterdir() if item.is_file() and item.name.endswith(TOPIC_SUFFIX)),
            key=lambda item: item.name,
        )
        raw = [(item.name[: -len(TOPIC_SUFFIX)], self._read(item)) for item in items]
        logger.debug(f"Read {len(raw)} topic files from corpus {self.name}")
        return raw

    def build(self) -> DocumentRegistry:
        """Load and validate every topic. Any failure aborts the whole build."""
        return build_registry(self.raw_documents())


def packaged_corpus() -> Corpus:
    """The corpus bundled with the package."""
    return Corpus(files("docshelf.docs").joinpath("resources"), name="docshelf (bundled)")


def directory_corpus(path: PathLike) -> Corpus:
    """A corpus read from a directory on disk."""
    root = Path(path).expanduser()
    if not root.is_dir():
        raise ConfigurationError(f"Corpus directory not found: {root}")
    return Corpus(root, name=str(root))
