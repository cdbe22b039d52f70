"""
Document registry.

An ordered, read-only snapshot of the corpus built once at startup with
``build_registry()``. Iteration order is corpus ingestion order, which is
also the tie-break order for equal-scoring search results.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from loguru import logger

from docshelf.core.exceptions import DuplicateIdError, UnknownIdError

from .loader import parse_document
from .models import Document


class DocumentRegistry:
    """Immutable id -> Document mapping that remembers insertion order."""

    __slots__ = ("_documents", "_by_id", "_positions")

    def __init__(self, documents: Iterable[Document] = ()):
        ordered = tuple(documents)
        by_id: dict[str, Document] = {}
        for doc in ordered:
            if doc.id in by_id:
                raise DuplicateIdError(doc.id)
            by_id[doc.id] = doc
        self._documents = ordered
        self._by_id = MappingProxyType(by_id)
        self._positions = MappingProxyType({doc.id: i for i, doc in enumerate(ordered)})

    def get(self, doc_id: str) -> Document:
        """Return the document with *doc_id* or raise UnknownIdError."""
        try:
            return self._by_id[doc_id]
        except KeyError:
            raise UnknownIdError([doc_id]) from None

    def get_many(self, doc_ids: Iterable[str]) -> list[Document]:
        """Resolve several ids at once.

        Every unknown id is collected before failing, so the error names all
        of them rather than only the first.
        """
        doc_ids = list(doc_ids)
        unknown = [doc_id for doc_id in doc_ids if doc_id not in self._by_id]
        if unknown:
            raise UnknownIdError(unknown)
        return [self._by_id[doc_id] for doc_id in doc_ids]

    def list(self) -> tuple[Document, ...]:
        return self._documents

    def ids(self) -> tuple[str, ...]:
        return tuple(doc.id for doc in self._documents)

    def position(self, doc_id: str) -> int:
        """Registry (ingestion) index of *doc_id*."""
        try:
            return self._positions[doc_id]
        except KeyError:
            raise UnknownIdError([doc_id]) from None

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._by_id

    def __repr__(self) -> str:
        return f"DocumentRegistry(documents={len(self._documents)})"


def build_registry(raw_documents: Iterable[tuple[str, str]]) -> DocumentRegistry:
    """Parse ``(id, raw text)`` pairs in order and freeze them into a registry.

    The corpus is all-or-nothing: the first malformed entry or repeated id
    aborts the build.

    Raises:
        MalformedDocumentError: An entry failed to parse.
        DuplicateIdError: Two entries share an id.
    """
    documents: list[Document] = []
    seen: set[str] = set()
    for doc_id, raw in raw_documents:
        if doc_id in seen:
            raise DuplicateIdError(doc_id)
        seen.add(doc_id)
        documents.append(parse_document(doc_id, raw))

    registry = DocumentRegistry(documents)
    logger.debug(f"Built document registry with {len(registry)} documents")
    return registry
