"""Plain-text and markdown renderers for listings and lookups."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Document, SearchResult
from .registry import DocumentRegistry

INDEX_TITLE = "Docshelf Documentation Index"
TOPIC_SEPARATOR = "\n\n---\n\n"


def _table(headers: tuple[str, ...], rows: list[tuple[str, ...]]) -> str:
    """Left-aligned columns; the last column is never padded."""
    widths = [max([len(h)] + [len(row[i]) for row in rows]) for i, h in enumerate(headers[:-1])]

    def fmt(row: tuple[str, ...]) -> str:
        cells = [cell.ljust(width) for cell, width in zip(row[:-1], widths)]
        return "  ".join(cells + [row[-1]])

    separator = tuple("-" * w for w in widths) + ("-" * 20,)
    lines = [fmt(headers), "  ".join(separator)] + [fmt(row) for row in rows]
    return "\n".join(lines) + "\n"


def render_topic_list(registry: DocumentRegistry) -> str:
    """ID / Title / Summary table in registry order."""
    rows = [(doc.id, doc.title, doc.summary) for doc in registry.list()]
    return _table(("ID", "Title", "Summary"), rows)


def render_index_markdown(registry: DocumentRegistry) -> str:
    lines = [f"# {INDEX_TITLE}", ""]
    lines += [f"- **{doc.id}**: {doc.title} - {doc.summary}" for doc in registry.list()]
    return "\n".join(lines)


def render_document_markdown(document: Document) -> str:
    return f"# {document.title} ({document.id})\n\n{document.body}".rstrip()


def render_topics(registry: DocumentRegistry, requested: Iterable[str]) -> str:
    """Render one ``## title (id)`` block per requested id.

    Ids are trimmed, blanks dropped and duplicates shown once.

    Raises:
        ValueError: No ids left after trimming.
        UnknownIdError: Names every id not in the registry.
    """
    ids = [doc_id.strip() for doc_id in requested if doc_id and doc_id.strip()]
    if not ids:
        raise ValueError("Please provide at least one topic id.")

    documents = registry.get_many(dict.fromkeys(ids))
    blocks = []
    for doc in documents:
        header = f"## {doc.title} ({doc.id})"
        blocks.append(f"{header}\n\n{doc.body}" if doc.body else header)
    return TOPIC_SEPARATOR.join(blocks) + "\n"


def render_search_results(results: list[SearchResult]) -> str:
    """Score / ID / Title table followed by each excerpt."""
    if not results:
        return "No matching topics.\n"
    rows = [(str(r.score), r.id, r.title) for r in results]
    table = _table(("Score", "ID", "Title"), rows)
    excerpts = "\n".join(f"[{r.id}] {r.excerpt}" for r in results)
    return f"{table}\n{excerpts}\n"
