"""Front matter parser and document loader.

A raw document is markdown that opens with a metadata block::

    ---
    title: Getting Started
    summary: "Install and first run"
    ---

    # Body text ...

The block is a flat ``key: value`` list rather than full YAML. Unknown keys
are accepted and ignored; ``title`` and ``summary`` (or ``description``) are
required.
"""

from __future__ import annotations

import re

from loguru import logger

from docshelf.core.exceptions import MalformedDocumentError

from .models import Document

_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)(.*)", re.DOTALL)
_QUOTES = ("'", '"')
_BOM = "\ufeff"

REQUIRED_FIELDS = ("title", "summary")


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1].strip()
    return value


def parse_front_matter(raw: str, source: str | None = None) -> tuple[dict[str, str], str]:
    """Split a raw document into its metadata dict and trimmed body.

    Args:
        raw: Full document text.
        source: Identity used in error messages.

    Returns:
        ``(metadata, body)``. Metadata values are trimmed and unquoted.

    Raises:
        MalformedDocumentError: If the metadata block is absent or unterminated.
    """
    match = _FRONT_MATTER_RE.match((raw or "").removeprefix(_BOM))
    if not match:
        raise MalformedDocumentError("missing or unterminated front matter", source)

    metadata: dict[str, str] = {}
    for line in match.group(1).splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key:
            continue
        metadata[key] = _strip_quotes(value.strip())

    return metadata, match.group(2).strip()


def parse_document(doc_id: str, raw: str, source: str | None = None) -> Document:
    """Parse one raw markdown document into a validated Document.

    ``summary`` falls back to ``description`` when absent.

    Raises:
        MalformedDocumentError: On missing front matter, a missing required
            field, or an empty id.
    """
    source = source or doc_id
    if not doc_id or not doc_id.strip():
        raise MalformedDocumentError("document id is empty", source)

    metadata, body = parse_front_matter(raw, source)
    fields = {
        "title": metadata.get("title", ""),
        "summary": metadata.get("summary") or metadata.get("description", ""),
    }
    missing = [name for name in REQUIRED_FIELDS if not fields[name]]
    if missing:
        raise MalformedDocumentError(f"missing required field(s): {', '.join(missing)}", source)

    extra = sorted(set(metadata) - {"title", "summary", "description"})
    if extra:
        logger.debug(f"{source}: ignoring front matter keys {extra}")

    return Document(id=doc_id.strip(), title=fields["title"], summary=fields["summary"], body=body)
