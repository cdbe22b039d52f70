"""Core data models for the documentation index.

Documents are immutable once constructed; search results are transient
records recomputed per query.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Document:
    """A parsed markdown document with validated front matter.

    Attributes:
        id: Unique identifier assigned by the corpus (file stem).
        title: Human-readable name.
        summary: Short text used in listings and as fallback excerpt.
        body: Markdown body with the front matter removed, trimmed.
    """

    id: str
    title: str
    summary: str
    body: str = ""

    def __post_init__(self):
        for name in ("id", "title", "summary"):
            value = getattr(self, name)
            if not value or not isinstance(value, str):
                raise ValueError(f"Document {name} must be a non-empty string")
        if not isinstance(self.body, str):
            raise ValueError("Document body must be a string")

    @property
    def description(self) -> str:
        return self.summary

    def __repr__(self) -> str:
        return f"Document(id='{self.id}', title='{self.title}')"


@dataclass(frozen=True)
class SearchResult:
    """A document matched by a keyword query.

    Attributes:
        id: Matched document id.
        title: Matched document title.
        summary: Matched document summary.
        excerpt: Body window around the first phrase match, or the summary.
        score: Integer relevance score (higher = more relevant).
    """

    id: str
    title: str
    summary: str
    excerpt: str
    score: int

    def to_record(self) -> dict[str, Any]:
        """Serialize in the shape the search tool returns."""
        return {
            "slug": self.id,
            "title": self.title,
            "description": self.summary,
            "excerpt": self.excerpt,
            "score": self.score,
        }

    def __repr__(self) -> str:
        return f"SearchResult(id='{self.id}', score={self.score})"
