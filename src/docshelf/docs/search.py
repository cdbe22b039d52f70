"""Weighted keyword search over a DocumentRegistry.

Scoring is substring presence, not word matching: the query ``re`` matches
inside ``results``. Each field is checked once for the whole query (the
"phrase") and once per query term, and presence counts once per check no
matter how often the text repeats.

Example::

    results = search(registry, "install the tool")
    for r in results:
        print(r.score, r.id, r.excerpt)
"""

from __future__ import annotations

from loguru import logger

from .config import SearchConfig
from .models import Document, SearchResult
from .registry import DocumentRegistry


def normalize_query(query: str | None) -> tuple[str, list[str]]:
    """Lowercase and trim *query*; return ``(phrase, terms)``.

    An empty or whitespace-only query gives ``("", [])``.
    """
    phrase = (query or "").lower().strip()
    return phrase, phrase.split()


def score_document(
    document: Document,
    phrase: str,
    terms: list[str],
    config: SearchConfig | None = None,
) -> int:
    """Compute the relevance score of one document for a normalized query."""
    if not phrase:
        return 0
    config = config or SearchConfig()

    title = document.title.lower()
    doc_id = document.id.lower()
    summary = document.summary.lower()
    body = document.body.lower()

    score = 0
    if phrase in title:
        score += config.title_phrase
    if phrase in doc_id:
        score += config.id_phrase
    if phrase in summary:
        score += config.summary_phrase
    if phrase in body:
        score += config.body_phrase

    # Repeated query terms count once per occurrence in the query
    for term in terms:
        if term in title:
            score += config.title_term
        if term in doc_id:
            score += config.id_term
        if term in summary:
            score += config.summary_term
        if term in body:
            score += config.body_term

    return score


def build_excerpt(document: Document, phrase: str, config: SearchConfig | None = None) -> str:
    """Return a body window around the first phrase match, else the summary."""
    config = config or SearchConfig()
    index = document.body.lower().find(phrase) if phrase else -1
    if index == -1:
        return document.summary.strip()

    body = document.body
    start = max(0, index - config.excerpt_lead)
    end = min(len(body), index + config.excerpt_length)
    excerpt = body[start:end]
    if start > 0:
        excerpt = config.ellipsis + excerpt
    if end < len(body):
        excerpt = excerpt + config.ellipsis
    return excerpt.strip()


def search(
    registry: DocumentRegistry,
    query: str,
    config: SearchConfig | None = None,
    limit: int | None = None,
) -> list[SearchResult]:
    """Rank every document in *registry* against *query*.

    Args:
        registry: Documents to search.
        query: Free-text query. Empty matches nothing.
        config: Weights and excerpt window. Defaults to SearchConfig().
        limit: Max results. Defaults to ``config.max_results`` (None = all).

    Returns:
        Results with a positive score, by score descending then registry order.
    """
    config = config or SearchConfig()
    limit = limit if limit is not None else config.max_results
    phrase, terms = normalize_query(query)
    if not phrase:
        return []

    scored: list[tuple[int, int, Document]] = []
    for position, document in enumerate(registry):
        score = score_document(document, phrase, terms, config)
        if score > 0:
            scored.append((score, position, document))

    scored.sort(key=lambda item: (-item[0], item[1]))
    if limit is not None:
        scored = scored[:limit]

    logger.debug(f"search {phrase!r}: {len(scored)} of {len(registry)} documents matched")
    return [
        SearchResult(
            id=document.id,
            title=document.title,
            summary=document.summary,
            excerpt=build_excerpt(document, phrase, config),
            score=score,
        )
        for score, _position, document in scored
    ]


class DocumentSearcher:
    """Keyword searcher bound to one registry and one SearchConfig.

    Example::

        searcher = DocumentSearcher(registry)
        results = searcher.search("layers", top_k=5)
    """

    def __init__(self, registry: DocumentRegistry, config: SearchConfig | None = None):
        self.registry = registry
        self.config = config or SearchConfig()

    @property
    def document_count(self) -> int:
        """Number of documents searched."""
        return len(self.registry)

    def search(self, query: str, top_k: int | None = None) -> list[SearchResult]:
        """Search the registry. See :func:`search`."""
        return search(self.registry, query, self.config, limit=top_k)
