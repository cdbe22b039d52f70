"""Documentation index: loader, registry, and keyword search.

Provides immutable document models, a front matter loader, an ordered
registry built once from a corpus, and weighted keyword search with
excerpt extraction.
"""

from .config import SearchConfig
from .corpus import Corpus, directory_corpus, packaged_corpus
from .loader import parse_document, parse_front_matter
from .models import Document, SearchResult
from .registry import DocumentRegistry, build_registry
from .search import DocumentSearcher, search

__all__ = [
    "Corpus",
    "Document",
    "DocumentRegistry",
    "DocumentSearcher",
    "SearchConfig",
    "SearchResult",
    "build_registry",
    "directory_corpus",
    "packaged_corpus",
    "parse_document",
    "parse_front_matter",
    "search",
]
