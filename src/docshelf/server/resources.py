"""
Read-only resources served over the protocol channel.

Two resources are exposed:

    docshelf-docs://docs/topics   markdown index of every document
    docshelf-docs://{slug}        one document, with slug completion
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from docshelf.core.exceptions import UnknownIdError
from docshelf.docs.registry import DocumentRegistry
from docshelf.docs.render import render_document_markdown, render_index_markdown

DOC_URI_PREFIX = "docshelf-docs://"
INDEX_URI = f"{DOC_URI_PREFIX}docs/topics"
MIME_TYPE = "text/markdown"


@dataclass
class Resource:
    """A fixed-URI resource."""

    uri: str
    name: str
    description: str
    read: Callable[[], str]
    mime_type: str = MIME_TYPE


@dataclass
class ResourceTemplate:
    """A ``prefix{slug}`` resource family with slug completion."""

    uri_prefix: str
    name: str
    description: str
    read: Callable[[str], str]
    complete: Callable[[], list[str]] = field(default=list)
    mime_type: str = MIME_TYPE

    @property
    def uri_template(self) -> str:
        return f"{self.uri_prefix}{{slug}}"

    def match(self, uri: str) -> str | None:
        """Return the slug if *uri* belongs to this template."""
        if not uri.startswith(self.uri_prefix):
            return None
        slug = uri[len(self.uri_prefix) :]
        return slug or None

    def completions(self, prefix: str = "") -> list[str]:
        return [value for value in self.complete() if value.startswith(prefix)]


class ResourceCatalog:
    """Resolves resource URIs against one registry.

    Example::

        catalog = ResourceCatalog(registry)
        catalog.read(INDEX_URI)
        catalog.read("docshelf-docs://01-getting-started")
    """

    def __init__(self, registry: DocumentRegistry):
        self.registry = registry
        self.index = Resource(
            uri=INDEX_URI,
            name="Docshelf Topics",
            description="Markdown index of all docshelf documentation slugs.",
            read=lambda: render_index_markdown(registry),
        )
        self.template = ResourceTemplate(
            uri_prefix=DOC_URI_PREFIX,
            name="Docshelf Doc",
            description="Fetch any docshelf doc by slug (see completions for available slugs).",
            read=self.read_document,
            complete=lambda: list(registry.ids()),
        )

    def read_document(self, slug: str) -> str:
        """Rendered markdown for *slug*; raises UnknownIdError."""
        return render_document_markdown(self.registry.get(slug))

    def read(self, uri: str) -> str:
        """Read any served URI.

        Raises:
            UnknownIdError: The URI names a slug that is not in the registry,
                or does not belong to this catalog at all.
        """
        if uri == self.index.uri:
            return self.index.read()
        slug = self.template.match(uri)
        if slug is None:
            raise UnknownIdError([uri])
        return self.template.read(slug)
