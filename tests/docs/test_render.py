"""Tests for docshelf.docs.render."""

import pytest

from docshelf.core.exceptions import UnknownIdError
from docshelf.docs.models import Document, SearchResult
from docshelf.docs.render import (
    render_document_markdown,
    render_index_markdown,
    render_search_results,
    render_topic_list,
    render_topics,
)


class TestTopicList:
    def test_table_layout(self, registry):
        lines = render_topic_list(registry).splitlines()
        assert lines[0].split() == ["ID", "Title", "Summary"]
        assert set(lines[1].replace(" ", "")) == {"-"}
        assert lines[2].startswith("intro   Getting Started      Basics")

    def test_registry_order(self, registry):
        lines = render_topic_list(registry).splitlines()[2:]
        assert [line.split()[0] for line in lines] == ["intro", "faq", "layers"]

    def test_columns_aligned(self, registry):
        lines = render_topic_list(registry).splitlines()
        title_col = lines[0].index("Title")
        assert all(line[title_col - 2 : title_col] == "  " for line in lines)


class TestIndexMarkdown:
    def test_lists_every_doc(self, registry):
        text = render_index_markdown(registry)
        assert text.splitlines()[0].startswith("# ")
        assert "- **intro**: Getting Started - Basics" in text
        assert text.index("**faq**") < text.index("**layers**")


class TestDocumentMarkdown:
    def test_format(self):
        doc = Document(id="intro", title="Getting Started", summary="Basics", body="Body text")
        assert render_document_markdown(doc) == "# Getting Started (intro)\n\nBody text"

    def test_empty_body_trimmed(self):
        doc = Document(id="intro", title="Getting Started", summary="Basics")
        assert render_document_markdown(doc) == "# Getting Started (intro)"


class TestRenderTopics:
    def test_single(self, registry):
        assert render_topics(registry, ["faq"]) == "## FAQ (faq)\n\nno install steps here\n"

    def test_multiple_separated(self, registry):
        output = render_topics(registry, ["faq", "intro"])
        blocks = output.rstrip("\n").split("\n\n---\n\n")
        assert [block.splitlines()[0] for block in blocks] == ["## FAQ (faq)", "## Getting Started (intro)"]

    def test_trims_and_dedupes(self, registry):
        output = render_topics(registry, [" faq ", "", "faq"])
        assert output.count("## FAQ (faq)") == 1

    def test_no_ids_raises(self, registry):
        with pytest.raises(ValueError, match="at least one"):
            render_topics(registry, ["  ", ""])

    def test_unknown_ids_all_named(self, registry):
        with pytest.raises(UnknownIdError) as exc_info:
            render_topics(registry, ["intro", "ghost1", "ghost2"])
        assert exc_info.value.ids == ("ghost1", "ghost2")


class TestSearchResults:
    def test_empty(self):
        assert render_search_results([]) == "No matching topics.\n"

    def test_table_and_excerpts(self):
        results = [SearchResult(id="intro", title="Getting Started", summary="Basics", excerpt="install it", score=27)]
        output = render_search_results(results)
        assert output.splitlines()[0].split() == ["Score", "ID", "Title"]
        assert "27     intro  Getting Started" in output
        assert "[intro] install it" in output
