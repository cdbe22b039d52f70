"""Tests for docshelf.core.exceptions."""

from docshelf.core.exceptions import (
    ConfigurationError,
    CorpusError,
    DocshelfError,
    DuplicateIdError,
    FileIOError,
    MalformedDocumentError,
    UnknownIdError,
)


def test_hierarchy():
    """All exceptions should inherit from DocshelfError."""
    for exc_cls in [
        ConfigurationError,
        FileIOError,
        CorpusError,
        MalformedDocumentError,
        DuplicateIdError,
        UnknownIdError,
    ]:
        assert issubclass(exc_cls, DocshelfError)


def test_load_errors_are_corpus_errors():
    assert issubclass(MalformedDocumentError, CorpusError)
    assert issubclass(DuplicateIdError, CorpusError)
    assert not issubclass(UnknownIdError, CorpusError)


def test_malformed_document_message():
    err = MalformedDocumentError("missing required field(s): title", "topics/intro.md")
    assert err.reason == "missing required field(s): title"
    assert err.source == "topics/intro.md"
    assert str(err) == "topics/intro.md: missing required field(s): title"


def test_malformed_document_without_source():
    assert str(MalformedDocumentError("bad")) == "bad"


def test_duplicate_id_message():
    err = DuplicateIdError("intro")
    assert err.doc_id == "intro"
    assert "intro" in str(err)


def test_unknown_id_lists_all_ids_once():
    err = UnknownIdError(["ghost1", "ghost2", "ghost1"])
    assert err.ids == ("ghost1", "ghost2")
    assert str(err) == "Unknown document id(s): ghost1, ghost2"


def test_unknown_id_is_key_error():
    try:
        raise UnknownIdError(["x"])
    except KeyError as e:
        assert "x" in str(e)
