"""Shared test fixtures for docshelf."""

import os
import tempfile

import pytest

from docshelf.docs.registry import build_registry


def make_raw(title: str, summary: str, body: str = "", extra: str = "") -> str:
    """Build a raw markdown document with front matter."""
    return f"---\ntitle: {title}\nsummary: {summary}\n{extra}---\n\n{body}\n"


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def raw_doc():
    """The make_raw helper, for tests that build their own documents."""
    return make_raw


@pytest.fixture
def raw_corpus():
    return [
        ("intro", make_raw("Getting Started", "Basics", "First, install the tool with pip.")),
        ("faq", make_raw("FAQ", "Common questions", "no install steps here")),
        ("layers", make_raw("Services and Layers", "Wiring dependencies", "Layers build services.")),
    ]


@pytest.fixture
def registry(raw_corpus):
    return build_registry(raw_corpus)


@pytest.fixture
def corpus_dir(tmp_dir):
    """A corpus directory laid out like the bundled resources."""
    topics = os.path.join(tmp_dir, "topics")
    os.makedirs(topics)
    with open(os.path.join(tmp_dir, "entry.md"), "w") as f:
        f.write("# Custom Docs\n\nWelcome.\n")
    files = {
        "b-second.md": make_raw("Second Topic", "The second one", "Body of the second topic."),
        "a-first.md": make_raw("First Topic", "The first one", "Body of the first topic."),
        "notes.txt": "not a topic",
    }
    for name, text in files.items():
        with open(os.path.join(topics, name), "w") as f:
            f.write(text)
    return tmp_dir


@pytest.fixture
def tmp_config_file(tmp_dir, corpus_dir):
    """Create a temporary YAML config file pointing at corpus_dir."""
    import yaml

    config_data = {
        "corpus": {"path": corpus_dir},
        "search": {"weights": {"title_phrase": 500}},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path
