"""Shared setup logic for CLI commands."""

from __future__ import annotations

import click
from loguru import logger

from docshelf.core.exceptions import DocshelfError


class CliState:
    """Per-invocation settings collected by the top-level group."""

    def __init__(self, config_file: str | None = None, corpus_path: str | None = None):
        self.config_file = config_file
        self.corpus_path = corpus_path
        self._config = None
        self._corpus = None
        self._registry = None

    @property
    def config(self):
        if self._config is None:
            self._config = load_config(self.config_file)
        return self._config

    @property
    def corpus(self):
        if self._corpus is None:
            self._corpus = load_corpus(self.config, self.corpus_path)
        return self._corpus

    @property
    def registry(self):
        """The document registry, built once on first use."""
        return self.load()

    def load(self):
        if self._registry is None:
            self._registry = build_or_abort(self.corpus)
        return self._registry

    def search_config(self):
        from docshelf.docs.config import SearchConfig

        try:
            return SearchConfig.from_config(self.config)
        except DocshelfError as e:
            raise click.ClickException(str(e)) from e


def load_config(config_file: str | None):
    """Load config from *config_file* (if given) plus DOCSHELF_ env vars."""
    from docshelf.core.config import Config

    try:
        return Config(config_file=config_file)
    except DocshelfError as e:
        raise click.ClickException(str(e)) from e


def load_corpus(config, corpus_path: str | None = None):
    """Pick the corpus: --corpus, then corpus.path config, then the bundled one."""
    from docshelf.docs.corpus import directory_corpus, packaged_corpus

    path = corpus_path or config.get("corpus.path", "")
    if not path:
        return packaged_corpus()
    try:
        return directory_corpus(path)
    except DocshelfError as e:
        raise click.ClickException(str(e)) from e


def build_or_abort(corpus):
    """Build the registry; a load failure stops the command before any output."""
    try:
        return corpus.build()
    except DocshelfError as e:
        logger.error(f"Failed to load corpus {corpus.name}: {e}")
        raise click.ClickException(f"Could not load documentation: {e}") from e
