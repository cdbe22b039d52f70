"""Docshelf CLI: entry point for the list, show, and search commands."""

import click

from docshelf import __version__
from docshelf.core.exceptions import DocshelfError
from docshelf.core.utils.logging import setup_logging

from .common import CliState


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, package_name="docshelf")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), help="YAML or JSON config file.")
@click.option("--corpus", "corpus_path", type=click.Path(file_okay=False), help="Serve topics from this directory.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, corpus_path: str | None, verbose: bool) -> None:
    """Docshelf: browse and search the bundled documentation topics."""
    state = CliState(config_file=config_file, corpus_path=corpus_path)
    ctx.obj = state

    level = "DEBUG" if verbose else str(state.config.get("logging.level") or "WARNING")
    try:
        setup_logging(level=level, log_file=state.config.get("logging.file") or None)
    except ValueError as e:
        raise click.ClickException(f"Invalid logging configuration: {e}") from e

    if ctx.invoked_subcommand is None:
        # Validate the corpus even when only the overview is printed
        state.load()
        try:
            entry = state.corpus.entry()
        except DocshelfError as e:
            raise click.ClickException(str(e)) from e
        click.echo(entry)


# Register subcommands (lazy imports keep startup fast)
from .list_cmd import list_topics
from .search_cmd import search
from .show_cmd import show

main.add_command(list_topics)
main.add_command(show)
main.add_command(search)
