"""docshelf search: keyword search over topics."""

from __future__ import annotations

import json

import click


@click.command()
@click.argument("query", nargs=-1)
@click.option("--limit", "-n", type=click.IntRange(min=1), default=None, help="Maximum results to show.")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON records.")
@click.pass_obj
def search(state, query: tuple[str, ...], limit: int | None, as_json: bool) -> None:
    """Search topics by keyword."""
    from docshelf.docs.render import render_search_results
    from docshelf.docs.search import DocumentSearcher

    searcher = DocumentSearcher(state.registry, state.search_config())
    results = searcher.search(" ".join(query), top_k=limit)

    if as_json:
        click.echo(json.dumps([r.to_record() for r in results], indent=2))
    else:
        click.echo(render_search_results(results), nl=False)
