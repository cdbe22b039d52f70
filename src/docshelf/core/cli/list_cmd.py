"""docshelf list: topic table."""

from __future__ import annotations

import click


@click.command("list")
@click.pass_obj
def list_topics(state) -> None:
    """List documentation topics."""
    from docshelf.docs.render import render_topic_list

    click.echo(render_topic_list(state.registry), nl=False)
