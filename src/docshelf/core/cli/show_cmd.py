"""docshelf show: print one or more topics."""

from __future__ import annotations

import click

from docshelf.core.exceptions import UnknownIdError


@click.command()
@click.argument("topic_ids", metavar="TOPIC_ID...", nargs=-1, required=True)
@click.pass_obj
def show(state, topic_ids: tuple[str, ...]) -> None:
    """Show one or more documentation topics."""
    from docshelf.docs.render import render_topics

    try:
        output = render_topics(state.registry, topic_ids)
    except (UnknownIdError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(output, nl=False)
