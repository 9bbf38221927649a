"""Print an error and exit."""

import click

from ..output import Console


@click.command(name="halt")
@click.argument("text")
@click.option("--status", type=int, default=1, show_default=True, help="Exit status.")
@click.pass_obj
def cmd(console: Console, text, status):
    """Print TEXT as an error and exit with STATUS."""
    console.halt(text, status)
