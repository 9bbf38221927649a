"""Print a styled message."""

import click

from ..output import Console

LEVELS = {
    "info": Console.info,
    "notice": Console.notice,
    "success": Console.success,
    "green": Console.green_info,
    "error": Console.error,
}


@click.command(name="say")
@click.argument("text")
@click.option(
    "--level",
    type=click.Choice(list(LEVELS)),
    default="info",
    show_default=True,
    help="Message style.",
)
@click.pass_obj
def cmd(console: Console, text, level):
    """Print TEXT in the style of LEVEL."""
    LEVELS[level](console, text)
