"""Ask a yes/no question."""

import sys

import click

from ..output import Console
from ..prompts import EndOfInputError, YesNoOptions, yes
from . import end_of_input, prompt_console


@click.command(name="confirm")
@click.argument("message")
@click.option(
    "--default",
    type=click.Choice(["yes", "no"]),
    help="Answer used when the input is empty.",
)
@click.pass_obj
def cmd(console: Console, message, default):
    """Ask a yes/no question.

    Exits with status 0 for yes and 1 for no.
    """
    console = prompt_console(console)
    try:
        answer = yes(message, YesNoOptions(default=default), console=console)
    except EndOfInputError as exc:
        end_of_input(console, exc)
    sys.exit(0 if answer else 1)
