"""Prompt for an integer."""

import click

from ..output import Console
from ..prompts import EndOfInputError, IntegerOptions, prompt_integer
from . import bounds, end_of_input, prompt_console


@click.command(name="integer")
@click.argument("message")
@click.option("--default", type=int, help="Value used when the input is empty.")
@click.option("--min", "low", type=int, help="Smallest accepted value.")
@click.option("--max", "high", type=int, help="Largest accepted value.")
@click.pass_obj
def cmd(console: Console, message, default, low, high):
    """Prompt for an integer and print it."""
    console = prompt_console(console)
    options = IntegerOptions(default=default, range=bounds(low, high, "--min", "--max"))
    try:
        value = prompt_integer(message, options, console=console)
    except EndOfInputError as exc:
        end_of_input(console, exc)
    click.echo(value)
