"""Prompt for a string."""

import click

from ..output import Console
from ..prompts import EndOfInputError, StringOptions, prompt_string
from . import bounds, end_of_input, prompt_console


@click.command(name="ask")
@click.argument("message")
@click.option("--default", help="Answer used when the input is empty.")
@click.option("--required", is_flag=True, help="Reject empty answers.")
@click.option("--error-message", help="Message shown when a required answer is missing.")
@click.option("--min-length", type=int, help="Minimum answer length.")
@click.option("--max-length", type=int, help="Maximum answer length.")
@click.pass_obj
def cmd(console: Console, message, default, required, error_message, min_length, max_length):
    """Prompt for a string and print the answer."""
    console = prompt_console(console)
    options = StringOptions(
        default=default,
        required=required,
        error_message=error_message,
        length=bounds(min_length, max_length, "--min-length", "--max-length"),
    )
    try:
        answer = prompt_string(message, options, console=console)
    except EndOfInputError as exc:
        end_of_input(console, exc)
    click.echo(answer)
