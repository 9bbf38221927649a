"""Ask for a choice from a list."""

import click

from ..output import Console
from ..prompts import ChoiceOptions, EndOfInputError, choose
from . import end_of_input, prompt_console


def parse_choice(raw: str):
    """Split KEY=LABEL. A bare label is its own key."""
    key, sep, label = raw.partition("=")
    if not sep:
        return raw, raw
    if not key:
        raise click.BadParameter(f"Empty key in {raw!r}", param_hint="CHOICE")
    return key, label


@click.command(name="choose")
@click.argument("message")
@click.argument("choices", nargs=-1, required=True)
@click.option("--default", help="Key selected when the input is empty.")
@click.pass_obj
def cmd(console: Console, message, choices, default):
    """Ask for one of CHOICES and print its key.

    Each choice is KEY=LABEL, or a bare label used as its own key.
    """
    console = prompt_console(console)
    items = [parse_choice(raw) for raw in choices]
    try:
        key = choose(message, items, ChoiceOptions(default=default), console=console)
    except EndOfInputError as exc:
        end_of_input(console, exc)
    click.echo(key)
