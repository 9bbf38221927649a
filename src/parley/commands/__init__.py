"""Subcommands of the parley CLI."""

from typing import Optional, Tuple

import click

from ..output import Console
from ..prompts import EndOfInputError


def prompt_console(console: Console) -> Console:
    """Console for prompt commands: prompts and lists go to stderr.

    Standard output then carries only the answer, so ``$(parley ask ...)``
    captures it while the operator still sees the question.
    """
    return Console(console.settings, stdout=click.get_text_stream("stderr"))


def bounds(
    low: Optional[int], high: Optional[int], low_flag: str, high_flag: str
) -> Optional[Tuple[int, int]]:
    """Combine a pair of min/max options into an inclusive range."""
    if low is None and high is None:
        return None
    if low is None or high is None:
        raise click.UsageError(f"{low_flag} and {high_flag} must be given together")
    if low > high:
        raise click.UsageError(f"{low_flag} must not be greater than {high_flag}")
    return low, high


def end_of_input(console: Console, exc: EndOfInputError):
    """Report an exhausted input stream and exit with status 1."""
    console.write("")
    console.halt(str(exc), 1)
