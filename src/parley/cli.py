#!/usr/bin/env python3
"""CLI entry point for parley."""

import logging
import sys

import click

from .config import Settings
from .output import Console
from .commands import ask, choose, confirm, halt, integer, say


@click.group()
@click.version_option()
@click.option(
    "--color/--no-color",
    default=None,
    help="Render ANSI colors. Defaults to PARLEY_COLORS.",
)
@click.option(
    "--errors-to-stdout",
    is_flag=True,
    help="Print errors on stdout instead of stderr.",
)
@click.option("--debug", is_flag=True, help="Log rejected answers to stderr.")
@click.pass_context
def main(ctx: click.Context, color, errors_to_stdout: bool, debug: bool):
    """Prompt for input and print styled messages from shell scripts."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    settings = Settings.from_env()
    if color is not None:
        settings.ansi_enabled = color
    if errors_to_stdout:
        settings.stderr = False
    ctx.obj = Console(settings)


# Register commands
main.add_command(ask.cmd)
main.add_command(integer.cmd)
main.add_command(confirm.cmd)
main.add_command(choose.cmd)
main.add_command(say.cmd)
main.add_command(halt.cmd)


if __name__ == "__main__":
    sys.exit(main())
