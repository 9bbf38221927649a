"""A library for writing interactive CLIs.

Print colored messages::

    from parley import notice, success, error

    notice("Fetching dependencies...")
    success("Done!")
    error("Something went wrong.")

Prompt the operator::

    from parley import choose, prompt_integer, prompt_string, yes

    prompt_string("Name")
    prompt_integer("Age", range=(0, 150))
    yes("Continue?", default="yes")
    choose("Make a choice:", [("item1", "Item 1"), ("item2", "Item 2")])

Errors are printed on stderr by default. Call ``set_stderr(False)`` or set
``PARLEY_STDERR=false`` to print them on stdout.
"""

from .config import Settings
from .output import (
    Console,
    enable_colors,
    error,
    get_console,
    green_info,
    halt,
    info,
    notice,
    set_stderr,
    success,
)
from .prompts import (
    Answer,
    ChoiceOptions,
    EndOfInputError,
    IntegerOptions,
    StringOptions,
    ValidationError,
    YesNoOptions,
    choose,
    prompt_integer,
    prompt_string,
    yes,
)
from .styling import Ansi, Styled, render

__version__ = "0.2.0"

__all__ = [
    "Ansi",
    "Answer",
    "ChoiceOptions",
    "Console",
    "EndOfInputError",
    "IntegerOptions",
    "Settings",
    "StringOptions",
    "Styled",
    "ValidationError",
    "YesNoOptions",
    "choose",
    "enable_colors",
    "error",
    "get_console",
    "green_info",
    "halt",
    "info",
    "notice",
    "prompt_integer",
    "prompt_string",
    "render",
    "set_stderr",
    "success",
    "yes",
]
