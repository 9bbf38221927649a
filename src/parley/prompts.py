"""Interactive prompts that validate answers and ask again until they are valid.

Every prompt prints its text, reads one line, validates it, and on failure
prints an error and asks again. There is no retry limit: the operator always
gets another chance. Only the end of the input stream stops a prompt early,
with :class:`EndOfInputError`.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from .output import Console, get_console
from .styling import Styled

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Inclusive (min, max) bounds
Range = Tuple[int, int]

Choices = Union[Mapping[Hashable, Styled], Sequence[Tuple[Hashable, Styled]]]

YES = ("y", "Y", "yes", "YES", "Yes")
NO = ("n", "N", "no", "NO", "No")

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class ValidationError(Exception):
    """An answer was rejected. The message is shown before asking again."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EndOfInputError(EOFError):
    """The input stream ended while a prompt was waiting for an answer."""


class Answer(str, Enum):
    """Default answer of a yes/no question."""

    YES = "yes"
    NO = "no"


def _check_range(name: str, bounds: Optional[Range]):
    if bounds is None:
        return
    low, high = bounds
    if low > high:
        raise ValueError(f"{name} must be (min, max) with min <= max, got {bounds!r}")


@dataclass(frozen=True)
class StringOptions:
    """Options for :func:`prompt_string`.

    Attributes:
        default: Returned on empty input and shown in the prompt.
        required: Reject empty input when there is no default.
        error_message: Shown instead of the stock message for missing input.
        length: Accepted (min, max) character count.
    """

    default: Optional[str] = None
    required: bool = False
    error_message: Optional[str] = None
    length: Optional[Range] = None

    def __post_init__(self):
        _check_range("length", self.length)


@dataclass(frozen=True)
class IntegerOptions:
    """Options for :func:`prompt_integer`."""

    default: Optional[int] = None
    range: Optional[Range] = None

    def __post_init__(self):
        _check_range("range", self.range)


@dataclass(frozen=True)
class YesNoOptions:
    """Options for :func:`yes`. ``default`` also accepts "yes" or "no"."""

    default: Optional[Answer] = None

    def __post_init__(self):
        if self.default is not None:
            object.__setattr__(self, "default", Answer(self.default))


@dataclass(frozen=True)
class ChoiceOptions:
    """Options for :func:`choose`. ``default`` is a key, not a position."""

    default: Optional[Hashable] = None


def _build_options(cls: Type[T], options: Optional[T], fields: Dict[str, Any]) -> T:
    if options is not None and fields:
        raise TypeError(f"Pass either a {cls.__name__} or option keywords, not both")
    if options is not None:
        return options
    return cls(**fields)


# ---------------------------------------------------------------------------
# Prompt core
# ---------------------------------------------------------------------------


def ask_line(console: Console, text: str) -> str:
    """Print ``text`` without a newline and return the trimmed answer.

    Raises:
        EndOfInputError: If the input stream is exhausted.
    """
    line = console.prompt(text)
    if line is None:
        logger.debug("Input ended while waiting for %r", text)
        raise EndOfInputError(f"Input ended while waiting for an answer to {text.strip()!r}")
    return line.strip()


def retry(attempt: Callable[[], T], console: Console) -> T:
    """Call ``attempt`` until it returns instead of raising ValidationError.

    Each rejection prints the error message followed by a blank line.
    """
    while True:
        try:
            return attempt()
        except ValidationError as exc:
            logger.debug("Rejected answer: %s", exc.message)
            console.error(exc.message, end="\n\n")


# ---------------------------------------------------------------------------
# String prompt
# ---------------------------------------------------------------------------


def _format_string_prompt(message: str, options: StringOptions) -> str:
    text = message
    if options.length is not None:
        text += " ({}-{} characters)".format(*options.length)
    if options.default is not None:
        return f"{text} [{options.default}]: "
    return f"{text}: "


def _read_string(message: str, options: StringOptions, console: Console) -> Tuple[str, bool]:
    """Run the string prompt and return (value, whether the default was used)."""
    text = _format_string_prompt(message, options)

    def attempt() -> Tuple[str, bool]:
        line = ask_line(console, text)
        if not line:
            if options.default is not None:
                return options.default, True
            if options.required:
                raise ValidationError(options.error_message or "You must provide a value!")

        if options.length is not None:
            low, high = options.length
            if not low <= len(line) <= high:
                raise ValidationError(f"The value must be {low} to {high} characters long.")
        return line, False

    return retry(attempt, console)


def prompt_string(
    message: str,
    options: Optional[StringOptions] = None,
    *,
    console: Optional[Console] = None,
    **option_fields: Any,
) -> str:
    """Print ``message`` and prompt for a string. The answer is trimmed.

    Options can be given as a :class:`StringOptions` or as keywords::

        prompt_string("Name")
        # Name: Jean-Philippe
        # => "Jean-Philippe"

        prompt_string("Hello", default="world")
        # Hello [world]:
        # => "world"

        prompt_string("Nick", length=(3, 20))
        # Nick (3-20 characters): me
        # The value must be 3 to 20 characters long.
        #
        # Nick (3-20 characters): my_nick
        # => "my_nick"

    A default is returned as is, without checking its length.
    """
    options = _build_options(StringOptions, options, option_fields)
    value, _ = _read_string(message, options, console or get_console())
    return value


# ---------------------------------------------------------------------------
# Integer prompt
# ---------------------------------------------------------------------------


def prompt_integer(
    message: str,
    options: Optional[IntegerOptions] = None,
    *,
    console: Optional[Console] = None,
    **option_fields: Any,
) -> int:
    """Print ``message`` and prompt for an integer.

    ::

        prompt_integer("Percentage", range=(0, 100))
        # Percentage (0-100): 200
        # The value must be between 0 and 100.
        #
        # Percentage (0-100): 42
        # => 42

    On empty input the default is returned without checking the range.
    """
    options = _build_options(IntegerOptions, options, option_fields)
    console = console or get_console()

    if options.range is not None:
        message += " ({}-{})".format(*options.range)
    string_options = StringOptions(
        default=None if options.default is None else str(options.default),
        required=True,
    )

    def attempt() -> int:
        raw, used_default = _read_string(message, string_options, console)
        if used_default:
            return options.default
        if not INTEGER_PATTERN.fullmatch(raw):
            raise ValidationError("The value must be an integer.")

        value = int(raw)
        if options.range is not None:
            low, high = options.range
            if not low <= value <= high:
                raise ValidationError(f"The value must be between {low} and {high}.")
        return value

    return retry(attempt, console)


# ---------------------------------------------------------------------------
# Yes/no prompt
# ---------------------------------------------------------------------------

YES_NO_HINTS = {
    Answer.YES: " [Y/n] ",
    Answer.NO: " [y/N] ",
    None: " (y/n) ",
}


def yes(
    message: str,
    options: Optional[YesNoOptions] = None,
    *,
    console: Optional[Console] = None,
    **option_fields: Any,
) -> bool:
    """Ask a yes/no question.

    Without a default the operator must type an answer. With one, an empty
    answer picks it::

        yes("Is it good?", default="yes")
        # Is it good? [Y/n]
        # => True
    """
    options = _build_options(YesNoOptions, options, option_fields)
    console = console or get_console()
    text = message + YES_NO_HINTS[options.default]

    def attempt() -> bool:
        answer = ask_line(console, text)
        if answer in YES:
            return True
        if answer in NO:
            return False
        if not answer and options.default is not None:
            return options.default is Answer.YES
        raise ValidationError("You must answer yes or no.")

    return retry(attempt, console)


# ---------------------------------------------------------------------------
# Choice prompt
# ---------------------------------------------------------------------------


def _choice_items(choices: Choices) -> List[Tuple[Hashable, Styled]]:
    if isinstance(choices, Mapping):
        return list(choices.items())
    return [(key, label) for key, label in choices]


def _default_position(items: List[Tuple[Hashable, Styled]], default: Optional[Hashable]) -> Optional[str]:
    if default is None:
        return None
    for position, (key, _) in enumerate(items, 1):
        if key == default:
            return str(position)
    return None


def choose(
    message: str,
    choices: Choices,
    options: Optional[ChoiceOptions] = None,
    *,
    console: Optional[Console] = None,
    **option_fields: Any,
) -> Hashable:
    """Ask the operator to pick one of ``choices`` and return its key.

    ``choices`` is a mapping or a sequence of (key, label) pairs. Labels are
    listed with their position, and the operator types the position::

        choose("What do you want?", [("tea", "A cup of tea"), ("coffee", "Some coffee")])
        # What do you want?
        #
        #   1. A cup of tea
        #   2. Some coffee
        #
        # Choice: 3
        # The choice must be an integer between 1 and 2.
        #
        # What do you want?
        # ...
        # Choice: 2
        # => "coffee"

    Raises:
        ValueError: If ``choices`` is empty.
    """
    items = _choice_items(choices)
    if not items:
        raise ValueError("choose() needs at least one choice")

    options = _build_options(ChoiceOptions, options, option_fields)
    console = console or get_console()
    string_options = StringOptions(
        default=_default_position(items, options.default),
        required=True,
        error_message="You must make a choice!",
    )

    def attempt() -> Hashable:
        console.info(message)
        console.info("")
        for position, (_, label) in enumerate(items, 1):
            console.info([f"  {position}. ", label])
        console.info("")

        raw, _ = _read_string("Choice", string_options, console)
        if INTEGER_PATTERN.fullmatch(raw):
            position = int(raw)
            if 1 <= position <= len(items):
                return items[position - 1][0]
        raise ValidationError(f"The choice must be an integer between 1 and {len(items)}.")

    return retry(attempt, console)
