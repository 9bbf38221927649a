"""Styled text: literal runs mixed with style markers, rendered with rich."""

from enum import Enum
from typing import Iterator, List, Sequence, Tuple, Union

from rich.color import ColorSystem
from rich.style import Style


class Ansi(Enum):
    """Style markers understood by :func:`render`.

    Values are rich style definitions.
    """

    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT = "bold"
    FAINT = "dim"
    ITALIC = "italic"
    UNDERLINE = "underline"
    RESET = "reset"


# A literal string, a marker, or any nesting of lists/tuples of those.
Styled = Union[str, Ansi, Sequence["Styled"]]


def iter_segments(content: Styled) -> Iterator[Union[str, Ansi]]:
    """Flatten styled content into literal runs and markers, left to right."""
    if isinstance(content, (str, Ansi)):
        yield content
    elif isinstance(content, (list, tuple)):
        for item in content:
            yield from iter_segments(item)
    else:
        raise TypeError(f"Cannot render {type(content).__name__} as styled text")


def styled_runs(content: Styled) -> List[Tuple[str, Style]]:
    """Pair each literal run with the style set by the markers before it."""
    runs = []
    style = Style.null()
    for segment in iter_segments(content):
        if segment is Ansi.RESET:
            style = Style.null()
        elif isinstance(segment, Ansi):
            style = style + Style.parse(segment.value)
        elif segment:
            runs.append((segment, style))
    return runs


def render(content: Styled, ansi_enabled: bool) -> str:
    """Render styled content as ANSI escape sequences or as plain text.

    Literal runs are written as given. With ``ansi_enabled`` false the markers
    are dropped. Otherwise every styled run is closed by a reset sequence.
    """
    runs = styled_runs(content)
    if not ansi_enabled:
        return "".join(text for text, _ in runs)
    return "".join(
        style.render(text, color_system=ColorSystem.STANDARD) if style else text
        for text, style in runs
    )
