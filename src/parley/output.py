"""Centralized output handling: styled messages, errors and line input."""

import sys
from typing import Optional, TextIO

from .config import Settings
from .styling import Ansi, Styled, render


class Console:
    """Writes styled messages and reads answers for one set of display settings.

    Streams left as ``None`` are looked up on :mod:`sys` at call time, so the
    console follows any redirection made after it was created.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.settings = settings or Settings()
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def write(self, content: Styled, *, err: bool = False, end: str = "\n"):
        """Render ``content`` and write it followed by ``end``."""
        stream = self.stderr if err else self.stdout
        stream.write(render(content, self.settings.ansi_enabled) + end)
        stream.flush()

    def info(self, content: Styled):
        """Print styled content on standard output."""
        self.write(content)

    def notice(self, content: Styled):
        """Print content in bright blue."""
        self.write([Ansi.BLUE, Ansi.BRIGHT, content])

    def success(self, content: Styled):
        """Print content in bright green."""
        self.write([Ansi.GREEN, Ansi.BRIGHT, content])

    def green_info(self, content: Styled):
        """Print content in green."""
        self.write([Ansi.GREEN, content])

    def error(self, content: Styled, end: str = "\n"):
        """Print content in bright red on the error stream.

        Goes to standard output instead when ``settings.stderr`` is false.
        """
        self.write([Ansi.RED, Ansi.BRIGHT, content], err=self.settings.stderr, end=end)

    def halt(self, content: Styled, status: int = 1):
        """Print an error and exit with ``status``."""
        self.error(content)
        sys.exit(status)

    def read_line(self) -> Optional[str]:
        """Read one line without its terminator. Returns None at end of input."""
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def prompt(self, text: str) -> Optional[str]:
        """Print ``text`` without a newline and read the answer."""
        self.write(text, end="")
        return self.read_line()


# Default for the module-level helpers and for prompts called without console=
console = Console()


def get_console() -> Console:
    """Return the process-wide default console."""
    return console


def enable_colors():
    """Enable ANSI colors on the default console."""
    console.settings.ansi_enabled = True


def set_stderr(enabled: bool):
    """Choose whether the default console prints errors on stderr."""
    console.settings.stderr = enabled


def info(content: Styled):
    console.info(content)


def notice(content: Styled):
    console.notice(content)


def success(content: Styled):
    console.success(content)


def green_info(content: Styled):
    console.green_info(content)


def error(content: Styled):
    console.error(content)


def halt(content: Styled, status: int = 1):
    console.halt(content, status)
