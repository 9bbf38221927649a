"""Pytest configuration and fixtures."""

import io
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Generator

import pytest

from parley import output
from parley.config import Settings
from parley.output import Console


@dataclass
class ScriptedConsole:
    """A console fed from a fixed input script, with captured output."""

    console: Console
    stdout: io.StringIO
    stderr: io.StringIO

    @property
    def out(self) -> str:
        return self.stdout.getvalue()

    @property
    def err(self) -> str:
        return self.stderr.getvalue()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def scripted() -> Callable[..., ScriptedConsole]:
    """Build a console that reads ``input_text`` and records what it writes.

    Keyword arguments are passed to :class:`Settings`.
    """

    def make(input_text: str = "", **settings) -> ScriptedConsole:
        stdout, stderr = io.StringIO(), io.StringIO()
        console = Console(
            Settings(**settings),
            stdin=io.StringIO(input_text),
            stdout=stdout,
            stderr=stderr,
        )
        return ScriptedConsole(console, stdout, stderr)

    return make


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """Isolate tests from display settings in the environment."""
    for key in ["PARLEY_COLORS", "PARLEY_STDERR"]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def fresh_default_console(monkeypatch):
    """Give every test its own default console."""
    monkeypatch.setattr(output, "console", Console())
