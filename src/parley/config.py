"""Display settings for parley consoles."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Settings:
    """Display switches read by a console each time it writes.

    Attributes:
        ansi_enabled: Render style markers as ANSI escape sequences.
        stderr: Send errors to the error stream instead of standard output.
    """

    ansi_enabled: bool = False
    stderr: bool = True

    @classmethod
    def from_env(cls, project_dir: Optional[Path] = None) -> "Settings":
        """Load settings from the environment and an optional .env file.

        Variables already set in the environment take precedence over .env.
        """
        project_dir = project_dir or Path.cwd()
        load_dotenv(project_dir / ".env")

        return cls(
            ansi_enabled=os.getenv("PARLEY_COLORS", "false").lower() == "true",
            stderr=os.getenv("PARLEY_STDERR", "true").lower() == "true",
        )
