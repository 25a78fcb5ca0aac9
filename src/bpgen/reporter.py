"""Human readable progress output."""

import os
from pathlib import Path
from typing import Optional

from rich.console import Console


def display_path(path: Path) -> str:
    """Show ``path`` as ``./relative/path`` when it is under the working directory."""
    try:
        relative = path.relative_to(Path.cwd())
    except ValueError:
        return str(path)
    return f".{os.sep}{relative}"


class ConsoleReporter:
    def __init__(self, console: Optional[Console] = None) -> None:
        # Paths are printed verbatim: no markup, emoji codes or highlighting.
        self.console = console or Console(highlight=False, emoji=False)

    def _print(self, message: str) -> None:
        self.console.print(
            message, markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def start(self) -> None:
        self._print("🚧 Building...")

    def file_written(self, path: Path) -> None:
        self._print(f"|-- {display_path(path)}")

    def done(self) -> None:
        self._print("Component boilerplate created! 🤖✨")
