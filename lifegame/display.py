from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class Display(Protocol):
    def write(self, text: str) -> None:  # pragma: no cover
        ...

    def read(self, prompt: str = "> ") -> str | None:  # pragma: no cover
        """Return the next input line, or None once input is exhausted."""
        ...


class StdIODisplay:
    def write(self, text: str) -> None:
        print(text)

    def read(self, prompt: str = "> ") -> str | None:
        try:
            return input(prompt)
        except EOFError:
            return None


class ScriptedDisplay:
    """Feeds a fixed sequence of input lines and records everything written.

    Used for tests and for replaying a command file from the CLI.
    """

    def __init__(self, lines: Iterable[str], *, echo: bool = False):
        self._lines = list(lines)
        self._echo = echo
        self.output: list[str] = []

    def write(self, text: str) -> None:
        self.output.append(text)
        if self._echo:
            print(text)

    def read(self, prompt: str = "> ") -> str | None:
        if not self._lines:
            return None
        line = self._lines.pop(0)
        self.output.append(prompt + line)
        if self._echo:
            print(prompt + line)
        return line

    @property
    def text(self) -> str:
        return "\n".join(self.output)
