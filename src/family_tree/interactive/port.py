"""
Console I/O boundary for the interactive menu.

Session code only talks to a ``ConsolePort``; the real terminal goes through
Rich, tests feed scripted answers and capture the emitted text.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

from rich.console import Console


class ConsolePort(Protocol):
    def write(self, text: str = "") -> None:
        """Emit one line of text."""

    def read_line(self, prompt: str = "") -> str:
        """Show ``prompt`` and return one input line. Raises EOFError at end of input."""


class RichConsolePort:
    """Terminal port backed by ``rich.console.Console`` with markup disabled."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(markup=False, highlight=False, emoji=False)

    def write(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def read_line(self, prompt: str = "") -> str:
        return self.console.input(prompt, markup=False, emoji=False)


class ScriptedPort:
    """
    In-memory port: answers come from a list, output is recorded.

    Prompts are recorded in ``prompts`` and also appended to ``output`` so a
    transcript reads like the terminal session.
    """

    def __init__(self, answers: Iterable[str] = ()):
        self.answers: List[str] = list(answers)
        self.output: List[str] = []
        self.prompts: List[str] = []

    def write(self, text: str = "") -> None:
        self.output.extend(text.split("\n"))

    def read_line(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if prompt:
            self.output.append(prompt)
        if not self.answers:
            raise EOFError("scripted input exhausted")
        return self.answers.pop(0)

    @property
    def transcript(self) -> str:
        return "\n".join(self.output)
