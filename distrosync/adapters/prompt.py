"""Interactive prompt backed by Rich."""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Prompt


class ConsolePrompt:
    """:class:`~distrosync.core.ports.PromptService` asking on the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def prompt(self, text: str, default: str | None = None) -> str:
        if default is None:
            return Prompt.ask(text, console=self.console)
        return Prompt.ask(text, console=self.console, default=default)
