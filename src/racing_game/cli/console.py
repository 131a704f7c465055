"""Console implementations of the input source and race reporter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from racing_game.core.palettes import get_car_color

if TYPE_CHECKING:
    from collections.abc import Sequence

RESULT_HEADER = "Race results"
WINNERS_LABEL = "Winners"


class ConsoleInput:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def request_line(self, prompt: str) -> str:
        return Prompt.ask(prompt, console=self.console)


class ConsoleReporter:
    """
    Prints one "name : ---" line per car after every round
    and the winners once the race is over.
    """

    def __init__(self, console: Console | None = None, *, color: bool = True) -> None:
        self.console = console or Console()
        self.color = color
        self._header_printed = False

    def _name(self, idx: int, name: str) -> str:
        if not self.color:
            return escape(name)
        return f"[bold {get_car_color(idx)}]{escape(name)}[/]"

    def report_round(self, positions: Sequence[tuple[str, str]]) -> None:
        if not self._header_printed:
            self.console.print()
            self.console.print(RESULT_HEADER)
            self._header_printed = True

        for idx, (name, units) in enumerate(positions):
            self.console.print(f"{self._name(idx, name)} : {units}")
        self.console.print()

    def report_winners(self, names: Sequence[str]) -> None:
        self.console.print(f"{WINNERS_LABEL} : {escape(', '.join(names))}")
