from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from typing_extensions import override


class DrawSource(Protocol):
    """Anything that can produce an integer in [a, b], e.g. `random.Random`."""

    def randint(self, a: int, b: int) -> int: ...


class InputSource(Protocol):
    def request_line(self, prompt: str) -> str: ...


class RaceReporter(Protocol):
    def report_round(self, positions: Sequence[tuple[str, str]]) -> None: ...

    def report_winners(self, names: Sequence[str]) -> None: ...


class NullReporter:
    """Reporter that discards everything."""

    def report_round(self, positions: Sequence[tuple[str, str]]) -> None:
        pass

    def report_winners(self, names: Sequence[str]) -> None:
        pass


class RecordingReporter(NullReporter):
    """Keeps every report in memory. Used by scenarios and tests."""

    def __init__(self) -> None:
        self.rounds: list[list[tuple[str, str]]] = []
        self.winners: list[list[str]] = []

    @override
    def report_round(self, positions: Sequence[tuple[str, str]]) -> None:
        self.rounds.append(list(positions))

    @override
    def report_winners(self, names: Sequence[str]) -> None:
        self.winners.append(list(names))
