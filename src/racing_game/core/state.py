from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Participant:
    idx: int
    name: str
    position: int = 0

    @property
    def repr(self) -> str:
        return f"{self.idx}:{self.name}"

    def move_forward(self) -> None:
        self.position += 1


@dataclass(frozen=True)
class RoundSnapshot:
    """Display-ready standings after one round."""

    round_number: int
    positions: tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class RaceResult:
    positions: dict[str, int]
    max_position: int
    winners: tuple[str, ...]


@dataclass(slots=True)
class LogContext:
    """Per-race logging state."""

    engine_id: int = 0
    current_round: int = 0
    round_log_count: int = 0
    current_racer_repr: str = "_"

    def start_round(self, round_number: int):
        self.current_round = round_number
        self.round_log_count = 0
        self.current_racer_repr = "_"

    def set_racer(self, racer_repr: str):
        self.current_racer_repr = racer_repr

    def inc_log_count(self):
        self.round_log_count += 1
