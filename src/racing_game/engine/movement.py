from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from typing_extensions import override

from racing_game.core.errors import InvalidPosition
from racing_game.core.types import DRAW_MAX, DRAW_MIN, MOVE_THRESHOLD, POSITION_MARKER

if TYPE_CHECKING:
    from collections.abc import Iterable

    from racing_game.core.protocols import DrawSource


class DrawsExhausted(IndexError):
    pass


class ScriptedDraws:
    """
    Pre-scripted draw source. Hands out the supplied values in order,
    ignoring the requested bounds except for a range check.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values: deque[int] = deque(values)

    @property
    def remaining(self) -> int:
        return len(self._values)

    def randint(self, a: int, b: int) -> int:
        if not self._values:
            msg = "No scripted draws left."
            raise DrawsExhausted(msg)
        value = self._values.popleft()
        if not a <= value <= b:
            msg = f"Scripted draw {value} outside of [{a}, {b}]."
            raise ValueError(msg)
        return value

    @override
    def __repr__(self) -> str:
        return f"ScriptedDraws({list(self._values)})"


def is_advance(draw: int) -> bool:
    return draw >= MOVE_THRESHOLD


class MovementDecision:
    """One independent trial per call: advance on a draw of 4 or more."""

    def __init__(self, rng: DrawSource) -> None:
        self.rng = rng

    def draw(self) -> int:
        return self.rng.randint(DRAW_MIN, DRAW_MAX)

    def decide(self) -> bool:
        return is_advance(self.draw())


def position_units(position: int) -> str:
    """Render a position as one marker per unit, e.g. 3 -> '---'."""
    if position < 0:
        raise InvalidPosition(position)
    return POSITION_MARKER * position
