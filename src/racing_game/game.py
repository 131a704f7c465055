"""
Orchestration of a single race: ask for input, validate it,
build the cars and run every round.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from racing_game.core.state import LogContext
from racing_game.engine.race_engine import RaceEngine
from racing_game.engine.validation import parse_car_names, validate_car_names

if TYPE_CHECKING:
    from collections.abc import Sequence

    from racing_game.core.protocols import DrawSource, InputSource, RaceReporter
    from racing_game.core.state import Participant, RaceResult

logger = logging.getLogger(__name__)

CAR_NAMES_PROMPT = "Enter the names of the cars to race (comma separated)"
TRIAL_COUNT_PROMPT = "How many rounds should be run?"


class RacingGame:
    def __init__(
        self,
        io: InputSource,
        reporter: RaceReporter | None = None,
        rng: DrawSource | None = None,
        *,
        verbose: bool = True,
    ) -> None:
        self.io = io
        self.engine = RaceEngine(
            rng if rng is not None else random.Random(),
            log_context=LogContext(),
            verbose=verbose,
        )
        if reporter is not None:
            self.engine.reporter = reporter

    def ask_car_names(self) -> list[str]:
        return parse_car_names(self.io.request_line(CAR_NAMES_PROMPT))

    def validate_car_names(self, names: Sequence[str]) -> list[str]:
        return validate_car_names(names)

    def create_cars(self, names: Sequence[str]) -> None:
        self.engine.create_participants(names)

    def get_cars(self) -> list[Participant]:
        return self.engine.participants

    def set_trial_count(self) -> int:
        return self.engine.set_trial_count(self.io.request_line(TRIAL_COUNT_PROMPT))

    def get_trial_count(self) -> int | None:
        return self.engine.trial_count

    def is_move_forward(self) -> bool:
        return self.engine.decision.decide()

    def get_position_units(self, position: int) -> str:
        return self.engine.position_units(position)

    def get_max_position(self) -> int:
        return self.engine.get_max_position()

    def get_winners(self) -> list[str]:
        return self.engine.get_winners()

    def play(self) -> RaceResult:
        """
        Run the full game. Input errors propagate to the caller,
        which decides whether to re-prompt or abort.
        """
        names = self.validate_car_names(self.ask_car_names())
        self.create_cars(names)
        self.set_trial_count()
        result = self.engine.run_all_rounds()
        logger.debug("Final positions: %s", result.positions)
        return result
