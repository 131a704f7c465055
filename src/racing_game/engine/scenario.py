from __future__ import annotations

import random
from typing import TYPE_CHECKING

from racing_game.core.protocols import RecordingReporter
from racing_game.core.state import LogContext
from racing_game.engine.race_engine import RaceEngine

if TYPE_CHECKING:
    from collections.abc import Sequence

    from racing_game.core.protocols import DrawSource, RaceReporter
    from racing_game.core.state import Participant, RaceResult


class RaceScenario:
    """
    A reusable harness that wires names, a trial count and a draw source
    into a RaceEngine.

    Pass `rng` to script draws (e.g. a MagicMock or ScriptedDraws);
    otherwise a `random.Random(seed)` is used.
    """

    def __init__(
        self,
        names: Sequence[str],
        trial_count: int | str,
        *,
        seed: int | None = None,
        rng: DrawSource | None = None,
        reporter: RaceReporter | None = None,
        verbose: bool = True,
    ):
        self.rng: DrawSource = rng if rng is not None else random.Random(seed)
        self.reporter: RaceReporter = (
            reporter if reporter is not None else RecordingReporter()
        )
        self.engine: RaceEngine = RaceEngine(
            self.rng,
            reporter=self.reporter,
            log_context=LogContext(),
            verbose=verbose,
        )
        self.engine.create_participants(names)
        self.engine.set_trial_count(trial_count)

    def run_round(self):
        return self.engine.run_round()

    def run_rounds(self, count: int):
        for _ in range(count):
            self.engine.run_round()

    def run_race(self) -> RaceResult:
        return self.engine.run_all_rounds()

    def get_racer(self, idx: int) -> Participant:
        return self.engine.get_participant(idx)
