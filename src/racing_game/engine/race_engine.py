from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from racing_game.core.errors import EmptyParticipantList, RaceStateError
from racing_game.core.protocols import NullReporter
from racing_game.core.state import LogContext, Participant, RaceResult, RoundSnapshot
from racing_game.core.types import RacePhase
from racing_game.engine.logging import LOGGER_NAME, ContextFilter
from racing_game.engine.movement import MovementDecision, is_advance, position_units
from racing_game.engine.validation import validate_trial_count

if TYPE_CHECKING:
    from collections.abc import Sequence

    from racing_game.core.protocols import DrawSource, RaceReporter

_engine_ids = itertools.count()


@dataclass
class RaceEngine:
    rng: DrawSource
    reporter: RaceReporter = field(default_factory=NullReporter)
    log_context: LogContext = field(default_factory=LogContext)
    verbose: bool = True

    participants: list[Participant] = field(init=False, default_factory=list)
    trial_count: int | None = field(init=False, default=None)
    rounds_completed: int = field(init=False, default=0)
    decision: MovementDecision = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)
    _context_filter: ContextFilter | None = field(init=False, default=None, repr=False)

    def __post_init__(self) -> None:
        self.decision = MovementDecision(self.rng)
        self.log_context.engine_id = next(_engine_ids)
        base = logging.getLogger(LOGGER_NAME)
        self._logger = base.getChild(f"engine.{self.log_context.engine_id}")

        if self.verbose:
            self._context_filter = ContextFilter(self)
            self._logger.addFilter(self._context_filter)

    # --- Setup ---
    def create_participants(self, names: Sequence[str]) -> list[Participant]:
        if self.rounds_completed > 0:
            msg = "Cannot replace participants once the race has started."
            raise RaceStateError(msg)
        if not names:
            raise EmptyParticipantList

        self.participants = [Participant(i, name) for i, name in enumerate(names)]
        self.log_info(
            f"Lined up {len(self.participants)} cars: "
            f"{', '.join(escape(p.repr) for p in self.participants)}",
        )
        return self.participants

    def set_trial_count(self, count: str | int) -> int:
        if self.trial_count is not None:
            msg = f"Trial count is already set to {self.trial_count}."
            raise RaceStateError(msg)
        self.trial_count = validate_trial_count(count)
        self.log_info(f"Race will run for {self.trial_count} rounds.")
        return self.trial_count

    @property
    def phase(self) -> RacePhase:
        if not self.participants:
            return RacePhase.CREATED
        if self.rounds_completed == 0:
            return RacePhase.PARTICIPANTS_READY
        if self.trial_count is not None and self.rounds_completed >= self.trial_count:
            return RacePhase.FINISHED
        return RacePhase.RUNNING

    # --- Main Loop ---
    def run_round(self) -> RoundSnapshot:
        if not self.participants:
            raise EmptyParticipantList
        if self.trial_count is None:
            msg = "Trial count must be set before running rounds."
            raise RaceStateError(msg)
        if self.phase is RacePhase.FINISHED:
            msg = f"All {self.trial_count} rounds have already been run."
            raise RaceStateError(msg)

        round_number = self.rounds_completed + 1
        self.log_context.start_round(round_number)
        self.log_info(f"=== ROUND {round_number}/{self.trial_count} ===")

        for racer in self.participants:
            self.log_context.set_racer(escape(racer.repr))
            draw = self.decision.draw()
            if is_advance(draw):
                racer.move_forward()
                self.log_debug(f"Draw: {draw} -> Move to {racer.position}")
            else:
                self.log_debug(f"Draw: {draw} -> Stay at {racer.position}")

        self.rounds_completed = round_number
        self.log_context.set_racer("_")

        snapshot = self.snapshot()
        self.reporter.report_round(snapshot.positions)
        return snapshot

    def run_all_rounds(self) -> RaceResult:
        if self.trial_count is None:
            msg = "Trial count must be set before running rounds."
            raise RaceStateError(msg)
        if self.phase is RacePhase.FINISHED:
            msg = f"All {self.trial_count} rounds have already been run."
            raise RaceStateError(msg)

        for _ in range(self.trial_count - self.rounds_completed):
            self.run_round()

        result = self.result()
        self.log_info(f"Winners: {', '.join(escape(w) for w in result.winners)}")
        self.reporter.report_winners(result.winners)
        self.close()
        return result

    def close(self) -> None:
        """Detach the context filter so the logger no longer holds this engine."""
        if self._context_filter is not None:
            self._logger.removeFilter(self._context_filter)
            self._context_filter = None

    # --- Queries ---
    def get_participant(self, idx: int) -> Participant:
        return self.participants[idx]

    def get_max_position(self) -> int:
        if not self.participants:
            raise EmptyParticipantList
        return max(p.position for p in self.participants)

    def get_winners(self) -> list[str]:
        max_position = self.get_max_position()
        return [p.name for p in self.participants if p.position == max_position]

    @staticmethod
    def position_units(position: int) -> str:
        return position_units(position)

    def snapshot(self) -> RoundSnapshot:
        return RoundSnapshot(
            round_number=self.rounds_completed,
            positions=tuple(
                (p.name, position_units(p.position)) for p in self.participants
            ),
        )

    def result(self) -> RaceResult:
        return RaceResult(
            positions={p.name: p.position for p in self.participants},
            max_position=self.get_max_position(),
            winners=tuple(self.get_winners()),
        )

    # -- Logging --
    def _log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        """Core logging helper; respects engine verbosity."""
        if not self.verbose:
            return
        self._logger.log(level, msg, *args, **kwargs)

    def log_debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def log_info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, *args, **kwargs)
