from __future__ import annotations

import typer

from racing_game.core.errors import RaceInputError
from racing_game.engine.validation import (
    parse_car_names,
    validate_car_names,
    validate_trial_count,
)


def parse_names_arg(value: str) -> list[str]:
    """
    Parse and validate a comma separated --names value.
    "car1, car2" -> ["car1", "car2"]
    """
    try:
        return validate_car_names(parse_car_names(value))
    except RaceInputError as e:
        raise typer.BadParameter(str(e), param_hint="--names") from e


def parse_trials_arg(value: str) -> int:
    try:
        return validate_trial_count(value)
    except RaceInputError as e:
        raise typer.BadParameter(str(e), param_hint="--trials") from e
