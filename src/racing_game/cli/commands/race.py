"""CLI command for running a single race."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Annotated

import msgspec
import typer
from rich.console import Console

from racing_game.cli.console import ConsoleInput, ConsoleReporter
from racing_game.cli.converters import parse_names_arg, parse_trials_arg
from racing_game.core.errors import RaceInputError
from racing_game.engine.logging import configure_logging
from racing_game.engine.validation import validate_car_names
from racing_game.game import CAR_NAMES_PROMPT, TRIAL_COUNT_PROMPT, RacingGame
from racing_game.simulation.config import PartialRaceConfig, RaceConfig

logger = logging.getLogger(__name__)
err_console = Console(stderr=True)


def _fail(msg: str) -> typer.Exit:
    err_console.print(f"[bold red]Error:[/bold red] {msg}", markup=True, highlight=False)
    return typer.Exit(code=1)


def run_console_race(
    config: RaceConfig,
    *,
    console: Console | None = None,
    color: bool = True,
) -> None:
    """Run the race and print every round and the winners to the console."""
    logger.info(config.repr)

    game = RacingGame(
        ConsoleInput(console),
        reporter=ConsoleReporter(console, color=color),
        rng=random.Random(config.seed),
    )
    game.create_cars(validate_car_names(config.names))
    game.engine.set_trial_count(config.trial_count)
    game.engine.run_all_rounds()


def race(
    names: Annotated[
        str | None,
        typer.Option(
            "--names",
            "-n",
            help="Comma separated car names (1 to 4 characters each).",
        ),
    ] = None,
    trials: Annotated[
        str | None,
        typer.Option("--trials", "-t", help="Number of rounds to run."),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="RNG seed."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to TOML config file."),
    ] = None,
    encoding: Annotated[
        str | None,
        typer.Option("--encoding", "-e", help="Base64 encoded configuration."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every movement decision."),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Print car names without colors."),
    ] = False,
) -> None:
    """
    Run a car race. Names and trial count are asked for if not given.
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    final_names: list[str] | None = None
    final_trials: int | None = None
    final_seed: int | None = None

    # 1. Load File (Lowest Priority)
    if config_file:
        if not config_file.exists():
            raise _fail(f"Config file not found: {config_file}")
        try:
            file_conf = PartialRaceConfig.from_toml(config_file)
        except msgspec.DecodeError as e:
            raise _fail(f"Invalid TOML config: {e}") from e

        final_names = file_conf.names
        final_trials = file_conf.trial_count
        final_seed = file_conf.seed

    # 2. Load Encoding (Overrides File)
    if encoding:
        try:
            decoded = RaceConfig.from_encoded(encoding)
        except Exception as e:  # noqa: BLE001
            raise _fail(f"Invalid encoding: {e}") from e
        final_names = list(decoded.names)
        final_trials = decoded.trial_count
        final_seed = decoded.seed

    # 3. CLI Args (Highest Priority)
    if names is not None:
        final_names = parse_names_arg(names)
    if trials is not None:
        final_trials = parse_trials_arg(trials)
    if seed is not None:
        final_seed = seed

    # 4. Ask for whatever is still missing
    io = ConsoleInput()
    try:
        if final_names is None:
            final_names = parse_names_arg(io.request_line(CAR_NAMES_PROMPT))
        if final_trials is None:
            final_trials = parse_trials_arg(io.request_line(TRIAL_COUNT_PROMPT))

        config = RaceConfig(
            names=tuple(final_names),
            trial_count=final_trials,
            seed=final_seed if final_seed is not None else random.randint(0, 1000000),
        )
        run_console_race(config, color=not no_color)
    except (RaceInputError, typer.BadParameter) as e:
        logger.debug("Race aborted: %s", e)
        raise _fail(str(e)) from e
