from unittest.mock import MagicMock

import pytest

from racing_game.core.errors import (
    DuplicatedName,
    ErrorKind,
    InvalidNameLength,
    InvalidTrialCount,
)
from racing_game.core.protocols import RecordingReporter
from racing_game.engine.movement import ScriptedDraws
from racing_game.game import RacingGame


class InputStub:
    """Answers the names prompt first, then the trial count prompt."""

    def __init__(self, names: str, trial_count: int | str):
        self.answers = [names, str(trial_count)]
        self.prompts: list[str] = []

    def request_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answers.pop(0)


@pytest.fixture
def racing_game():
    return RacingGame(InputStub("car1,car2,car3", 5), rng=MagicMock())


def test_ask_car_names(racing_game: RacingGame):
    assert racing_game.ask_car_names() == ["car1", "car2", "car3"]


def test_create_cars(racing_game: RacingGame):
    names = racing_game.validate_car_names(racing_game.ask_car_names())
    racing_game.create_cars(names)

    cars = racing_game.get_cars()
    assert [car.name for car in cars] == ["car1", "car2", "car3"]
    assert all(car.position == 0 for car in cars)


def test_validate_car_names_returns_input(racing_game: RacingGame):
    names = racing_game.ask_car_names()
    assert racing_game.validate_car_names(names) == names


def test_name_with_five_or_more_characters_is_rejected():
    game = RacingGame(InputStub("car1,invalidCarName123,car3", 5), rng=MagicMock())
    names = game.ask_car_names()
    with pytest.raises(InvalidNameLength) as exc_info:
        game.validate_car_names(names)
    assert ErrorKind.INVALID_NAME_LENGTH.message in str(exc_info.value)


def test_duplicated_name_is_rejected():
    game = RacingGame(InputStub("car1,car1,car3", 5), rng=MagicMock())
    names = game.ask_car_names()
    with pytest.raises(DuplicatedName) as exc_info:
        game.validate_car_names(names)
    assert ErrorKind.DUPLICATED_NAME.message in str(exc_info.value)


def test_ask_trial_count(racing_game: RacingGame):
    racing_game.ask_car_names()
    racing_game.set_trial_count()
    assert racing_game.get_trial_count() == 5


def test_zero_trial_count_is_rejected():
    game = RacingGame(InputStub("car1,car2,car3", 0), rng=MagicMock())
    game.ask_car_names()
    with pytest.raises(InvalidTrialCount) as exc_info:
        game.set_trial_count()
    assert ErrorKind.INVALID_TRIAL_COUNT.message in str(exc_info.value)


def test_position_units(racing_game: RacingGame):
    assert [racing_game.get_position_units(n) for n in range(5)] == [
        "",
        "-",
        "--",
        "---",
        "----",
    ]


def test_is_move_forward_uses_injected_draws():
    game = RacingGame(InputStub("a", 1), rng=ScriptedDraws([3, 4]))
    assert game.is_move_forward() is False
    assert game.is_move_forward() is True


def test_max_position_and_winners(racing_game: RacingGame):
    racing_game.create_cars(["car0", "car1", "car2"])
    cars = racing_game.get_cars()
    cars[0].move_forward()
    cars[0].move_forward()
    cars[1].move_forward()

    assert racing_game.get_max_position() == 2
    assert racing_game.get_winners() == ["car0"]


def test_play_runs_the_whole_race():
    io = InputStub(" pobi, woni ", 3)
    reporter = RecordingReporter()
    game = RacingGame(io, reporter=reporter, rng=ScriptedDraws([4, 0, 4, 4, 0, 9]))

    result = game.play()

    assert len(io.prompts) == 2
    assert result.positions == {"pobi": 2, "woni": 2}
    assert result.winners == ("pobi", "woni")
    assert len(reporter.rounds) == 3
    assert reporter.winners == [["pobi", "woni"]]


def test_play_propagates_input_errors():
    game = RacingGame(InputStub("pobi,pobi", 3), rng=MagicMock())
    with pytest.raises(DuplicatedName):
        game.play()
