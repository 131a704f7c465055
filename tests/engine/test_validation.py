import pytest

from racing_game.core.errors import DuplicatedName, InvalidNameLength, InvalidTrialCount
from racing_game.engine.validation import (
    parse_car_names,
    validate_car_names,
    validate_trial_count,
)


def test_parse_car_names_splits_and_trims():
    assert parse_car_names("car1, car2 ,car3") == ["car1", "car2", "car3"]


def test_parse_car_names_keeps_empty_segments():
    assert parse_car_names("a,,b") == ["a", "", "b"]


@pytest.mark.parametrize(
    "names",
    [
        ["a"],
        ["car1", "car2", "car3"],
        ["pobi", "woni", "jun", "x"],
        ["Car", "car"],  # case-sensitive
    ],
)
def test_valid_names_are_returned_unchanged(names):
    assert validate_car_names(names) == names


@pytest.mark.parametrize("bad", ["", "abcde", "invalidCarName123"])
def test_name_length_outside_one_to_four_is_rejected(bad):
    with pytest.raises(InvalidNameLength) as exc_info:
        validate_car_names(["car1", bad, "car3"])
    assert exc_info.value.value == bad


def test_duplicated_name_is_rejected():
    with pytest.raises(DuplicatedName) as exc_info:
        validate_car_names(["car1", "car1", "car3"])
    assert exc_info.value.value == "car1"


def test_length_violation_wins_over_duplicate():
    """Length is checked for all names before looking for duplicates."""
    with pytest.raises(InvalidNameLength):
        validate_car_names(["car1", "car1", "toolong"])


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", 1), ("5", 5), (" 12 ", 12), (7, 7)],
)
def test_positive_trial_count_is_accepted(raw, expected):
    assert validate_trial_count(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "0",
        "-1",
        0,
        -3,
        "",
        "abc",
        "1.5",
        "+2",
        True,
        pytest.param("9" * 5000, id="beyond-int-digit-limit"),
        2.5,
        None,
    ],
)
def test_invalid_trial_count_is_rejected(raw):
    with pytest.raises(InvalidTrialCount):
        validate_trial_count(raw)
