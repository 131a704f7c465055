from __future__ import annotations

from typing import TYPE_CHECKING

from racing_game.core.errors import (
    DuplicatedName,
    InvalidNameLength,
    InvalidTrialCount,
)
from racing_game.core.types import MAX_NAME_LENGTH, MIN_NAME_LENGTH, NAME_DELIMITER

if TYPE_CHECKING:
    from collections.abc import Sequence


def parse_car_names(raw: str) -> list[str]:
    """
    Split a comma-delimited line into trimmed names.
    Empty segments are kept so that "a,,b" is rejected by the length rule.
    """
    return [part.strip() for part in raw.split(NAME_DELIMITER)]


def validate_car_names(names: Sequence[str]) -> list[str]:
    """
    Validate candidate car names and return them unchanged.

    Length is checked for every name before duplicates are looked for,
    so a list with both problems reports the length violation.
    """
    for name in names:
        if not MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH:
            raise InvalidNameLength(name)

    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise DuplicatedName(name)
        seen.add(name)

    return list(names)


def validate_trial_count(raw: str | int) -> int:
    """
    Parse and validate a requested number of rounds.
    Unparseable and non-positive input share the same error.
    """
    if isinstance(raw, bool) or not isinstance(raw, (str, int)):
        raise InvalidTrialCount(raw)

    if isinstance(raw, int):
        count = raw
    else:
        text = raw.strip()
        # int() would accept "+5" and "1_000"; only plain digits are trial counts
        if not text.isdecimal():
            raise InvalidTrialCount(raw)
        try:
            count = int(text)
        except ValueError as e:
            # Digit strings past the interpreter's conversion limit
            raise InvalidTrialCount(raw) from e

    if count < 1:
        raise InvalidTrialCount(raw)
    return count
