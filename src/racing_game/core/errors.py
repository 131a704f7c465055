"""Rejected-input errors raised by validators and the race engine."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    INVALID_NAME_LENGTH = "car name must be 1 to 4 characters"
    DUPLICATED_NAME = "car names must not be duplicated"
    INVALID_TRIAL_COUNT = "trial count must be a positive integer"
    EMPTY_PARTICIPANT_LIST = "at least one car is required"
    INVALID_POSITION = "position must be non-negative"

    @property
    def message(self) -> str:
        return self.value


class RaceInputError(ValueError):
    """
    Base class for every rejected-input error.
    The offending value (if any) is kept on `value` and appended to the message.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, value: object = None) -> None:
        self.value = value
        msg = self.kind.message
        if value is not None:
            msg = f"{msg}: {value!r}"
        super().__init__(msg)


class InvalidNameLength(RaceInputError):
    kind = ErrorKind.INVALID_NAME_LENGTH


class DuplicatedName(RaceInputError):
    kind = ErrorKind.DUPLICATED_NAME


class InvalidTrialCount(RaceInputError):
    kind = ErrorKind.INVALID_TRIAL_COUNT


class EmptyParticipantList(RaceInputError):
    kind = ErrorKind.EMPTY_PARTICIPANT_LIST


class InvalidPosition(RaceInputError):
    kind = ErrorKind.INVALID_POSITION


class RaceStateError(RuntimeError):
    """Engine operation called in a phase where it is not allowed."""
