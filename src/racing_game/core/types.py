from __future__ import annotations

from enum import StrEnum

# Name rules
MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 4
NAME_DELIMITER = ","

# Movement rule: one draw from [DRAW_MIN, DRAW_MAX], advance on >= MOVE_THRESHOLD
DRAW_MIN = 0
DRAW_MAX = 9
MOVE_THRESHOLD = 4

POSITION_MARKER = "-"



class RacePhase(StrEnum):
    CREATED = "created"
    PARTICIPANTS_READY = "participants_ready"
    RUNNING = "running"
    FINISHED = "finished"
