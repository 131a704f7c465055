from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from rich.highlighter import Highlighter
from rich.logging import RichHandler
from typing_extensions import override

from racing_game.core.palettes import get_car_color

if TYPE_CHECKING:
    from rich.text import Text

    from racing_game.engine.race_engine import RaceEngine

LOGGER_NAME = "racing_game"

# Captures "0:car1" style racer references.
# Group "prefix": "0:"
# Group "name": "car1"
RACER_COMPOSITE_PATTERN = re.compile(r"(?P<prefix>\b\d+:)(?P<name>[^\s,|]{1,4})")

COLOR = {
    "move": "bold #23d18b",  # light green
    "stay": "bold #808080",  # grey
    "warning": "bold bright_red",
    "prefix": "grey50",
    "round": "bold #d670d6",  # magenta
    "draw": "bold #f5f543",  # yellow
    "winner": "bold yellow",
}


class ContextFilter(logging.Filter):
    """Inject per-engine runtime context into every log record."""

    def __init__(self, engine: RaceEngine, name: str = "") -> None:
        super().__init__(name)
        self.engine: RaceEngine = engine

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        logctx = self.engine.log_context
        record.current_round = logctx.current_round
        record.round_log_count = logctx.round_log_count
        record.racer_repr = logctx.current_racer_repr
        record.engine_id = logctx.engine_id
        logctx.inc_log_count()
        return True


class RichMarkupFormatter(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord) -> str:
        current_round = getattr(record, "current_round", 0)
        round_log_count = getattr(record, "round_log_count", 0)
        racer_repr = getattr(record, "racer_repr", "_")
        engine_id = getattr(record, "engine_id", 0)

        prefix = f"{engine_id} {current_round}.{racer_repr}.{round_log_count}"
        message = record.getMessage()

        # The Highlighter applies stronger colors on top of the grey prefix.
        return f"[{COLOR['prefix']}]{prefix:<16}[/{COLOR['prefix']}]  {message}"


class RaceLogHighlighter(Highlighter):
    @override
    def highlight(self, text: Text) -> None:
        text.highlight_regex(r"\bMove\b", COLOR["move"])
        text.highlight_regex(r"\bStay\b", COLOR["stay"])
        text.highlight_regex(r"\bROUND \d+\b", COLOR["round"])
        text.highlight_regex(r"\bDraw: \d\b", COLOR["draw"])
        text.highlight_regex(r"\bWinners?:", COLOR["winner"])
        text.highlight_regex(r"!!!", COLOR["warning"])

        # Color the lane prefix with the car's color, the name bold white
        for match in RACER_COMPOSITE_PATTERN.finditer(text.plain):
            prefix_span = match.span("prefix")
            name_span = match.span("name")
            lane = int(match.group("prefix").rstrip(":"))

            text.stylize(get_car_color(lane), start=prefix_span[0], end=prefix_span[1])
            text.stylize("bold white", start=name_span[0], end=name_span[1])


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    handler = RichHandler(
        markup=True,
        show_path=False,
        show_time=False,
        highlighter=RaceLogHighlighter(),
    )
    handler.setFormatter(RichMarkupFormatter())
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
