from unittest.mock import MagicMock

import pytest

from racing_game.engine.scenario import RaceScenario


@pytest.fixture
def scenario():
    """Factory fixture to create scenarios with scripted draws."""

    def _builder(names, trial_count, draws=None):
        mock_rng = MagicMock()
        if draws is not None:
            mock_rng.randint.side_effect = draws  # pyright: ignore[reportAny]
        return RaceScenario(names, trial_count, rng=mock_rng)

    return _builder
