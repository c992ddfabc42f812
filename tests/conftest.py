import sys
from pathlib import Path

import pytest

# Ensure local `src` directory is importable before project is installed.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from hotseat.session import GameState


class ScriptedRandom:
    """Stand-in for random.Random that replays a fixed list of draws."""

    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        value = next(self._values)
        assert 0 <= value < stop, f"scripted draw {value} outside range({stop})"
        return value


class FixedRandom:
    """Always draws the largest value allowed (row 9, col 9, horizontal)."""

    def randrange(self, stop):
        return 9 if stop > 9 else 0


# Draws are (row, col, orientation) per ship, lengths 2, 3, 4, 5.
# Orientation 0 = horizontal (grows along the row index), 1 = vertical.
# No ship touches row 0, which target tokens cannot address.
PLAYER1_DRAWS = [1, 0, 1, 3, 2, 0, 2, 5, 1, 4, 9, 0]
PLAYER2_DRAWS = [9, 0, 1, 1, 1, 0, 6, 3, 1, 2, 8, 0]


@pytest.fixture
def scripted_state() -> GameState:
    """GameState with both fleets at known positions."""
    return GameState.new(ScriptedRandom(PLAYER1_DRAWS + PLAYER2_DRAWS))
