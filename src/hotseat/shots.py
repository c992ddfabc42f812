"""Shot resolution: apply one target token to a pair of grids."""

from __future__ import annotations

import logging
from enum import Enum

from .coord_utils import InvalidTargetFormat, parse_target
from .grid import Board, Cell

logger = logging.getLogger(__name__)


class Outcome(Enum):
    HIT = "hit"
    MISS = "miss"
    INVALID = "invalid"  # malformed token; the turn is spent as a miss


def fire(token: str, target_grid: Board, tracking_grid: Board) -> Outcome:
    """Resolve a shot at *token* against *target_grid*.

    The result is recorded on *tracking_grid* (the shooter's view). A
    malformed token leaves both grids untouched and yields
    ``Outcome.INVALID``. Firing at an already-resolved cell simply writes
    the same result again.
    """
    try:
        row, col = parse_target(token)
    except InvalidTargetFormat as exc:
        logger.debug("fire(%r) rejected: %s", token, exc)
        return Outcome.INVALID

    if target_grid[row][col] is Cell.SHIP:
        tracking_grid[row][col] = Cell.HIT
        outcome = Outcome.HIT
    else:
        tracking_grid[row][col] = Cell.MISS
        outcome = Outcome.MISS
    logger.debug("fire(%r) -> (%d, %d) %s", token, row, col, outcome.value)
    return outcome
