"""Randomised fleet placement.

Each ship is dropped at a random anchor with a random orientation until the
placement fits, then written into the ship grid as a run of ``Cell.SHIP``.

Orientation naming follows the game's long-standing convention: a
*horizontal* ship grows along the row index (its column stays fixed) while a
*vertical* ship grows along the column index.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from . import config as _cfg
from .grid import Board, Cell

logger = logging.getLogger(__name__)


class PlacementError(RuntimeError):
    """Raised when a ship could not be placed within the retry cap."""


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class PlacedShip:
    """Where a single ship ended up on its grid."""

    length: int
    row: int
    col: int
    horizontal: bool

    @property
    def positions(self) -> list[tuple[int, int]]:
        if self.horizontal:
            return [(self.row + i, self.col) for i in range(self.length)]
        return [(self.row, self.col + i) for i in range(self.length)]


def can_place_ship(board: Board, row: int, col: int, length: int, horizontal: bool) -> bool:
    """Return ``True`` if a ship of *length* fits at (*row*, *col*)."""
    size = len(board)
    if horizontal:
        if row + length > size:
            return False
        for i in range(length):
            if board[row + i][col] is Cell.SHIP:
                return False
    else:
        if col + length > size:
            return False
        for i in range(length):
            if board[row][col + i] is Cell.SHIP:
                return False
    return True


def do_place_ship(board: Board, row: int, col: int, length: int, horizontal: bool) -> PlacedShip:
    """Mutating helper that writes the ship cells into *board*."""
    ship = PlacedShip(length=length, row=row, col=col, horizontal=horizontal)
    for r, c in ship.positions:
        board[r][c] = Cell.SHIP
    return ship


def place_fleet(
    board: Board,
    rng: Optional[RandomSource] = None,
    *,
    fleet: Iterable[int] = _cfg.FLEET,
    max_attempts: int = _cfg.PLACEMENT_MAX_ATTEMPTS,
) -> list[PlacedShip]:
    """Randomly position every ship of *fleet* on *board* without overlap.

    Args:
        board: Ship grid, mutated in place.
        rng: Anything with ``randrange``; pass a seeded ``random.Random`` for
            reproducible layouts. ``None`` uses a fresh unseeded generator.
        fleet: Ship lengths, placed in the given order.
        max_attempts: Random draws allowed per ship.

    Returns:
        One :class:`PlacedShip` per ship, in placement order.

    Raises:
        PlacementError: a ship found no legal spot within *max_attempts*.
            Ships placed before it stay on the board.
    """
    if rng is None:
        rng = random.Random()
    size = len(board)
    placed: list[PlacedShip] = []

    for length in fleet:
        for attempt in range(1, max_attempts + 1):
            row = rng.randrange(size)
            col = rng.randrange(size)
            horizontal = rng.randrange(2) == 0

            if can_place_ship(board, row, col, length, horizontal):
                placed.append(do_place_ship(board, row, col, length, horizontal))
                logger.debug(
                    "Placed length-%d ship at (%d, %d) horizontal=%s after %d attempt(s)",
                    length,
                    row,
                    col,
                    horizontal,
                    attempt,
                )
                break
        else:
            raise PlacementError(f"Could not place length-{length} ship after {max_attempts} attempts")

    return placed
