"""Board representation shared by ship grids and tracking grids.

A board is a plain ``BOARD_SIZE`` x ``BOARD_SIZE`` list of rows. Each cell
holds a :class:`Cell`, whose value doubles as the glyph printed on the
console:

 - ship grid:     ``~`` water, ``1`` ship segment
 - tracking grid: ``~`` not fired upon yet, ``X`` hit, ``0`` miss
"""

from __future__ import annotations

from enum import Enum
from typing import List

from .config import BOARD_SIZE


class Cell(str, Enum):
    """State of a single board cell."""

    WATER = "~"
    SHIP = "1"
    HIT = "X"
    MISS = "0"

    def __str__(self) -> str:
        return self.value


Board = List[List[Cell]]


def initialize(size: int = BOARD_SIZE) -> Board:
    """Return a fresh *size* x *size* board filled with water."""
    return [[Cell.WATER for _ in range(size)] for _ in range(size)]


def count(board: Board, cell: Cell) -> int:
    """Number of cells on *board* currently in state *cell*."""
    return sum(row.count(cell) for row in board)
