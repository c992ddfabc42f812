"""Two-player game session logic (hot-seat, single console).

A :class:`GameSession` owns one :class:`GameState` and advances it one shot
at a time. It never reads input itself: the caller supplies a raw target
token per turn, either through :meth:`GameSession.play_turn` or by handing
:meth:`GameSession.run` a callback that produces tokens.

Turn lifecycle
--------------
PLAYER1_TURN  player 1 fires at player 2's ship grid
PLAYER2_TURN  player 2 fires at player 1's ship grid
GAME_OVER     a tracking grid holds a whole fleet's worth of hits

After every shot the active player toggles, whatever the outcome, and both
tracking grids are checked for a winner (see :func:`rules.check_winner`).
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from . import config as _cfg
from .events import Category, Event
from .grid import Board, initialize
from .io_utils import snapshot
from .placement import PlacedShip, RandomSource, place_fleet
from .rules import check_winner
from .shots import Outcome, fire

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """Raised when a turn is played after the game has ended."""


class Phase(Enum):
    PLAYER1_TURN = 1
    PLAYER2_TURN = 2
    GAME_OVER = 3


@dataclass
class GameState:
    """All four boards of a match plus whose turn it is."""

    player1_grid: Board
    player2_grid: Board
    player1_tracking: Board
    player2_tracking: Board
    phase: Phase = Phase.PLAYER1_TURN
    winner: Optional[int] = None
    # Shots fired per player, invalid tokens included
    shots: Dict[int, int] = field(default_factory=lambda: {1: 0, 2: 0})
    fleets: Dict[int, List[PlacedShip]] = field(default_factory=dict)

    @classmethod
    def new(
        cls,
        rng: Optional[RandomSource] = None,
        *,
        max_attempts: int = _cfg.PLACEMENT_MAX_ATTEMPTS,
    ) -> "GameState":
        """Create empty grids and place both fleets, player 1 first."""
        if rng is None:
            rng = random.Random()
        state = cls(
            player1_grid=initialize(),
            player2_grid=initialize(),
            player1_tracking=initialize(),
            player2_tracking=initialize(),
        )
        state.fleets[1] = place_fleet(state.player1_grid, rng, max_attempts=max_attempts)
        state.fleets[2] = place_fleet(state.player2_grid, rng, max_attempts=max_attempts)
        return state

    @property
    def active_player(self) -> Optional[int]:
        if self.phase is Phase.PLAYER1_TURN:
            return 1
        if self.phase is Phase.PLAYER2_TURN:
            return 2
        return None

    def ship_grid(self, player: int) -> Board:
        return self.player1_grid if player == 1 else self.player2_grid

    def tracking_grid(self, player: int) -> Board:
        return self.player1_tracking if player == 1 else self.player2_tracking


@dataclass(frozen=True)
class TurnResult:
    """What happened on one turn, ready for display."""

    player: int
    token: str
    outcome: Outcome
    tracking: List[List[str]]
    winner: Optional[int] = None

    @property
    def game_over(self) -> bool:
        return self.winner is not None


class GameSession:
    """Drive a single match from the first shot to the winner announcement."""

    def __init__(self, state: Optional[GameState] = None, *, seed: Optional[int] = None) -> None:
        """Wrap *state*, or build a fresh one from *seed* (``None`` = unseeded)."""
        self.state = state if state is not None else GameState.new(random.Random(seed))
        self._subs: List[Callable[[Event], None]] = []

    # -------------------- event bus --------------------
    def subscribe(self, cb: Callable[[Event], None]) -> None:
        """Allow external components (console/logger/tests) to receive game events."""
        self._subs.append(cb)

    def _emit(self, ev: Event) -> None:
        for cb in tuple(self._subs):
            try:
                cb(ev)
            except Exception:
                # Don't let a misbehaving subscriber end the match
                logger.exception("Event subscriber failed on %s", ev.type)

    def start(self) -> None:
        """Announce the match to subscribers."""
        logger.info("New game: player %s to fire first", self.state.active_player)
        self._emit(Event(Category.SYSTEM, "start", {"player": self.state.active_player}))

    # -------------------- gameplay --------------------
    @property
    def active_player(self) -> Optional[int]:
        return self.state.active_player

    @property
    def is_over(self) -> bool:
        return self.state.phase is Phase.GAME_OVER

    def play_turn(self, token: str) -> TurnResult:
        """Let the active player fire at *token* and advance the state machine."""
        state = self.state
        player = state.active_player
        if player is None:
            raise GameOverError(f"Game already won by player {state.winner}")

        opponent = 2 if player == 1 else 1
        tracking = state.tracking_grid(player)
        outcome = fire(token, state.ship_grid(opponent), tracking)
        state.shots[player] += 1
        self._emit(Event(Category.TURN, "shot", {"player": player, "token": token, "outcome": outcome}))

        # Swap turns, then look for a sunk fleet on either tracking grid
        state.phase = Phase.PLAYER2_TURN if player == 1 else Phase.PLAYER1_TURN
        winner = check_winner(state)
        if winner is not None:
            self._conclude(winner)

        return TurnResult(
            player=player,
            token=token,
            outcome=outcome,
            tracking=snapshot(tracking),
            winner=winner,
        )

    def run(self, read_target: Callable[[int], str]) -> int:
        """Play turns until the game ends and return the winner.

        *read_target* is called with the active player and must return that
        player's raw target token.
        """
        while not self.is_over:
            player = self.state.active_player
            self.play_turn(read_target(player))
        return self.state.winner  # type: ignore[return-value]

    def _conclude(self, winner: int) -> None:
        state = self.state
        state.phase = Phase.GAME_OVER
        state.winner = winner
        shots = state.shots[winner]
        logger.info("Player %d is winner! (%d shots)", winner, shots)
        self._emit(Event(Category.TURN, "end", {"winner": winner, "shots": shots}))
