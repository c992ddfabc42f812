"""Hot-seat console front-end: two players share one terminal.

Run with ``hotseat`` (installed entry point) or ``python -m hotseat.console``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional

from . import config as _cfg
from .events import Event
from .io_utils import format_grid
from .session import GameSession
from .shots import Outcome

logger = logging.getLogger(__name__)

PROMPT = "Enter target (for example A5): "


def play(
    session: GameSession,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    *,
    reveal: bool = False,
) -> Optional[int]:
    """Run *session* against a line-based console until someone wins.

    Returns the winning player, or ``None`` if input ran out first.
    """
    state = session.state

    def on_event(ev: Event) -> None:
        if ev.type == "shot":
            # Malformed targets are announced as an ordinary miss
            write("Hit!" if ev.payload["outcome"] is Outcome.HIT else "Miss!")
        elif ev.type == "end":
            write(f"Player {ev.payload['winner']} is winner!")
            write(f"Shots fired: Player 1 = {state.shots[1]}, Player 2 = {state.shots[2]}")

    def read_target(player: int) -> str:
        write(f"Player {player}'s turn:")
        if reveal:
            write(format_grid(state.ship_grid(player), reveal=True))
        write(format_grid(state.tracking_grid(player)))
        return read_line(PROMPT)

    session.subscribe(on_event)
    session.start()
    try:
        winner = session.run(read_target)
    except (EOFError, KeyboardInterrupt):
        write("")
        logger.info("Input closed before the game ended")
        return None

    write("Game Over!")
    return winner


def main(argv: Optional[list[str]] = None) -> int:  # pragma: no cover – side-effect entrypoint
    parser = argparse.ArgumentParser(description="Two-player hot-seat Battleship")
    parser.add_argument(
        "--seed",
        type=int,
        default=_cfg.SEED,
        help="Seed for fleet placement (default: $HOTSEAT_SEED or random).",
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        default=_cfg.REVEAL,
        help="Also print the active player's own fleet each turn.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=_cfg.DEBUG,
        help="Enable debug logging.",
    )
    parser.add_argument(
        "-s",
        "--silent",
        "-q",
        "--quiet",
        dest="silent",
        action="store_true",
        help="Only log warnings and errors.",
    )
    args = parser.parse_args(argv)

    if args.silent:
        level = logging.WARNING
    elif args.debug:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    session = GameSession(seed=args.seed)
    winner = play(session, reveal=args.reveal)
    return 0 if winner is not None else 1


if __name__ == "__main__":
    sys.exit(main())
