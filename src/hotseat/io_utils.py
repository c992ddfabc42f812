# io_utils.py
"""
Rendering helpers shared by GameSession and the console
–––––––––––––––––––––––––––––––––––––––––––––––––––––––
• snapshot()    – Board → 10×10 list of glyphs (ships hidden unless revealed)
• grid_rows()   – Board → ["~ ~ X …", …] one string per row
• format_grid() – Board → printable block with column letters and row numbers
"""

from typing import List

from .config import COLUMN_LETTERS
from .grid import Board, Cell


def snapshot(board: Board, reveal: bool = False) -> List[List[str]]:
    """Copy *board* into plain glyphs.

    Ship segments are only shown when *reveal* is set (the owner's own
    fleet); otherwise they render as water so a ship grid never leaks
    to the opponent.
    """
    hidden = {Cell.SHIP: Cell.WATER} if not reveal else {}
    return [[hidden.get(cell, cell).value for cell in row] for row in board]


def grid_rows(board: Board, reveal: bool = False) -> List[str]:
    return [" ".join(row) for row in snapshot(board, reveal=reveal)]


def format_grid(board: Board, reveal: bool = False) -> str:
    """Render *board* the way the console prints it.

    The header lists the column letters; each row starts with its row index
    (0-based, the same number a target token uses).
    """
    lines = ["  " + "".join(f"{letter} " for letter in COLUMN_LETTERS[: len(board)])]
    for idx, row in enumerate(snapshot(board, reveal=reveal)):
        lines.append(f"{idx} " + "".join(f"{glyph} " for glyph in row))
    return "\n".join(lines)
