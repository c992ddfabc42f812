"""Target token parsing.

A token is a column letter ``A``-``J`` followed by a row number, e.g. ``B5``.
The number is used as the row index unchanged, and tokens must be exactly two
characters long, so only rows 1-9 can be targeted: row 0 is unreachable and
``A10`` is rejected. Both quirks are part of the game's established rules.
"""

from typing import Tuple

from .config import COLUMN_LETTERS


class InvalidTargetFormat(ValueError):
    """Raised when a target token is malformed or out of range."""


def parse_target(token: str) -> Tuple[int, int]:
    """
    Convert a token like 'C7' to a (row, col) tuple, e.g. (7, 2).
    """
    if len(token) != 2:
        raise InvalidTargetFormat(f"Target must be 2 characters: {token!r}")
    letter = token[0]
    if letter not in COLUMN_LETTERS:
        raise InvalidTargetFormat(f"Column must be one of A-J: {token!r}")
    try:
        number = int(token[1:])
    except ValueError:
        raise InvalidTargetFormat(f"Row is not a number: {token!r}") from None
    if number < 1 or number > 10:
        raise InvalidTargetFormat(f"Row must be within 1-10: {token!r}")
    return number, COLUMN_LETTERS.index(letter)


def is_valid_target(token: str) -> bool:
    try:
        parse_target(token)
    except InvalidTargetFormat:
        return False
    return True


def format_target(row: int, col: int) -> str:
    """
    Convert (row, col) back to the token that addresses it, e.g. (7, 2) -> 'C7'.
    """
    return f"{COLUMN_LETTERS[col]}{row}"
