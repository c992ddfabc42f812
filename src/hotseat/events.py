"""Lightweight event model used by GameSession to decouple game logic from I/O.

The session emits typed events that the console (or any other subscriber,
e.g. a logger or a test) can consume without parsing printed text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict


class Category(Enum):
    """High-level event categories."""

    TURN = auto()  # per-turn lifecycle (shot, end)
    SYSTEM = auto()  # session setup


@dataclass(slots=True)
class Event:
    """Event emitted by GameSession."""

    category: Category
    type: str  # finer-grained identifier: "start", "shot", "end"
    payload: Dict[str, Any]
