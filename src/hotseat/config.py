"""Central configuration for runtime-tunable parameters.

Board geometry and the fleet are fixed. The remaining constants can be
overridden via environment variables so that the console game runs with
sensible defaults while the test-suite (or a curious player) can pin a seed
or tighten the placement retry cap.
"""

from __future__ import annotations

import os

# ===========================================================================
# Game Constants
# ===========================================================================
# Width and height of every board. Not overridable.
BOARD_SIZE: int = 10

# Ship lengths placed for each player, in placement order. Not overridable.
FLEET: tuple[int, ...] = (2, 3, 4, 5)

# Number of hits that sinks a whole fleet (2 + 3 + 4 + 5).
FLEET_CELLS: int = sum(FLEET)

# Column letters accepted in a target token, "A" -> column 0.
COLUMN_LETTERS: str = "ABCDEFGHIJ"


# ===========================================================================
# Placement
# ===========================================================================
# HOTSEAT_PLACEMENT_MAX_ATTEMPTS: random draws allowed per ship before the
#   placement engine gives up with PlacementError.
#   Defaults to 10000, far above what a 14-of-100 cell fleet ever needs.
#   Example: export HOTSEAT_PLACEMENT_MAX_ATTEMPTS=500
PLACEMENT_MAX_ATTEMPTS: int = int(os.getenv("HOTSEAT_PLACEMENT_MAX_ATTEMPTS", "10000"))

# HOTSEAT_SEED: integer seed for the console game's random fleet placement.
#   Unset means a fresh, unseeded game every run.
#   Can also be set via the `--seed` CLI flag.
#   Example: export HOTSEAT_SEED=42
SEED: int | None = int(os.getenv("HOTSEAT_SEED")) if os.getenv("HOTSEAT_SEED") else None


# ===========================================================================
# Console
# ===========================================================================
# HOTSEAT_REVEAL: If "1", the console also prints the active player's own
#   fleet before each prompt. Defaults to "0" (tracking grid only).
#   Example: export HOTSEAT_REVEAL=1
REVEAL: bool = os.getenv("HOTSEAT_REVEAL", "0") == "1"


# ===========================================================================
# Debugging and Logging
# ===========================================================================
# HOTSEAT_DEBUG: If "1", enables detailed debug logging across modules.
#   Defaults to "0" (disabled).
#   Example: export HOTSEAT_DEBUG=1
DEBUG: bool = os.getenv("HOTSEAT_DEBUG", "0") == "1"
