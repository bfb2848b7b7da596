"""Board and rules constants for DungeonMind."""

from __future__ import annotations

# =============================================================================
# Board
# =============================================================================

GRID_SIZE = 10
"""Width and height of the square board."""

MIN_COORD = 0
MAX_COORD = GRID_SIZE - 1

# =============================================================================
# Combat Dice
# =============================================================================

ATTACK_DAMAGE_DICE = "1d6+1"
"""Attack damage, 2 to 7 inclusive."""

HEAL_AMOUNT_DICE = "1d4+2"
"""Heal amount, 3 to 6 inclusive."""

# =============================================================================
# Manual Play
# =============================================================================

MANUAL_ATTACK_REACH = 1
"""Chebyshev distance at which a selected hero may attack."""

DEFAULT_MANUAL_MOVE_RANGE = 3
"""Manhattan distance a selected hero may move."""

MANUAL_ATTACK_FLAVOR = "Manual attack"
MANUAL_MOVE_FLAVOR = "Manual move"

# =============================================================================
# Scenario Generation
# =============================================================================

SCENARIO_HERO_COUNT = 3
SCENARIO_MIN_ENEMIES = 3
SCENARIO_MAX_ENEMIES = 4
