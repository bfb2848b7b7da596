"""Game engine for DungeonMind.

Submodules:
    dice: Injectable randomness backed by the d20 library
    resolution: Pure action validation and application
    victory: Win-condition evaluation
    controller: Turn controller state machine
    interfaces: Action and scenario source contracts
    defaults: Fallback encounter

Example:
    >>> from dungeonmind.engine import TurnController
    >>> controller = TurnController(advisor, generator)
    >>> controller.new_scenario("Skeleton King")
    >>> controller.end_hero_turn()
    >>> report = controller.run_side_turn()
"""

from __future__ import annotations

# =============================================================================
# Dice Rolling
# =============================================================================
from dungeonmind.engine.dice import DiceResult, DiceRoller, RandomSource

# =============================================================================
# Resolution
# =============================================================================
from dungeonmind.engine.resolution import DEFAULT_FLAVOR_CHANCE, ActionOutcome, apply_action
from dungeonmind.engine.victory import (
    DEFEAT_MESSAGE,
    VICTORY_MESSAGE,
    WinCheck,
    enemies_defeated,
    evaluate_win,
    heroes_defeated,
)

# =============================================================================
# Turn Control
# =============================================================================
from dungeonmind.engine.controller import (
    BatchReport,
    ControllerPhase,
    TurnController,
    advance_side,
)
from dungeonmind.engine.defaults import default_roster
from dungeonmind.engine.interfaces import ActionSource, ScenarioSource


__all__ = [
    # Dice Rolling
    "RandomSource",
    "DiceResult",
    "DiceRoller",
    # Resolution
    "ActionOutcome",
    "apply_action",
    "DEFAULT_FLAVOR_CHANCE",
    "WinCheck",
    "evaluate_win",
    "heroes_defeated",
    "enemies_defeated",
    "VICTORY_MESSAGE",
    "DEFEAT_MESSAGE",
    # Turn Control
    "ControllerPhase",
    "BatchReport",
    "TurnController",
    "advance_side",
    "ActionSource",
    "ScenarioSource",
    "default_roster",
]
