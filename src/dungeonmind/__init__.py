"""DungeonMind - AI-driven tactical skirmishes on a 10x10 grid.

A game-master model generates a themed encounter and commands the enemy
side (and optionally the heroes). The engine owns every rule: dice,
movement, damage, healing, death, and victory.

Packages:
    core: Configuration, logging, exceptions, constants
    models: Pydantic models for the board and the match
    engine: Action resolution and the turn controller
    dm: LLM-backed scenario and tactics sources
    ui: Streamlit interface
"""

from __future__ import annotations

from dungeonmind.engine import TurnController, apply_action
from dungeonmind.models import Action, Entity, GameState, Position, Side


__version__ = "0.1.0"

__all__ = [
    "__version__",
    "TurnController",
    "apply_action",
    "Action",
    "Entity",
    "GameState",
    "Position",
    "Side",
]
