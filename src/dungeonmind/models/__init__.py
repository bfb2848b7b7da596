"""Pydantic models for the board, its units, and the match.

Exports:
    Enums: Side, EntityClass, ActionKind, LogCategory.
    Board: Position, Entity, Roster.
    Match: Action, LogEvent, GameState.
"""

from __future__ import annotations

from dungeonmind.models.actions import Action
from dungeonmind.models.entities import Entity, Position
from dungeonmind.models.enums import ActionKind, EntityClass, LogCategory, Side
from dungeonmind.models.game_state import GameState, LogEvent
from dungeonmind.models.roster import Roster


__all__ = [
    # Enums
    "Side",
    "EntityClass",
    "ActionKind",
    "LogCategory",
    # Board
    "Position",
    "Entity",
    "Roster",
    # Match
    "Action",
    "LogEvent",
    "GameState",
]
