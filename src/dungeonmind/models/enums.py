"""Enumeration types for DungeonMind."""

from __future__ import annotations

from enum import StrEnum


class Side(StrEnum):
    """The two factions on the board."""

    HERO = "hero"
    ENEMY = "enemy"

    @property
    def opponent(self) -> "Side":
        """Get the opposing side."""
        return Side.ENEMY if self is Side.HERO else Side.HERO


class EntityClass(StrEnum):
    """Cosmetic unit class. Has no effect on resolution."""

    WARRIOR = "warrior"
    MAGE = "mage"
    ROGUE = "rogue"
    CLERIC = "cleric"
    MONSTER = "monster"
    BOSS = "boss"


class ActionKind(StrEnum):
    """Kinds of action a unit may take in a sub-turn."""

    MOVE = "move"
    ATTACK = "attack"
    HEAL = "heal"
    WAIT = "wait"


class LogCategory(StrEnum):
    """Category of an adventure log entry."""

    INFO = "info"
    """Narration, flavor text, and match lifecycle."""

    COMBAT = "combat"
    """Damage, deaths, and the match result."""

    AI = "ai"
    """Healing and AI activity."""


__all__ = [
    "Side",
    "EntityClass",
    "ActionKind",
    "LogCategory",
]
