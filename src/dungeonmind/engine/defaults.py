"""Built-in fallback encounter used when scenario generation fails."""

from __future__ import annotations

from dungeonmind.models import Entity, EntityClass, Position, Side


def default_roster() -> list[Entity]:
    """Return the fixed two-versus-two fallback encounter.

    Returns:
        Fresh list of entities at full HP.
    """
    return [
        Entity(
            id="h1",
            name="Sir Alaric",
            side=Side.HERO,
            entity_class=EntityClass.WARRIOR,
            hp=30,
            max_hp=30,
            position=Position(x=4, y=9),
            emoji="🛡️",
            description="A brave knight.",
        ),
        Entity(
            id="h2",
            name="Elara",
            side=Side.HERO,
            entity_class=EntityClass.MAGE,
            hp=20,
            max_hp=20,
            position=Position(x=3, y=8),
            emoji="🔮",
            description="A mystic sorceress.",
        ),
        Entity(
            id="e1",
            name="Goblin",
            side=Side.ENEMY,
            entity_class=EntityClass.MONSTER,
            hp=15,
            max_hp=15,
            position=Position(x=4, y=1),
            emoji="👹",
            description="A sneaky goblin.",
        ),
        Entity(
            id="e2",
            name="Orc",
            side=Side.ENEMY,
            entity_class=EntityClass.MONSTER,
            hp=25,
            max_hp=25,
            position=Position(x=5, y=2),
            emoji="👺",
            description="A brutal orc.",
        ),
    ]


__all__ = ["default_roster"]
