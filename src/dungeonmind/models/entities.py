"""Board positions and units.

Models:
    Position: A grid cell, possibly off the board.
    Entity: A living unit on the board.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dungeonmind.core.constants import MAX_COORD, MIN_COORD
from dungeonmind.models.enums import EntityClass, Side


class Position(BaseModel):
    """A grid cell.

    Positions are not bounds-checked on construction so that a proposed
    move off the board can be represented and then rejected by the
    applier. Use ``in_bounds`` to test placement.

    Attributes:
        x: Column, 0 on the left.
        y: Row, 0 at the top (enemy edge).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    x: int = Field(description="Column index")
    y: int = Field(description="Row index")

    @property
    def in_bounds(self) -> bool:
        """Check whether the cell lies on the board."""
        return MIN_COORD <= self.x <= MAX_COORD and MIN_COORD <= self.y <= MAX_COORD

    def manhattan_distance(self, other: "Position") -> int:
        """Sum of the axis deltas to another cell."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def chebyshev_distance(self, other: "Position") -> int:
        """Largest axis delta to another cell (diagonals count as 1)."""
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Entity(BaseModel):
    """A unit on the board.

    Entities are immutable; the engine produces updated copies. An entity
    never exists with zero HP: the applier removes it from the roster in
    the same step that brings it to zero.

    Attributes:
        id: Unique identifier, stable for the entity's lifetime.
        name: Display name.
        side: Faction the entity fights for.
        entity_class: Cosmetic class tag.
        hp: Current hit points.
        max_hp: Maximum hit points.
        position: Cell the entity occupies.
        emoji: Glyph rendered on the board.
        description: Short flavor description.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Unique entity identifier")
    name: str = Field(min_length=1, description="Display name")
    side: Side = Field(description="Faction")
    entity_class: EntityClass = Field(default=EntityClass.WARRIOR, description="Cosmetic class")
    hp: Annotated[int, Field(ge=0)] = Field(description="Current hit points")
    max_hp: Annotated[int, Field(gt=0)] = Field(description="Maximum hit points")
    position: Position = Field(description="Occupied cell")
    emoji: str = Field(default="❔", description="Board glyph")
    description: str = Field(default="", description="Flavor description")

    @model_validator(mode="after")
    def validate_vitals_and_placement(self) -> "Entity":
        """Ensure HP does not exceed the maximum and the entity is on the board."""
        if self.hp > self.max_hp:
            raise ValueError(f"hp ({self.hp}) exceeds max_hp ({self.max_hp})")
        if not self.position.in_bounds:
            raise ValueError(f"position {self.position} is off the board")
        return self

    @property
    def hp_percentage(self) -> float:
        """Get remaining HP as a percentage of the maximum."""
        return (self.hp / self.max_hp) * 100

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def with_hp(self, hp: int) -> "Entity":
        """Return a copy with HP clamped to [0, max_hp]."""
        return self.model_copy(update={"hp": max(0, min(self.max_hp, hp))})

    def moved_to(self, position: Position) -> "Entity":
        """Return a copy standing on another cell."""
        return self.model_copy(update={"position": position})


__all__ = [
    "Position",
    "Entity",
]
