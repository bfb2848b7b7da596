"""Proposed unit actions.

Actions are transient: built by an action source (or by manual play),
consumed once by the applier, and never stored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from dungeonmind.models.entities import Position
from dungeonmind.models.enums import ActionKind


class Action(BaseModel):
    """A single proposed action.

    Attributes:
        actor_id: Entity performing the action.
        kind: What the actor does.
        target: Destination cell for a move.
        target_id: Target entity for an attack or heal.
        flavor_text: Narrative line, presentation only.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    actor_id: str = Field(description="Acting entity")
    kind: ActionKind = Field(description="Action kind")
    target: Position | None = Field(default=None, description="Move destination")
    target_id: str | None = Field(default=None, description="Attack or heal target")
    flavor_text: str = Field(default="", description="Narrative flavor")

    @classmethod
    def move(cls, actor_id: str, x: int, y: int, flavor_text: str = "") -> "Action":
        return cls(
            actor_id=actor_id,
            kind=ActionKind.MOVE,
            target=Position(x=x, y=y),
            flavor_text=flavor_text,
        )

    @classmethod
    def attack(cls, actor_id: str, target_id: str, flavor_text: str = "") -> "Action":
        return cls(
            actor_id=actor_id,
            kind=ActionKind.ATTACK,
            target_id=target_id,
            flavor_text=flavor_text,
        )

    @classmethod
    def heal(cls, actor_id: str, target_id: str, flavor_text: str = "") -> "Action":
        return cls(
            actor_id=actor_id,
            kind=ActionKind.HEAL,
            target_id=target_id,
            flavor_text=flavor_text,
        )

    @classmethod
    def wait(cls, actor_id: str, flavor_text: str = "") -> "Action":
        return cls(actor_id=actor_id, kind=ActionKind.WAIT, flavor_text=flavor_text)


__all__ = ["Action"]
