"""Match state and adventure log models.

Models:
    LogEvent: One entry in the adventure log.
    GameState: Immutable snapshot of a match.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dungeonmind.models.entities import Entity
from dungeonmind.models.enums import LogCategory, Side
from dungeonmind.models.roster import Roster


class LogEvent(BaseModel):
    """An adventure log entry.

    Attributes:
        turn: Turn number the event happened in.
        message: Free-text message.
        category: Display category.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    turn: Annotated[int, Field(ge=1)] = Field(description="Turn number")
    message: str = Field(description="Log message")
    category: LogCategory = Field(default=LogCategory.INFO, description="Entry category")


class GameState(BaseModel):
    """Snapshot of a match.

    A turn is one hero sub-turn followed by one enemy sub-turn. The state
    is frozen: the engine derives new snapshots rather than mutating.

    Attributes:
        entities: Living units in insertion order.
        turn: Current turn number, starting at 1.
        active_side: Side whose sub-turn it is.
        is_game_over: Whether one side has been eliminated.
        winner: Winning side once the match is over.

    Example:
        >>> state = GameState.initial(entities)
        >>> state.roster.heroes()
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    entities: tuple[Entity, ...] = Field(default=(), description="Living units")
    turn: Annotated[int, Field(ge=1)] = Field(default=1, description="Turn counter")
    active_side: Side = Field(default=Side.HERO, description="Side to act")
    is_game_over: bool = Field(default=False, description="Terminal flag")
    winner: Side | None = Field(default=None, description="Winning side")

    @model_validator(mode="after")
    def validate_board_and_outcome(self) -> "GameState":
        """Check the board invariants and that a winner exists only when the match is over."""
        Roster(self.entities)
        if self.winner is not None and not self.is_game_over:
            raise ValueError("winner set on a match that is not over")
        return self

    @classmethod
    def initial(cls, entities: Iterable[Entity]) -> "GameState":
        """Create the opening state for a freshly generated roster."""
        return cls(entities=tuple(entities))

    @property
    def roster(self) -> Roster:
        """Indexed view of the living units."""
        return Roster(self.entities)

    def evolve(self, **changes: Any) -> "GameState":
        """Return a validated copy with some fields replaced."""
        if "roster" in changes:
            changes["entities"] = changes.pop("roster").entities
        return type(self)(**{**dict(self), **changes})


__all__ = [
    "LogEvent",
    "GameState",
]
