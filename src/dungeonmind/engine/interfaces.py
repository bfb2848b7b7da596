"""Collaborator contracts consumed by the turn controller.

The controller never talks to a model directly. It asks an ActionSource
for a batch and a ScenarioSource for a roster; the ``dm`` package
provides LLM-backed implementations and tests provide scripted ones.
Implementations are expected to degrade to a safe default (an empty
batch, the default roster) rather than raise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from dungeonmind.models import Action, Entity, GameState, Side


@runtime_checkable
class ActionSource(Protocol):
    """Proposes one sub-turn's actions for a side."""

    def propose_actions(self, state: "GameState", side: "Side") -> list["Action"]:
        """Return the batch for ``side`` given the full current state."""
        ...


@runtime_checkable
class ScenarioSource(Protocol):
    """Produces the opening roster for a themed encounter."""

    def generate(self, theme: str) -> list["Entity"]:
        """Return a fresh roster for ``theme``."""
        ...


__all__ = [
    "ActionSource",
    "ScenarioSource",
]
