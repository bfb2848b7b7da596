"""Action validation and application.

``apply_action`` is a pure transition: it takes a GameState snapshot and
one Action and returns a new snapshot plus the log events the action
produced. Invalid actions (missing actor, missing target, blocked or
off-board destination) resolve as silent no-ops because a batch may
reference units that an earlier action in the same batch already
removed.

Resolution order:
1. A finished match ignores further actions.
2. The actor is resolved by id; a missing actor is a no-op.
3. The action is dispatched by kind.
4. Flavor text of a resolved action may be surfaced as an info event.
5. The win condition is re-derived on the resulting roster.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

from dungeonmind.core.logging import get_logger
from dungeonmind.engine.dice import RandomSource
from dungeonmind.engine.victory import evaluate_win, outcome_event
from dungeonmind.models import (
    Action,
    ActionKind,
    Entity,
    GameState,
    LogCategory,
    LogEvent,
    Roster,
)


logger = get_logger(__name__)

DEFAULT_FLAVOR_CHANCE = 0.3


class ActionOutcome(NamedTuple):
    """Result of applying one action."""

    state: GameState
    events: tuple[LogEvent, ...]


Resolution = tuple[Roster, list[LogEvent]]
Resolver = Callable[[Roster, Entity, Action, RandomSource, int], "Resolution | None"]


# =============================================================================
# Per-kind resolvers
# =============================================================================


def _resolve_move(
    roster: Roster,
    actor: Entity,
    action: Action,
    dice: RandomSource,
    turn: int,
) -> Resolution | None:
    if action.target is None or not roster.is_free(action.target):
        logger.debug(
            "Move dropped",
            actor=actor.id,
            target=str(action.target) if action.target else None,
        )
        return None
    return roster.replace(actor.moved_to(action.target)), []


def _resolve_attack(
    roster: Roster,
    actor: Entity,
    action: Action,
    dice: RandomSource,
    turn: int,
) -> Resolution | None:
    target = roster.get(action.target_id)
    if target is None:
        logger.debug("Attack dropped", actor=actor.id, target_id=action.target_id)
        return None

    damage = dice.roll_damage()
    wounded = target.with_hp(target.hp - damage)
    events = [
        LogEvent(
            turn=turn,
            message=f"{actor.name} hits {target.name} for {damage} dmg!",
            category=LogCategory.COMBAT,
        )
    ]

    # Removal happens in the same snapshot as the killing blow
    if wounded.hp == 0:
        events.append(
            LogEvent(turn=turn, message=f"{target.name} falls!", category=LogCategory.COMBAT)
        )
        logger.info("Entity fell", attacker=actor.id, target=target.id, damage=damage)
        return roster.remove(target.id), events

    logger.debug("Attack resolved", attacker=actor.id, target=target.id, damage=damage)
    return roster.replace(wounded), events


def _resolve_heal(
    roster: Roster,
    actor: Entity,
    action: Action,
    dice: RandomSource,
    turn: int,
) -> Resolution | None:
    target = roster.get(action.target_id)
    if target is None:
        logger.debug("Heal dropped", actor=actor.id, target_id=action.target_id)
        return None

    amount = dice.roll_heal()
    healed = target.with_hp(target.hp + amount)
    logger.debug("Heal resolved", healer=actor.id, target=target.id, amount=amount)
    return roster.replace(healed), [
        LogEvent(
            turn=turn,
            message=f"{actor.name} heals {target.name} for {amount}.",
            category=LogCategory.AI,
        )
    ]


def _resolve_wait(
    roster: Roster,
    actor: Entity,
    action: Action,
    dice: RandomSource,
    turn: int,
) -> Resolution | None:
    return roster, []


_RESOLVERS: dict[ActionKind, Resolver] = {
    ActionKind.MOVE: _resolve_move,
    ActionKind.ATTACK: _resolve_attack,
    ActionKind.HEAL: _resolve_heal,
    ActionKind.WAIT: _resolve_wait,
}


# =============================================================================
# Public API
# =============================================================================


def apply_action(
    state: GameState,
    action: Action,
    dice: RandomSource,
    *,
    flavor_chance: float = DEFAULT_FLAVOR_CHANCE,
) -> ActionOutcome:
    """Apply one action to a state snapshot.

    Args:
        state: Snapshot to apply the action to. Never mutated.
        action: The proposed action.
        dice: Source of damage, heal, and flavor rolls.
        flavor_chance: Probability that flavor text is logged.

    Returns:
        ActionOutcome with the new snapshot and the emitted events. A
        dropped action returns the input snapshot and no events.
    """
    if state.is_game_over:
        logger.debug("Action ignored after game over", actor=action.actor_id)
        return ActionOutcome(state, ())

    roster = state.roster
    actor = roster.get(action.actor_id)
    if actor is None:
        logger.debug("Action dropped, actor missing", actor=action.actor_id, kind=action.kind)
        return ActionOutcome(state, ())

    resolved = _RESOLVERS[action.kind](roster, actor, action, dice, state.turn)
    if resolved is None:
        return ActionOutcome(state, ())

    new_roster, events = resolved
    if action.flavor_text and dice.chance(flavor_chance):
        events.append(
            LogEvent(turn=state.turn, message=f'"{action.flavor_text}"', category=LogCategory.INFO)
        )

    check = evaluate_win(new_roster)
    if check.is_terminal:
        events.append(outcome_event(check.winner, state.turn))
        logger.info("Match decided", winner=check.winner, turn=state.turn)
        new_state = state.evolve(roster=new_roster, is_game_over=True, winner=check.winner)
    else:
        new_state = state.evolve(roster=new_roster)

    return ActionOutcome(new_state, tuple(events))


__all__ = [
    "ActionOutcome",
    "apply_action",
    "DEFAULT_FLAVOR_CHANCE",
]
