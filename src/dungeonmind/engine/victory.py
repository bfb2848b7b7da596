"""Win-condition evaluation.

The evaluator is a pure predicate over a roster and runs after every
single action application, so a kill in the middle of a batch ends the
match immediately.
"""

from __future__ import annotations

from typing import NamedTuple

from dungeonmind.models import LogCategory, LogEvent, Roster, Side


VICTORY_MESSAGE = "Victory! The enemies are vanquished."
DEFEAT_MESSAGE = "The party has been defeated..."


class WinCheck(NamedTuple):
    """Result of a win-condition evaluation."""

    is_terminal: bool
    winner: Side | None


def heroes_defeated(roster: Roster) -> bool:
    """Check if no hero remains."""
    return not roster.heroes()


def enemies_defeated(roster: Roster) -> bool:
    """Check if no enemy remains."""
    return not roster.enemies()


def evaluate_win(roster: Roster) -> WinCheck:
    """Decide whether the match is over.

    Hero elimination is checked first, so an empty roster is an enemy win.

    Args:
        roster: Living units after the latest action.

    Returns:
        WinCheck with the terminal flag and the winning side.
    """
    if heroes_defeated(roster):
        return WinCheck(is_terminal=True, winner=Side.ENEMY)
    if enemies_defeated(roster):
        return WinCheck(is_terminal=True, winner=Side.HERO)
    return WinCheck(is_terminal=False, winner=None)


def outcome_event(winner: Side, turn: int) -> LogEvent:
    """Build the log entry announcing the match result."""
    message = VICTORY_MESSAGE if winner is Side.HERO else DEFEAT_MESSAGE
    return LogEvent(turn=turn, message=message, category=LogCategory.COMBAT)


__all__ = [
    "WinCheck",
    "heroes_defeated",
    "enemies_defeated",
    "evaluate_win",
    "outcome_event",
    "VICTORY_MESSAGE",
    "DEFEAT_MESSAGE",
]
