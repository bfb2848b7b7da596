"""Turn controller for a skirmish match.

The TurnController owns the GameState and drives the match:

- asks the ActionSource for a batch for the active side,
- applies the batch one action at a time, checking for a winner after
  every action and halting the batch as soon as the match is decided,
- flips the active side (and advances the turn counter after the enemy
  sub-turn),
- routes manual hero actions from tile clicks straight into the applier.

The controller phase doubles as the single-flight guard: while a batch is
being requested or applied, further batch requests, manual input and
new-scenario requests are ignored.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from dungeonmind.core.config import GameSettings, get_settings
from dungeonmind.core.constants import (
    MANUAL_ATTACK_FLAVOR,
    MANUAL_ATTACK_REACH,
    MANUAL_MOVE_FLAVOR,
)
from dungeonmind.core.exceptions import AIControlError, InvalidGameStateError, TurnManagementError
from dungeonmind.core.logging import bind_context, clear_context, get_logger
from dungeonmind.engine.defaults import default_roster
from dungeonmind.engine.dice import DiceRoller, RandomSource
from dungeonmind.engine.interfaces import ActionSource, ScenarioSource
from dungeonmind.engine.resolution import apply_action
from dungeonmind.engine.victory import evaluate_win
from dungeonmind.models import (
    Action,
    ActionKind,
    GameState,
    LogCategory,
    LogEvent,
    Position,
    Side,
)


logger = get_logger(__name__)


# =============================================================================
# Controller State
# =============================================================================


class ControllerPhase(StrEnum):
    """Phase of the turn controller."""

    READY = "ready"
    """Awaiting a batch (or manual input) for the active side."""

    REQUESTING = "requesting"
    """An external source call is in flight."""

    APPLYING = "applying"
    """Actions are being applied one at a time."""

    ENDED = "ended"
    """The match is decided; only a new scenario is accepted."""


@dataclass(frozen=True)
class BatchReport:
    """Summary of one side turn.

    Attributes:
        side: Side that acted.
        turn: Turn number the batch ran in.
        proposed: Number of actions the source returned.
        applied: Number of actions fed to the applier.
        game_over: Whether the batch decided the match.
    """

    side: Side
    turn: int
    proposed: int
    applied: int
    game_over: bool

    @property
    def skipped(self) -> int:
        """Actions left unapplied because the match ended mid-batch."""
        return self.proposed - self.applied


def advance_side(state: GameState) -> GameState:
    """Hand the initiative to the other side.

    The turn counter advances when the enemy sub-turn hands back to the
    heroes.

    Raises:
        TurnManagementError: If the match is already over.
    """
    if state.is_game_over:
        raise TurnManagementError(
            "Cannot advance the turn of a finished match",
            details={"winner": state.winner},
        )
    next_turn = state.turn + 1 if state.active_side is Side.ENEMY else state.turn
    return state.evolve(active_side=state.active_side.opponent, turn=next_turn)


# =============================================================================
# Turn Controller
# =============================================================================


class TurnController:
    """Owns the match state and sequences every state transition.

    Attributes:
        action_source: Provider of AI action batches.
        scenario_source: Provider of opening rosters.
        settings: Match settings (pacing, flavor chance, ranges).
    """

    def __init__(
        self,
        action_source: ActionSource,
        scenario_source: ScenarioSource,
        *,
        dice: RandomSource | None = None,
        settings: GameSettings | None = None,
        sleep: Callable[[float], None] = time.sleep,
        initial_state: GameState | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            action_source: Provider of AI action batches.
            scenario_source: Provider of opening rosters.
            dice: Randomness for damage, heals and flavor. Defaults to a DiceRoller.
            settings: Match settings. Defaults to the application settings.
            sleep: Pacing callable, invoked between actions of a batch.
            initial_state: Optional starting state (no scenario otherwise).
        """
        self.action_source = action_source
        self.scenario_source = scenario_source
        self.settings = settings or get_settings().game
        self._dice = dice or DiceRoller()
        self._sleep = sleep
        self._state = initial_state or GameState()
        self._log: list[LogEvent] = []
        self._selected_id: str | None = None
        self._auto_heroes = self.settings.auto_heroes
        self._phase = ControllerPhase.ENDED if self._state.is_game_over else ControllerPhase.READY

        logger.info(
            "TurnController initialized",
            entities=len(self._state.entities),
            auto_heroes=self._auto_heroes,
        )

    # -------------------------------------------------------------------------
    # Read-only projection
    # -------------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def log(self) -> tuple[LogEvent, ...]:
        return tuple(self._log)

    @property
    def phase(self) -> ControllerPhase:
        return self._phase

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    @property
    def auto_heroes(self) -> bool:
        return self._auto_heroes

    @property
    def is_busy(self) -> bool:
        """Whether a source call or batch application is in flight."""
        return self._phase in (ControllerPhase.REQUESTING, ControllerPhase.APPLYING)

    @property
    def is_ai_turn(self) -> bool:
        """Whether the active side is driven by the action source."""
        return self._state.active_side is Side.ENEMY or self._auto_heroes

    @property
    def awaiting_hero_input(self) -> bool:
        """Whether the board accepts manual hero clicks right now."""
        return (
            self._phase is ControllerPhase.READY
            and not self._state.is_game_over
            and self._state.active_side is Side.HERO
            and not self._auto_heroes
        )

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------

    def _record(self, message: str, category: LogCategory = LogCategory.INFO) -> None:
        self._log.append(LogEvent(turn=self._state.turn, message=message, category=category))

    def _commit(self, action: Action) -> None:
        """Apply one action and fold its result into the controller."""
        outcome = apply_action(
            self._state,
            action,
            self._dice,
            flavor_chance=self.settings.flavor_text_chance,
        )
        self._state = outcome.state
        self._log.extend(outcome.events)
        if self._state.is_game_over:
            self._phase = ControllerPhase.ENDED
            self._selected_id = None

    # -------------------------------------------------------------------------
    # Scenario lifecycle
    # -------------------------------------------------------------------------

    def new_scenario(self, theme: str) -> GameState:
        """Replace the match with a freshly generated encounter.

        Args:
            theme: Free-text theme for the scenario source.

        Returns:
            The new state, or the unchanged state if a call is in flight.
        """
        if self.is_busy:
            logger.debug("New scenario ignored, call in flight", phase=self._phase)
            return self._state

        self._log.clear()
        self._selected_id = None
        self._state = GameState()
        self._record(f"Generating dungeon: {theme}...")

        self._phase = ControllerPhase.REQUESTING
        try:
            try:
                state = GameState.initial(self.scenario_source.generate(theme))
            except (AIControlError, InvalidGameStateError) as exc:
                logger.warning("Scenario source failed, using default roster", error=str(exc))
                state = GameState.initial(default_roster())

            check = evaluate_win(state.roster)
            if check.is_terminal:
                state = state.evolve(is_game_over=True, winner=check.winner)
            self._state = state
        finally:
            self._phase = ControllerPhase.ENDED if self._state.is_game_over else ControllerPhase.READY

        self._record(f"Encounter started! {len(self._state.entities)} entities placed.")
        logger.info("Scenario started", theme=theme, entities=len(self._state.entities))
        return self._state

    # -------------------------------------------------------------------------
    # AI side turns
    # -------------------------------------------------------------------------

    def run_side_turn(self) -> BatchReport | None:
        """Request and apply one batch for the active side.

        Returns:
            BatchReport, or None if the request was ignored (call already
            in flight, match over, or no scenario loaded).
        """
        if self._phase is ControllerPhase.ENDED or self._state.is_game_over:
            logger.debug("Side turn rejected, match is over")
            return None
        if self.is_busy:
            logger.debug("Side turn ignored, batch in flight", phase=self._phase)
            return None
        if not self._state.entities:
            logger.debug("Side turn ignored, no scenario loaded")
            return None

        side = self._state.active_side
        turn = self._state.turn
        bind_context(turn=turn, side=str(side))
        self._phase = ControllerPhase.REQUESTING
        applied = 0
        try:
            self._record(f"AI ({side}) is thinking...", LogCategory.AI)
            try:
                actions = list(self.action_source.propose_actions(self._state, side))
            except AIControlError as exc:
                logger.warning("Action source failed, side passes", error=str(exc))
                actions = []

            self._phase = ControllerPhase.APPLYING
            pacing = self.settings.pacing_delay_seconds
            for action in actions:
                if applied and pacing > 0:
                    self._sleep(pacing)
                self._commit(action)
                applied += 1
                if self._state.is_game_over:
                    logger.info(
                        "Batch halted, match decided",
                        winner=self._state.winner,
                        skipped=len(actions) - applied,
                    )
                    break

            if not self._state.is_game_over:
                self._state = advance_side(self._state)
                logger.info(
                    "Side turn complete",
                    applied=applied,
                    next_side=self._state.active_side,
                    next_turn=self._state.turn,
                )
        finally:
            if self._phase is not ControllerPhase.ENDED:
                self._phase = ControllerPhase.READY
            clear_context()

        return BatchReport(
            side=side,
            turn=turn,
            proposed=len(actions),
            applied=applied,
            game_over=self._state.is_game_over,
        )

    def run_until_input(self, max_sub_turns: int | None = None) -> list[BatchReport]:
        """Run AI side turns until manual input is needed or the match ends.

        Args:
            max_sub_turns: Cap on side turns run; defaults to the setting.

        Returns:
            Reports for every side turn that ran.
        """
        limit = max_sub_turns if max_sub_turns is not None else self.settings.max_sub_turns
        reports: list[BatchReport] = []
        while len(reports) < limit and self.is_ai_turn and not self._state.is_game_over:
            report = self.run_side_turn()
            if report is None:
                break
            reports.append(report)
        return reports

    # -------------------------------------------------------------------------
    # Manual play
    # -------------------------------------------------------------------------

    def set_auto_heroes(self, enabled: bool) -> None:
        """Toggle AI control of the hero side."""
        self._auto_heroes = enabled
        if enabled:
            self._selected_id = None
        logger.info("Auto heroes toggled", enabled=enabled)

    def end_hero_turn(self) -> bool:
        """End the hero sub-turn without further actions.

        Returns:
            True if the initiative passed to the enemy side.
        """
        if (
            self._phase is not ControllerPhase.READY
            or self._state.is_game_over
            or self._state.active_side is not Side.HERO
        ):
            return False
        self._selected_id = None
        self._state = advance_side(self._state)
        logger.info("Hero turn ended manually", turn=self._state.turn)
        return True

    def submit_manual_action(self, action: Action) -> bool:
        """Apply a single hero action chosen by the player.

        Manual attacks reach adjacent enemies (diagonals included); manual
        moves reach free cells within the configured Manhattan range.

        Args:
            action: The hero's action.

        Returns:
            True if the action was accepted and applied.
        """
        if not self.awaiting_hero_input:
            logger.debug("Manual action rejected", phase=self._phase, actor=action.actor_id)
            return False

        roster = self._state.roster
        actor = roster.get(action.actor_id)
        if actor is None or actor.side is not Side.HERO:
            return False

        if action.kind is ActionKind.ATTACK:
            target = roster.get(action.target_id)
            if (
                target is None
                or target.side is not Side.ENEMY
                or actor.position.chebyshev_distance(target.position) > MANUAL_ATTACK_REACH
            ):
                return False
        elif action.kind is ActionKind.MOVE:
            if (
                action.target is None
                or not roster.is_free(action.target)
                or actor.position.manhattan_distance(action.target) > self.settings.manual_move_range
            ):
                return False
        else:
            return False

        self._phase = ControllerPhase.APPLYING
        try:
            self._commit(action)
        finally:
            if self._phase is not ControllerPhase.ENDED:
                self._phase = ControllerPhase.READY
        logger.debug("Manual action applied", actor=actor.id, kind=action.kind)
        return True

    def click_tile(self, position: Position) -> bool:
        """Handle a click on a board cell during manual hero play.

        Clicking a hero selects it. With a hero selected, clicking an
        adjacent enemy attacks it and clicking a free cell in range moves
        there.

        Args:
            position: The clicked cell.

        Returns:
            True if the click selected a unit or applied an action.
        """
        if not self.awaiting_hero_input:
            return False

        roster = self._state.roster
        clicked = roster.at(position)
        if clicked is not None and clicked.side is Side.HERO:
            self._selected_id = clicked.id
            return True

        actor = roster.get(self._selected_id)
        if actor is None:
            self._selected_id = None
            return False

        if clicked is None:
            action = Action.move(actor.id, position.x, position.y, MANUAL_MOVE_FLAVOR)
        else:
            action = Action.attack(actor.id, clicked.id, MANUAL_ATTACK_FLAVOR)

        if self.submit_manual_action(action):
            self._selected_id = None
            return True
        return False


__all__ = [
    "ControllerPhase",
    "BatchReport",
    "TurnController",
    "advance_side",
]
