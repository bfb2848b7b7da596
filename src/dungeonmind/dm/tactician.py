"""AI commander for either side.

The TacticalAdvisor sends the current board to the chat model and turns
the reply into proposed actions. Individual malformed actions are
skipped; a failed call or an unreadable reply yields an empty batch so
the side simply passes.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from dungeonmind.core.config import AIProviderSettings, get_settings
from dungeonmind.core.exceptions import AIControlError, AIResponseError
from dungeonmind.core.logging import get_logger
from dungeonmind.dm.client import JSONChatModel
from dungeonmind.dm.prompts import build_tactics_message, build_tactics_prompt
from dungeonmind.models import Action, ActionKind, GameState, Position, Side


logger = get_logger(__name__)


def _action_from_payload(item: dict[str, Any]) -> Action:
    kind = ActionKind(str(item["type"]).lower())
    target: Position | None = None
    target_id: str | None = None

    if kind is ActionKind.MOVE:
        target = Position(x=int(item["targetX"]), y=int(item["targetY"]))
    elif kind in (ActionKind.ATTACK, ActionKind.HEAL):
        if not item.get("targetId"):
            raise ValueError(f"{kind} action has no targetId")
        target_id = str(item["targetId"])

    return Action(
        actor_id=str(item["actorId"]),
        kind=kind,
        target=target,
        target_id=target_id,
        flavor_text=str(item.get("flavorText") or ""),
    )


def parse_actions(payload: Any) -> list[Action]:
    """Turn a decoded tactics reply into actions.

    Args:
        payload: Either ``{"actions": [...]}`` or a bare list of actions.

    Returns:
        Well-formed actions in reply order.

    Raises:
        AIResponseError: If the payload holds no action list at all.
    """
    items = payload.get("actions") if isinstance(payload, dict) else payload
    if not isinstance(items, list):
        raise AIResponseError(
            "Tactics reply has no action list",
            details={"payload_type": type(payload).__name__},
        )

    actions: list[Action] = []
    for index, item in enumerate(items):
        try:
            actions.append(_action_from_payload(item))
        except (ValidationError, KeyError, TypeError, ValueError) as exc:
            logger.debug("Skipping malformed action", index=index, error=str(exc))
    return actions


class TacticalAdvisor:
    """Proposes a batch of actions for a side.

    Attributes:
        settings: AI provider settings.
        chat: JSON chat model used for requests.
    """

    def __init__(
        self,
        *,
        chat: JSONChatModel | None = None,
        settings: AIProviderSettings | None = None,
    ) -> None:
        self.settings = settings or get_settings().ai
        self.chat = chat or JSONChatModel(settings=self.settings)

    def propose_actions(self, state: GameState, side: Side) -> list[Action]:
        """Ask the model for one action per living unit of a side.

        Args:
            state: Current match state.
            side: Side to command.

        Returns:
            Proposed actions; empty on any failure.
        """
        if not state.roster.of_side(side):
            return []

        try:
            payload = self.chat.complete_json(
                build_tactics_prompt(side),
                build_tactics_message(state),
                temperature=self.settings.tactics_temperature,
            )
            actions = parse_actions(payload)
        except AIControlError as exc:
            logger.warning("Tactics request failed, side passes", side=side, error=str(exc))
            return []

        logger.info("Tactics proposed", side=side, actions=len(actions))
        return actions


__all__ = [
    "TacticalAdvisor",
    "parse_actions",
]
