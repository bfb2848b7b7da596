"""Themed encounter generation.

The ScenarioGenerator asks the chat model for an opening roster and maps
the reply onto validated entities. Any failure along the way (transport,
malformed JSON, invalid units, overlapping cells, a missing side) yields
the built-in default roster instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from dungeonmind.core.config import AIProviderSettings, get_settings
from dungeonmind.core.constants import (
    SCENARIO_HERO_COUNT,
    SCENARIO_MAX_ENEMIES,
    SCENARIO_MIN_ENEMIES,
)
from dungeonmind.core.exceptions import AIControlError, AIResponseError, InvalidGameStateError
from dungeonmind.core.logging import get_logger
from dungeonmind.dm.client import JSONChatModel
from dungeonmind.dm.prompts import SCENARIO_USER_MESSAGE, build_scenario_prompt
from dungeonmind.engine.defaults import default_roster
from dungeonmind.models import Entity, EntityClass, Position, Roster, Side


logger = get_logger(__name__)


def _entity_from_payload(item: dict[str, Any]) -> Entity:
    """Map one generated unit onto an Entity.

    Units start at full health regardless of the ``hp`` the model sent.
    """
    side = Side(str(item["type"]).lower())
    raw_class = str(item.get("class") or "").lower()
    try:
        entity_class = EntityClass(raw_class)
    except ValueError:
        entity_class = EntityClass.WARRIOR if side is Side.HERO else EntityClass.MONSTER

    max_hp = int(item.get("maxHp") or item["hp"])
    return Entity(
        id=str(item["id"]),
        name=str(item["name"]),
        side=side,
        entity_class=entity_class,
        hp=max_hp,
        max_hp=max_hp,
        position=Position(x=int(item["x"]), y=int(item["y"])),
        emoji=str(item.get("emoji") or "❔"),
        description=str(item.get("description") or ""),
    )


def parse_roster(payload: Any) -> list[Entity]:
    """Turn a decoded scenario reply into a validated opening roster.

    Args:
        payload: Either ``{"entities": [...]}`` or a bare list of units.

    Returns:
        Entities in the order the model listed them.

    Raises:
        AIResponseError: If the payload cannot form a playable roster.
    """
    items = payload.get("entities") if isinstance(payload, dict) else payload
    if not isinstance(items, list) or not items:
        raise AIResponseError(
            "Scenario reply has no entity list",
            details={"payload_type": type(payload).__name__},
        )

    try:
        entities = [_entity_from_payload(item) for item in items]
        roster = Roster(entities)
    except (ValidationError, InvalidGameStateError, KeyError, TypeError, ValueError) as exc:
        raise AIResponseError(f"Scenario reply is not a valid roster: {exc}") from exc

    heroes, enemies = len(roster.heroes()), len(roster.enemies())
    if not heroes or not enemies:
        raise AIResponseError(
            "Scenario reply must field both sides",
            details={"heroes": heroes, "enemies": enemies},
        )
    if heroes != SCENARIO_HERO_COUNT or not SCENARIO_MIN_ENEMIES <= enemies <= SCENARIO_MAX_ENEMIES:
        logger.warning("Unusual scenario size accepted", heroes=heroes, enemies=enemies)

    return entities


class ScenarioGenerator:
    """Generates an opening roster for a theme.

    Example:
        >>> generator = ScenarioGenerator()
        >>> entities = generator.generate("Skeleton King's Crypt")
    """

    def __init__(
        self,
        *,
        chat: JSONChatModel | None = None,
        settings: AIProviderSettings | None = None,
    ) -> None:
        self.settings = settings or get_settings().ai
        self.chat = chat or JSONChatModel(settings=self.settings)

    def generate(self, theme: str) -> list[Entity]:
        """Generate entities for a theme, falling back to the default roster.

        Args:
            theme: Free-text encounter theme.

        Returns:
            A valid opening roster.
        """
        logger.info("Generating scenario", theme=theme, model=self.chat.model)
        try:
            payload = self.chat.complete_json(
                build_scenario_prompt(theme),
                SCENARIO_USER_MESSAGE,
                temperature=self.settings.scenario_temperature,
            )
            entities = parse_roster(payload)
        except AIControlError as exc:
            logger.warning("Scenario generation failed, using default roster", error=str(exc))
            return default_roster()

        logger.info("Scenario generated", theme=theme, entities=len(entities))
        return entities


__all__ = [
    "ScenarioGenerator",
    "parse_roster",
]
