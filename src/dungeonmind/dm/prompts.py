"""Prompt templates for the AI game master.

The model only proposes rosters and actions; the engine rolls every die
and validates every move.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from dungeonmind.core.constants import (
    GRID_SIZE,
    MAX_COORD,
    SCENARIO_HERO_COUNT,
    SCENARIO_MAX_ENEMIES,
    SCENARIO_MIN_ENEMIES,
)


if TYPE_CHECKING:
    from dungeonmind.models import GameState, Side


# =============================================================================
# Scenario Generation
# =============================================================================

SCENARIO_SYSTEM_PROMPT = """You are a Dungeon Master for a tactical RPG.
Create a balanced encounter for a {size}x{size} grid (x: 0-{max_coord}, y: 0-{max_coord}).
Generate {heroes} Hero entities and {min_enemies}-{max_enemies} Enemy entities based on the theme: "{theme}".
Heroes should start near y={max_coord} (bottom), Enemies near y=0 (top).
Ensure unique IDs and that no two entities share a cell.

IMPORTANT: You must output ONLY valid JSON with no additional text or markdown.

Output this exact structure:
{{
  "entities": [
    {{
      "id": "unique id (string)",
      "name": "display name (string)",
      "type": "hero" or "enemy",
      "class": "warrior" | "mage" | "rogue" | "cleric" | "monster" | "boss",
      "hp": 20,
      "maxHp": 20,
      "x": 0,
      "y": 0,
      "emoji": "a single emoji",
      "description": "one short sentence"
    }}
  ]
}}"""


def build_scenario_prompt(theme: str) -> str:
    """Render the scenario system prompt for a theme."""
    return SCENARIO_SYSTEM_PROMPT.format(
        size=GRID_SIZE,
        max_coord=MAX_COORD,
        heroes=SCENARIO_HERO_COUNT,
        min_enemies=SCENARIO_MIN_ENEMIES,
        max_enemies=SCENARIO_MAX_ENEMIES,
        theme=theme,
    )


SCENARIO_USER_MESSAGE = "Generate the entity list."


# =============================================================================
# Tactical Batches
# =============================================================================

TACTICS_SYSTEM_PROMPT = """You are the AI controlling the {side_label}.
Analyze the current game state and provide a list of tactical actions for EACH living {side} entity.

Rules:
1. Grid is {size}x{size} (0-{max_coord}).
2. Movement range is generally 1-2 tiles.
3. Melee range is adjacent (distance 1 or 1.4 diagonal). Ranged is distance 4.
4. 'attack' and 'heal' require a targetId.
5. 'move' requires targetX and targetY.
6. Provide concise, flavorful 'flavorText' for the action log.
7. Do not move into occupied squares (no two units can share a square).
8. Be smart: Focus low HP targets, protect healers.

IMPORTANT: You must output ONLY valid JSON with no additional text or markdown.

Output this exact structure:
{{
  "actions": [
    {{
      "actorId": "id of one of your units",
      "type": "move" | "attack" | "heal" | "wait",
      "targetX": null,
      "targetY": null,
      "targetId": null,
      "flavorText": "short narration"
    }}
  ]
}}"""


def build_tactics_prompt(side: "Side") -> str:
    """Render the tactics system prompt for the acting side."""
    side_label = "HERO PARTY" if side == "hero" else "ENEMY FORCES"
    return TACTICS_SYSTEM_PROMPT.format(
        side_label=side_label,
        side=side,
        size=GRID_SIZE,
        max_coord=MAX_COORD,
    )


def build_state_context(state: "GameState") -> str:
    """Serialize the board for the tactics prompt.

    Only what a commander needs is sent: grid size and each living unit's
    id, name, side, class, HP and position.
    """
    return json.dumps(
        {
            "gridSize": f"{GRID_SIZE}x{GRID_SIZE}",
            "turn": state.turn,
            "entities": [
                {
                    "id": e.id,
                    "name": e.name,
                    "type": str(e.side),
                    "class": str(e.entity_class),
                    "hp": f"{e.hp}/{e.max_hp}",
                    "position": {"x": e.position.x, "y": e.position.y},
                }
                for e in state.entities
            ],
        },
        ensure_ascii=False,
    )


def build_tactics_message(state: "GameState") -> str:
    return f"Current State JSON: {build_state_context(state)}"


__all__ = [
    "SCENARIO_SYSTEM_PROMPT",
    "SCENARIO_USER_MESSAGE",
    "TACTICS_SYSTEM_PROMPT",
    "build_scenario_prompt",
    "build_tactics_prompt",
    "build_state_context",
    "build_tactics_message",
]
