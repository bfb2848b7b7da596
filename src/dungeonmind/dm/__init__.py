"""AI game master for DungeonMind.

The game master proposes; the engine disposes. Nothing here mutates the
match state.

Submodules:
    client: OpenRouter chat access with retries and JSON extraction
    prompts: System prompts and board serialization
    scenario: Themed roster generation with default fallback
    tactician: Action batches for either side
"""

from __future__ import annotations

from dungeonmind.dm.client import (
    OPENROUTER_BASE_URL,
    JSONChatModel,
    get_openrouter_client,
    parse_json_payload,
)
from dungeonmind.dm.prompts import build_state_context
from dungeonmind.dm.scenario import ScenarioGenerator, parse_roster
from dungeonmind.dm.tactician import TacticalAdvisor, parse_actions


__all__ = [
    "OPENROUTER_BASE_URL",
    "JSONChatModel",
    "get_openrouter_client",
    "parse_json_payload",
    "build_state_context",
    "ScenarioGenerator",
    "parse_roster",
    "TacticalAdvisor",
    "parse_actions",
]
