"""Tests for prompt rendering and board serialization."""

from __future__ import annotations

import json

from dungeonmind.dm.prompts import build_scenario_prompt, build_state_context, build_tactics_prompt
from dungeonmind.models import GameState, Side


class TestBuildStateContext:
    """Tests for the board snapshot sent to the model."""

    def test_serializes_living_units(self, duel_state: GameState) -> None:
        context = json.loads(build_state_context(duel_state))

        assert context["gridSize"] == "10x10"
        assert context["turn"] == 1
        hero = context["entities"][0]
        assert hero == {
            "id": "h1",
            "name": "H1",
            "type": "hero",
            "class": "warrior",
            "hp": "20/20",
            "position": {"x": 4, "y": 5},
        }

    def test_reflects_removed_units(self, duel_state: GameState) -> None:
        state = duel_state.evolve(roster=duel_state.roster.remove("e1"))
        context = json.loads(build_state_context(state))
        assert [e["id"] for e in context["entities"]] == ["h1"]


class TestPrompts:
    """Tests for system prompt rendering."""

    def test_scenario_prompt_mentions_theme_and_counts(self) -> None:
        prompt = build_scenario_prompt("Goblin Ambush")

        assert '"Goblin Ambush"' in prompt
        assert "Generate 3 Hero entities and 3-4 Enemy entities" in prompt
        assert "10x10" in prompt

    def test_tactics_prompt_per_side(self) -> None:
        assert "HERO PARTY" in build_tactics_prompt(Side.HERO)
        assert "ENEMY FORCES" in build_tactics_prompt(Side.ENEMY)
        assert "living enemy entity" in build_tactics_prompt(Side.ENEMY)
