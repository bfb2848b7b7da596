"""Tests for themed roster generation."""

from __future__ import annotations

import json

import pytest

from dungeonmind.core.config import AIProviderSettings
from dungeonmind.core.exceptions import AIResponseError
from dungeonmind.dm.client import JSONChatModel
from dungeonmind.dm.scenario import ScenarioGenerator, parse_roster
from dungeonmind.models import EntityClass, Position, Side


def _unit(uid: str, kind: str, x: int, y: int, **extra) -> dict:
    return {
        "id": uid,
        "name": uid.title(),
        "type": kind,
        "class": "warrior" if kind == "hero" else "monster",
        "hp": 12,
        "maxHp": 12,
        "x": x,
        "y": y,
        "emoji": "🗡️",
        "description": "Ready for battle.",
        **extra,
    }


@pytest.fixture
def crypt_payload() -> dict:
    return {
        "entities": [
            _unit("knight", "hero", 3, 9),
            _unit("priest", "hero", 4, 9, **{"class": "cleric"}),
            _unit("thief", "hero", 5, 8, **{"class": "rogue"}),
            _unit("skel1", "enemy", 3, 0),
            _unit("skel2", "enemy", 5, 0),
            _unit("king", "enemy", 4, 1, **{"class": "boss", "hp": 5, "maxHp": 40}),
        ]
    }


@pytest.fixture
def generator_for(fake_client):
    """Build a ScenarioGenerator whose model returns the given replies."""

    def _make(*replies):
        settings = AIProviderSettings(max_retries=0)
        return ScenarioGenerator(chat=JSONChatModel(client=fake_client(*replies), settings=settings), settings=settings)

    return _make


class TestParseRoster:
    """Tests for mapping a scenario reply onto entities."""

    def test_maps_fields(self, crypt_payload: dict) -> None:
        entities = parse_roster(crypt_payload)

        assert len(entities) == 6
        king = entities[-1]
        assert king.side is Side.ENEMY
        assert king.entity_class is EntityClass.BOSS
        assert king.position == Position(x=4, y=1)
        assert king.emoji == "🗡️"

    def test_units_start_at_full_health(self, crypt_payload: dict) -> None:
        """Test generated units start with hp equal to maxHp."""
        king = parse_roster(crypt_payload)[-1]
        assert king.hp == king.max_hp == 40

    def test_bare_list_accepted(self, crypt_payload: dict) -> None:
        assert len(parse_roster(crypt_payload["entities"])) == 6

    def test_unknown_class_defaults_by_side(self) -> None:
        entities = parse_roster(
            [_unit("a", "hero", 0, 9, **{"class": "bard"}), _unit("b", "enemy", 0, 0, **{"class": "dragon"})]
        )

        assert entities[0].entity_class is EntityClass.WARRIOR
        assert entities[1].entity_class is EntityClass.MONSTER

    def test_side_is_case_insensitive(self) -> None:
        entities = parse_roster([_unit("a", "Hero", 0, 9), _unit("b", "ENEMY", 0, 0)])
        assert [e.side for e in entities] == [Side.HERO, Side.ENEMY]

    @pytest.mark.parametrize(
        "payload",
        [
            {"monsters": []},
            {"entities": []},
            "not a roster",
            [_unit("a", "hero", 0, 9), _unit("b", "hero", 1, 9)],
            [_unit("a", "hero", 0, 9), _unit("b", "enemy", 0, 9)],
            [_unit("a", "hero", 0, 9), _unit("a", "enemy", 0, 0)],
            [_unit("a", "hero", 0, 12), _unit("b", "enemy", 0, 0)],
            [_unit("a", "wizard", 0, 9), _unit("b", "enemy", 0, 0)],
            [{"id": "a", "type": "hero"}, _unit("b", "enemy", 0, 0)],
            [_unit("a", "hero", 0, 9, maxHp=0, hp=0), _unit("b", "enemy", 0, 0)],
        ],
        ids=[
            "wrong-key",
            "empty",
            "string",
            "no-enemies",
            "shared-cell",
            "duplicate-id",
            "off-board",
            "unknown-side",
            "missing-fields",
            "zero-hp",
        ],
    )
    def test_unplayable_rosters_rejected(self, payload) -> None:
        with pytest.raises(AIResponseError):
            parse_roster(payload)


class TestScenarioGenerator:
    """Tests for the generator with a fake chat client."""

    def test_generates_roster(self, generator_for, crypt_payload: dict) -> None:
        generator = generator_for(json.dumps(crypt_payload))

        entities = generator.generate("Skeleton King's Crypt")

        assert [e.id for e in entities][:2] == ["knight", "priest"]

    def test_theme_in_prompt(self, fake_client, crypt_payload: dict) -> None:
        client = fake_client(json.dumps(crypt_payload))
        settings = AIProviderSettings(scenario_temperature=0.7)
        generator = ScenarioGenerator(chat=JSONChatModel(client=client, settings=settings), settings=settings)

        generator.generate("Frozen Lake")

        request = client.chat.completions.requests[0]
        assert "Frozen Lake" in request["messages"][0]["content"]
        assert request["temperature"] == 0.7

    def test_garbage_reply_falls_back(self, generator_for) -> None:
        """Test an unreadable reply yields the default encounter."""
        entities = generator_for("Once upon a time...").generate("Anything")

        assert [e.id for e in entities] == ["h1", "h2", "e1", "e2"]

    def test_invalid_roster_falls_back(self, generator_for) -> None:
        reply = json.dumps({"entities": [_unit("a", "hero", 0, 9)]})

        entities = generator_for(reply).generate("Lonely")

        assert len(entities) == 4

    def test_transport_failure_falls_back(self, generator_for) -> None:
        entities = generator_for(RuntimeError("network down")).generate("Anything")

        assert len(entities) == 4

    def test_missing_key_falls_back(self) -> None:
        settings = AIProviderSettings()

        entities = ScenarioGenerator(settings=settings).generate("Anything")

        assert len(entities) == 4
