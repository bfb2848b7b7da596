"""Pytest configuration and shared fixtures.

This module provides common fixtures for the DungeonMind test suite:
entity factories, scripted randomness, and scripted action/scenario
sources that stand in for the AI game master.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from dungeonmind.core.config import GameSettings
from dungeonmind.models import Action, Entity, EntityClass, GameState, Position, Side


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from dungeonmind.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep a developer's .env and DUNGEONMIND_* variables out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("DUNGEONMIND_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def game_settings() -> GameSettings:
    """Match settings with no pacing and no flavor text."""
    return GameSettings(pacing_delay_seconds=0.0, flavor_text_chance=0.0)


# =============================================================================
# Model Fixtures
# =============================================================================


EntityFactory = Callable[..., Entity]


@pytest.fixture
def make_entity() -> EntityFactory:
    """Provide a factory for entities with sensible defaults.

    Returns:
        Callable building an Entity from id, side and cell.
    """

    def _make(
        entity_id: str,
        side: Side,
        x: int,
        y: int,
        *,
        hp: int = 10,
        max_hp: int | None = None,
        name: str | None = None,
    ) -> Entity:
        return Entity(
            id=entity_id,
            name=name or entity_id.upper(),
            side=side,
            entity_class=EntityClass.WARRIOR if side is Side.HERO else EntityClass.MONSTER,
            hp=hp,
            max_hp=max_hp if max_hp is not None else max(hp, 1),
            position=Position(x=x, y=y),
        )

    return _make


@pytest.fixture
def duel_state(make_entity: EntityFactory) -> GameState:
    """One hero facing one enemy, adjacent on the board.

    Returns:
        Opening state with h1 at (4, 5) and e1 at (4, 4).
    """
    return GameState.initial(
        [
            make_entity("h1", Side.HERO, 4, 5, hp=20),
            make_entity("e1", Side.ENEMY, 4, 4, hp=10),
        ]
    )


# =============================================================================
# Scripted Collaborators
# =============================================================================


class ScriptedDice:
    """RandomSource returning queued rolls.

    Attributes:
        damage_rolls: Number of damage rolls consumed.
        heal_rolls: Number of heal rolls consumed.
    """

    def __init__(
        self,
        damage: Iterable[int] = (),
        heal: Iterable[int] = (),
        *,
        flavor: bool = False,
        default_damage: int = 4,
        default_heal: int = 4,
    ) -> None:
        self._damage = deque(damage)
        self._heal = deque(heal)
        self.flavor = flavor
        self.default_damage = default_damage
        self.default_heal = default_heal
        self.damage_rolls = 0
        self.heal_rolls = 0

    def roll_damage(self) -> int:
        self.damage_rolls += 1
        return self._damage.popleft() if self._damage else self.default_damage

    def roll_heal(self) -> int:
        self.heal_rolls += 1
        return self._heal.popleft() if self._heal else self.default_heal

    def chance(self, probability: float) -> bool:
        return self.flavor and probability > 0


class ScriptedActionSource:
    """ActionSource returning queued batches.

    Each queued item is either a list of actions or an exception to raise.
    An exhausted queue yields empty batches.

    Attributes:
        calls: (state, side) pairs the source was asked about.
        on_call: Optional hook run at the start of every request.
    """

    def __init__(self, batches: Iterable[list[Action] | Exception] = ()) -> None:
        self._batches = deque(batches)
        self.calls: list[tuple[GameState, Side]] = []
        self.on_call: Callable[[], None] | None = None

    def queue(self, batch: list[Action] | Exception) -> None:
        self._batches.append(batch)

    def propose_actions(self, state: GameState, side: Side) -> list[Action]:
        self.calls.append((state, side))
        if self.on_call is not None:
            self.on_call()
        if not self._batches:
            return []
        batch = self._batches.popleft()
        if isinstance(batch, Exception):
            raise batch
        return list(batch)


class ScriptedScenarioSource:
    """ScenarioSource returning a fixed roster or raising.

    Attributes:
        themes: Themes the source was asked for.
    """

    def __init__(self, entities: list[Entity] | None = None, error: Exception | None = None) -> None:
        self.entities = entities or []
        self.error = error
        self.themes: list[str] = []

    def generate(self, theme: str) -> list[Entity]:
        self.themes.append(theme)
        if self.error is not None:
            raise self.error
        return list(self.entities)


@pytest.fixture
def dice() -> ScriptedDice:
    """Scripted dice rolling 4 for everything and never surfacing flavor."""
    return ScriptedDice()


@pytest.fixture
def scripted_dice() -> type[ScriptedDice]:
    """Provide the ScriptedDice class for tests that queue specific rolls."""
    return ScriptedDice


@pytest.fixture
def action_source() -> ScriptedActionSource:
    return ScriptedActionSource()


@pytest.fixture
def scenario_source() -> type[ScriptedScenarioSource]:
    """Provide the ScriptedScenarioSource class."""
    return ScriptedScenarioSource


@pytest.fixture
def sleep_calls() -> list[float]:
    return []


@pytest.fixture
def fake_sleep(sleep_calls: list[float]) -> Callable[[float], None]:
    """Sleep replacement that records requested delays."""
    return sleep_calls.append


# =============================================================================
# Chat Model Fixtures
# =============================================================================


class FakeCompletions:
    """Stand-in for ``client.chat.completions`` returning canned replies."""

    def __init__(self, replies: Iterable[str | Exception]) -> None:
        self._replies = deque(replies)
        self.requests: list[dict[str, Any]] = []

    def create(self, **kwargs: Any) -> Any:
        from types import SimpleNamespace

        self.requests.append(kwargs)
        reply = self._replies.popleft() if self._replies else ""
        if isinstance(reply, Exception):
            raise reply
        message = SimpleNamespace(content=reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def fake_client() -> Callable[..., Any]:
    """Provide a factory for OpenAI-shaped clients with canned replies."""
    from types import SimpleNamespace

    def _make(*replies: str | Exception) -> Any:
        completions = FakeCompletions(replies)
        return SimpleNamespace(chat=SimpleNamespace(completions=completions))

    return _make
