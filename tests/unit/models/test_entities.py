"""Tests for positions, entities and actions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from dungeonmind.models import Action, ActionKind, Entity, Position, Side


class TestPosition:
    """Tests for the Position model."""

    def test_off_board_position_is_representable(self) -> None:
        """Test positions off the board can be built but are out of bounds."""
        assert Position(x=10, y=3).in_bounds is False
        assert Position(x=-1, y=0).in_bounds is False
        assert Position(x=9, y=0).in_bounds is True

    def test_distances(self) -> None:
        """Test Manhattan and Chebyshev distances."""
        a, b = Position(x=1, y=1), Position(x=3, y=2)
        assert a.manhattan_distance(b) == 3
        assert a.chebyshev_distance(b) == 2

    def test_diagonal_neighbour_is_chebyshev_one(self) -> None:
        """Test diagonal neighbours are one step apart."""
        assert Position(x=4, y=4).chebyshev_distance(Position(x=5, y=5)) == 1

    def test_hashable_and_frozen(self) -> None:
        """Test positions are value objects."""
        pos = Position(x=2, y=3)
        assert pos == Position(x=2, y=3)
        assert len({pos, Position(x=2, y=3)}) == 1
        with pytest.raises(ValidationError):
            pos.x = 5  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Position(x=2, y=7)) == "(2, 7)"


class TestEntity:
    """Tests for the Entity model."""

    def test_hp_cannot_exceed_max(self) -> None:
        """Test HP above max is rejected."""
        with pytest.raises(ValidationError):
            Entity(id="a", name="A", side=Side.HERO, hp=11, max_hp=10, position=Position(x=0, y=0))

    def test_off_board_placement_rejected(self) -> None:
        """Test an entity cannot stand off the board."""
        with pytest.raises(ValidationError):
            Entity(id="a", name="A", side=Side.HERO, hp=5, max_hp=5, position=Position(x=0, y=10))

    def test_with_hp_clamps(self, make_entity) -> None:
        """Test with_hp clamps into [0, max_hp]."""
        unit = make_entity("h1", Side.HERO, 0, 0, hp=5, max_hp=10)

        assert unit.with_hp(50).hp == 10
        assert unit.with_hp(-3).hp == 0
        assert unit.hp == 5

    def test_moved_to_returns_copy(self, make_entity) -> None:
        """Test moving yields a new entity."""
        unit = make_entity("h1", Side.HERO, 0, 0)
        moved = unit.moved_to(Position(x=1, y=1))

        assert moved.position == Position(x=1, y=1)
        assert unit.position == Position(x=0, y=0)
        assert moved.id == unit.id

    def test_hp_percentage(self, make_entity) -> None:
        unit = make_entity("h1", Side.HERO, 0, 0, hp=5, max_hp=20)
        assert unit.hp_percentage == 25.0
        assert unit.is_alive


class TestAction:
    """Tests for the Action constructors."""

    def test_move(self) -> None:
        action = Action.move("h1", 3, 4, "Charge!")
        assert action.kind is ActionKind.MOVE
        assert action.target == Position(x=3, y=4)
        assert action.target_id is None
        assert action.flavor_text == "Charge!"

    def test_attack_and_heal(self) -> None:
        assert Action.attack("h1", "e1").target_id == "e1"
        assert Action.heal("h2", "h1").kind is ActionKind.HEAL

    def test_wait(self) -> None:
        action = Action.wait("e1")
        assert action.kind is ActionKind.WAIT
        assert action.target is None
