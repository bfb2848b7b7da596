"""Tests for dice rolling mechanics."""

from __future__ import annotations

import pytest

from dungeonmind.core.exceptions import DiceRollError
from dungeonmind.engine.dice import DiceResult, DiceRoller, RandomSource


@pytest.fixture
def dice_roller() -> DiceRoller:
    return DiceRoller(seed=42)


class TestDiceRoller:
    """Tests for the DiceRoller class."""

    def test_satisfies_random_source(self, dice_roller: DiceRoller) -> None:
        """Test the roller can feed the applier."""
        assert isinstance(dice_roller, RandomSource)

    def test_roll_expression(self, dice_roller: DiceRoller) -> None:
        """Test rolling an arbitrary expression."""
        result = dice_roller.roll("2d6+1")

        assert isinstance(result, DiceResult)
        assert result.expression == "2d6+1"
        assert 3 <= result.total <= 13

    def test_damage_range(self, dice_roller: DiceRoller) -> None:
        """Test attack damage stays within 1d6+1."""
        rolls = {dice_roller.roll_damage() for _ in range(200)}
        assert rolls <= set(range(2, 8))

    def test_heal_range(self, dice_roller: DiceRoller) -> None:
        """Test heals stay within 1d4+2."""
        rolls = {dice_roller.roll_heal() for _ in range(200)}
        assert rolls <= set(range(3, 7))

    def test_seed_reproducible(self) -> None:
        """Test the same seed yields the same sequence."""
        roller = DiceRoller(seed=7)
        first = [roller.roll_damage() for _ in range(5)]
        roller = DiceRoller(seed=7)
        again = [roller.roll_damage() for _ in range(5)]
        assert first == again

    def test_custom_dice(self) -> None:
        """Test damage dice can be overridden."""
        roller = DiceRoller(damage_dice="5")
        assert roller.roll_damage() == 5

    def test_empty_expression(self, dice_roller: DiceRoller) -> None:
        with pytest.raises(DiceRollError):
            dice_roller.roll("   ")

    def test_invalid_expression(self, dice_roller: DiceRoller) -> None:
        """Test invalid expression raises DiceRollError."""
        with pytest.raises(DiceRollError) as exc_info:
            dice_roller.roll("banana")

        assert exc_info.value.details["expression"] == "banana"


class TestChance:
    """Tests for probability checks."""

    def test_never(self, dice_roller: DiceRoller) -> None:
        assert not any(dice_roller.chance(0.0) for _ in range(50))

    def test_always(self, dice_roller: DiceRoller) -> None:
        assert all(dice_roller.chance(1.0) for _ in range(50))

    def test_sometimes(self, dice_roller: DiceRoller) -> None:
        """Test a middling probability yields both outcomes."""
        outcomes = {dice_roller.chance(0.5) for _ in range(200)}
        assert outcomes == {True, False}
