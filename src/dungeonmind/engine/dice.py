"""Dice rolling for combat resolution.

Rolls are made with the d20 library. The applier depends only on the
RandomSource protocol, so tests can substitute a scripted source and
assert exact outcomes.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from dungeonmind.core.constants import ATTACK_DAMAGE_DICE, HEAL_AMOUNT_DICE
from dungeonmind.core.exceptions import DiceRollError
from dungeonmind.core.logging import get_logger


logger = get_logger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    """Randomness consumed by the applier."""

    def roll_damage(self) -> int:
        """Roll attack damage."""
        ...

    def roll_heal(self) -> int:
        """Roll a heal amount."""
        ...

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        ...


@dataclass(frozen=True)
class DiceResult:
    """Outcome of a dice expression.

    Attributes:
        expression: The expression that was rolled.
        total: The total result of the roll.
    """

    expression: str
    total: int


class DiceRoller:
    """Dice rolling backed by the d20 library.

    Example:
        >>> roller = DiceRoller(seed=7)
        >>> 2 <= roller.roll_damage() <= 7
        True
    """

    def __init__(
        self,
        *,
        seed: int | None = None,
        damage_dice: str = ATTACK_DAMAGE_DICE,
        heal_dice: str = HEAL_AMOUNT_DICE,
    ) -> None:
        """Initialize the dice roller.

        Args:
            seed: Optional random seed for reproducible rolls.
            damage_dice: Expression rolled for attack damage.
            heal_dice: Expression rolled for heal amounts.
        """
        self._seed = seed
        self.damage_dice = damage_dice
        self.heal_dice = heal_dice
        if seed is not None:
            # d20 draws from the module-level generator
            random.seed(seed)
        logger.debug("DiceRoller initialized", seed=seed)

    def roll(self, expression: str) -> DiceResult:
        """Roll a dice expression.

        Args:
            expression: Dice expression (e.g., '1d6+1').

        Returns:
            DiceResult with the rolled total.

        Raises:
            DiceRollError: If the expression is empty or invalid.
        """
        if not expression or not expression.strip():
            raise DiceRollError("Empty dice expression", expression=expression)

        try:
            import d20

            result = d20.roll(expression)
        except ImportError as exc:
            raise DiceRollError(
                "d20 library not installed. Install with: pip install d20",
                expression=expression,
            ) from exc
        except Exception as exc:
            raise DiceRollError(
                f"Invalid dice expression: {exc}",
                expression=expression,
            ) from exc

        logger.debug("Dice rolled", expression=expression, total=result.total)
        return DiceResult(expression=expression, total=result.total)

    def roll_damage(self) -> int:
        return self.roll(self.damage_dice).total

    def roll_heal(self) -> int:
        return self.roll(self.heal_dice).total

    def chance(self, probability: float) -> bool:
        if probability <= 0:
            return False
        if probability >= 1:
            return True
        return random.random() < probability


__all__ = [
    "RandomSource",
    "DiceResult",
    "DiceRoller",
]
