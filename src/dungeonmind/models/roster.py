"""Indexed, immutable collection of the living units on the board.

The roster is the authority on board occupancy. Construction rejects
duplicate ids, shared cells, and off-board placement, so any Roster
instance satisfies the board invariants. Mutators return a new Roster.

Example:
    >>> roster = Roster([knight, goblin])
    >>> roster.at(Position(x=4, y=9)) is knight
    True
    >>> roster.remove(goblin.id).enemies()
    ()
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from dungeonmind.core.exceptions import InvalidGameStateError
from dungeonmind.models.entities import Entity, Position
from dungeonmind.models.enums import Side


class Roster:
    """Ordered entity collection indexed by id and by cell."""

    __slots__ = ("_entities", "_by_id", "_by_cell")

    def __init__(self, entities: Iterable[Entity] = ()) -> None:
        """Build the roster and its indices.

        Args:
            entities: Entities in insertion order.

        Raises:
            InvalidGameStateError: If ids or cells collide or a unit is off the board.
        """
        self._entities: tuple[Entity, ...] = tuple(entities)
        self._by_id: dict[str, Entity] = {}
        self._by_cell: dict[tuple[int, int], Entity] = {}

        for entity in self._entities:
            if entity.id in self._by_id:
                raise InvalidGameStateError(
                    f"Duplicate entity id: {entity.id}",
                    details={"entity_id": entity.id},
                )
            cell = (entity.position.x, entity.position.y)
            if cell in self._by_cell:
                raise InvalidGameStateError(
                    f"Cell {entity.position} is occupied by both "
                    f"{self._by_cell[cell].id} and {entity.id}",
                    details={"cell": cell},
                )
            if not entity.position.in_bounds:
                raise InvalidGameStateError(
                    f"Entity {entity.id} is off the board at {entity.position}",
                    details={"entity_id": entity.id},
                )
            self._by_id[entity.id] = entity
            self._by_cell[cell] = entity

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def entities(self) -> tuple[Entity, ...]:
        return self._entities

    def get(self, entity_id: str | None) -> Entity | None:
        """Look up a living entity by id."""
        if entity_id is None:
            return None
        return self._by_id.get(entity_id)

    def at(self, position: Position) -> Entity | None:
        """Look up the entity standing on a cell."""
        return self._by_cell.get((position.x, position.y))

    def is_free(self, position: Position) -> bool:
        """Check that a cell is on the board and unoccupied."""
        return position.in_bounds and self.at(position) is None

    def of_side(self, side: Side) -> tuple[Entity, ...]:
        return tuple(e for e in self._entities if e.side is side)

    def heroes(self) -> tuple[Entity, ...]:
        return self.of_side(Side.HERO)

    def enemies(self) -> tuple[Entity, ...]:
        return self.of_side(Side.ENEMY)

    # -------------------------------------------------------------------------
    # Transformations
    # -------------------------------------------------------------------------

    def replace(self, entity: Entity) -> "Roster":
        """Return a roster with the entity of the same id swapped in place.

        Raises:
            InvalidGameStateError: If no entity has that id, or the new
                position collides with another unit.
        """
        if entity.id not in self._by_id:
            raise InvalidGameStateError(
                f"Cannot replace unknown entity: {entity.id}",
                details={"entity_id": entity.id},
            )
        return Roster(entity if e.id == entity.id else e for e in self._entities)

    def remove(self, entity_id: str) -> "Roster":
        """Return a roster without the given entity."""
        return Roster(e for e in self._entities if e.id != entity_id)

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._by_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Roster):
            return NotImplemented
        return self._entities == other._entities

    def __hash__(self) -> int:
        return hash(self._entities)

    def __repr__(self) -> str:
        names = ", ".join(e.id for e in self._entities)
        return f"Roster([{names}])"


__all__ = ["Roster"]
