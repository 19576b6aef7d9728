"""In-memory store backing the dashboard list."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from food_dashboard.domain.foods import FoodPlate


@dataclass
class FoodStore:
    """Ordered list of food plates; the single source for rendering."""

    _foods: list[FoodPlate] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._foods)

    def replace_all(self, records: Iterable[FoodPlate]) -> None:
        """Replace the whole list, keeping the given order."""
        self._foods = list(records)

    def append(self, record: FoodPlate) -> None:
        """Add a record at the end of the list."""
        self._foods.append(record)

    def update_by_id(self, food_id: int, record: FoodPlate) -> None:
        """Replace records with the given id; no-op if none match."""
        self._foods = [
            record if food.id == food_id else food for food in self._foods
        ]

    def remove_by_id(self, food_id: int) -> None:
        """Remove records with the given id; no-op if none match."""
        self._foods = [food for food in self._foods if food.id != food_id]

    def get(self, food_id: int) -> FoodPlate | None:
        """Return the record with the given id, if present."""
        return next((food for food in self._foods if food.id == food_id), None)

    def snapshot(self) -> tuple[FoodPlate, ...]:
        """Return an immutable copy of the list."""
        return tuple(self._foods)
