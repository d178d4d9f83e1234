"""Bundled local meal catalogue."""

from dataclasses import dataclass
from typing import Protocol

from well_eats.domain.meals import LocalMeal


class LocalMealRepository(Protocol):
    """Read-only source of catalogue meals."""

    def list_meals(self) -> list[LocalMeal]:
        """Return every catalogue meal in declaration order."""


@dataclass
class LocalMealCatalog:
    """Query helpers over the local meal catalogue."""

    repository: LocalMealRepository

    def all(self) -> list[LocalMeal]:
        """Return all meals."""
        return self.repository.list_meals()

    def get(self, meal_id: str) -> LocalMeal | None:
        """Return the meal with ``meal_id``, if present."""
        return next(
            (meal for meal in self.repository.list_meals() if meal.id == meal_id),
            None,
        )

    def by_category(self, category: str) -> list[LocalMeal]:
        """Return meals whose category matches exactly."""
        return [
            meal for meal in self.repository.list_meals() if meal.category == category
        ]

    def search(self, query: str) -> list[LocalMeal]:
        """Return meals whose name contains ``query``, ignoring case."""
        needle = query.strip().lower()
        if not needle:
            return []
        meals = self.repository.list_meals()
        return [meal for meal in meals if needle in meal.name.lower()]
