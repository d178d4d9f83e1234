"""Remote recipe source backed by TheMealDB."""

import logging
from dataclasses import dataclass, replace

from well_eats.adapters.mealdb_client import MealDbClient
from well_eats.domain.meals import RawIngredient, RemoteMeal
from well_eats.services.cache import Cache

MAX_INGREDIENT_SLOTS = 20

_logger = logging.getLogger(__name__)


@dataclass
class RecipeService:
    """Fetches candidate meals from the remote recipe source."""

    client: MealDbClient
    cache: Cache
    ttl_seconds: int = 3600

    async def by_category(self, category: str) -> list[RemoteMeal]:
        """Return meals listed under a recipe category."""
        cache_key = f"mealdb:category:{category.lower()}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        payload = await self.client.filter_by_category(category)
        # Category listings carry only id, name and thumbnail.
        meals = [
            meal if meal.category else replace(meal, category=category)
            for meal in _parse_meals(payload)
        ]
        self.cache.set(cache_key, meals, ttl_seconds=self.ttl_seconds)
        _logger.debug("Fetched %s meals for category %s", len(meals), category)
        return meals

    async def search(self, query: str) -> list[RemoteMeal]:
        """Return meals whose name matches a free-text query."""
        cleaned = query.strip()
        if not cleaned:
            return []
        cache_key = f"mealdb:search:{cleaned.lower()}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        meals = _parse_meals(await self.client.search_by_name(cleaned))
        self.cache.set(cache_key, meals, ttl_seconds=self.ttl_seconds)
        return meals

    async def get_meal(self, meal_id: str) -> RemoteMeal | None:
        """Return a single meal with its ingredients, if it exists."""
        meals = _parse_meals(await self.client.lookup_meal(meal_id))
        return meals[0] if meals else None


def _parse_meals(payload: dict[str, object]) -> list[RemoteMeal]:
    # TheMealDB answers {"meals": null} when nothing matches.
    rows = payload.get("meals") or []
    return [_parse_meal(row) for row in rows if isinstance(row, dict)]


def _parse_meal(row: dict[str, object]) -> RemoteMeal:
    return RemoteMeal(
        id=str(row.get("idMeal") or ""),
        name=_clean(row.get("strMeal")),
        thumbnail=row.get("strMealThumb"),
        category=row.get("strCategory"),
        area=row.get("strArea"),
        tags=row.get("strTags"),
        instructions=row.get("strInstructions"),
        ingredients=parse_ingredients(row),
    )


def parse_ingredients(row: dict[str, object]) -> list[RawIngredient]:
    """Collect the numbered ingredient/measure slots of a meal payload."""
    ingredients: list[RawIngredient] = []
    for index in range(1, MAX_INGREDIENT_SLOTS + 1):
        name = _clean(row.get(f"strIngredient{index}"))
        if not name:
            continue
        measure = _clean(row.get(f"strMeasure{index}"))
        ingredients.append(RawIngredient(name=name, measure=measure))
    return ingredients


def _clean(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""
