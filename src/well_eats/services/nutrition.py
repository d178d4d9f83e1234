"""Ingredient nutrition lookups backed by USDA FDC."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from well_eats.adapters.fdc_client import FdcClient
from well_eats.domain.nutrition import NutritionFacts

# Preferred id first; Foundation foods report energy as Atwater factors
# (2047/2048) and sugars as 1063.
_NUTRIENT_IDS = {
    "calories": (1008, 2047, 2048),
    "protein": (1003,),
    "fat": (1004,),
    "sugars": (2000, 1063),
    "sodium": (1093,),
}

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from well_eats.services.cache import Cache


class IngredientNotFoundError(LookupError):
    """Raised when no food matches an ingredient name."""

    def __init__(self, ingredient_name: str) -> None:
        super().__init__(f"No nutrition data found for {ingredient_name!r}")
        self.ingredient_name = ingredient_name


@dataclass
class NutritionService:
    """Resolves ingredient names to nutrient facts with caching."""

    fdc_client: FdcClient
    cache: "Cache"
    ttl_seconds: int = 86400
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def lookup_nutrition(self, ingredient_name: str) -> NutritionFacts:
        """Return nutrient facts for the best FDC match of an ingredient.

        Raises ``IngredientNotFoundError`` when the search finds nothing.
        """
        query = ingredient_name.strip().lower()
        cache_key = f"fdc:nutrition:{query}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, NutritionFacts):
            return cached

        search = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(query, page_size=1),
            action=f"search:{query}",
        )
        foods = search.get("foods") or []
        if not foods:
            raise IngredientNotFoundError(ingredient_name)
        fdc_id = foods[0]["fdcId"]
        payload = await self._call_with_retry(
            lambda: self.fdc_client.get_food(fdc_id),
            action=f"get_food:{fdc_id}",
        )
        facts = _extract_nutrients(payload.get("foodNutrients", []))
        self.cache.set(cache_key, facts, ttl_seconds=self.ttl_seconds)
        if self.debug:
            _logger.info("Nutrition FDC: query=%s fdc_id=%s", query, fdc_id)
        return facts

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                if self.debug:
                    _logger.warning(
                        "Nutrition %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        _status_code_from_exception(exc),
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _extract_nutrients(food_nutrients: list[dict[str, object]]) -> NutritionFacts:
    """Pick the tracked nutrients out of an FDC nutrient listing."""
    amounts: dict[int, float] = {}
    for nutrient in food_nutrients:
        nutrient_info = nutrient.get("nutrient") or {}
        nutrient_id = nutrient_info.get("id") or nutrient.get("nutrientId")
        amount = nutrient.get("amount", nutrient.get("value"))
        if nutrient_id is not None and amount is not None:
            amounts[int(nutrient_id)] = float(amount)

    values = {
        name: next((amounts[i] for i in ids if i in amounts), 0.0)
        for name, ids in _NUTRIENT_IDS.items()
    }
    return NutritionFacts(**values)
