"""Ingredient enrichment with nutrition and allergen facts."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from well_eats.domain.meals import RawIngredient
from well_eats.domain.nutrition import ZERO_NUTRITION, IngredientInfo, NutritionFacts

_logger = logging.getLogger(__name__)


class NutritionLookup(Protocol):
    """Resolves an ingredient name to nutrient facts."""

    async def lookup_nutrition(self, ingredient_name: str) -> NutritionFacts:
        """Return facts or raise when the ingredient is unknown."""


class AllergenLookup(Protocol):
    """Resolves an ingredient name to allergen tags."""

    async def lookup_allergens(self, ingredient_name: str) -> list[str]:
        """Return allergen tags, possibly empty."""


@dataclass
class IngredientEnrichmentService:
    """Joins a meal's ingredients against nutrition and allergen lookups.

    Every ingredient is looked up concurrently. A failed lookup only affects
    its own ingredient, which falls back to zero nutrition and no allergens.
    """

    nutrition: NutritionLookup
    allergens: AllergenLookup
    max_concurrency: int = 8

    async def enrich(
        self, ingredients: Sequence[RawIngredient]
    ) -> list[IngredientInfo]:
        """Return one enriched entry per ingredient, in input order."""
        semaphore = asyncio.Semaphore(max(1, self.max_concurrency))
        return list(
            await asyncio.gather(
                *(self._enrich_one(item, semaphore) for item in ingredients)
            )
        )

    async def _enrich_one(
        self, ingredient: RawIngredient, semaphore: asyncio.Semaphore
    ) -> IngredientInfo:
        async with semaphore:
            nutrition, allergens = await asyncio.gather(
                self.nutrition.lookup_nutrition(ingredient.name),
                self.allergens.lookup_allergens(ingredient.name),
                return_exceptions=True,
            )
        for result in (nutrition, allergens):
            if isinstance(result, Exception):
                _logger.warning(
                    "Enrichment failed for ingredient %s: %s", ingredient.name, result
                )
                return IngredientInfo(
                    name=ingredient.name,
                    measure=ingredient.measure,
                    nutrition=ZERO_NUTRITION,
                    allergens=[],
                )
            if isinstance(result, BaseException):
                raise result
        return IngredientInfo(
            name=ingredient.name,
            measure=ingredient.measure,
            nutrition=nutrition,
            allergens=list(allergens),
        )
