"""Meal detail view assembly."""

from dataclasses import dataclass

from well_eats.domain.meals import MealDetail
from well_eats.services.catalog import LocalMealCatalog
from well_eats.services.enrichment import IngredientEnrichmentService
from well_eats.services.recipes import RecipeService


@dataclass
class MealDetailService:
    """Resolves a meal and decorates its ingredients."""

    catalog: LocalMealCatalog
    recipes: RecipeService
    enrichment: IngredientEnrichmentService

    async def get_detail(self, meal_id: str) -> MealDetail | None:
        """Return the meal with enriched ingredients, or None if unknown.

        Catalogue meals carry their own nutrition and are not enriched.
        """
        local = self.catalog.get(meal_id)
        if local is not None:
            return MealDetail(meal=local, ingredients=[])

        remote = await self.recipes.get_meal(meal_id)
        if remote is None:
            return None
        ingredients = await self.enrichment.enrich(remote.ingredients)
        return MealDetail(meal=remote, ingredients=ingredients)
