"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from well_eats.adapters.fdc_client import HttpxFdcClient
from well_eats.adapters.json_meal_repository import (
    BUNDLED_MEALS_PATH,
    JsonMealRepository,
)
from well_eats.adapters.mealdb_client import HttpxMealDbClient
from well_eats.adapters.openfoodfacts_client import HttpxOpenFoodFactsClient
from well_eats.adapters.supabase_profile_repository import (
    SupabaseHealthProfileRepository,
)
from well_eats.config import Settings
from well_eats.services.allergens import AllergenService
from well_eats.services.cache import InMemoryCache
from well_eats.services.catalog import LocalMealCatalog
from well_eats.services.enrichment import IngredientEnrichmentService
from well_eats.services.meal_details import MealDetailService
from well_eats.services.nutrition import NutritionService
from well_eats.services.profiles import HealthProfileService
from well_eats.services.recipes import RecipeService
from well_eats.services.recommendations import RecommendationService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: HealthProfileService
    recommendation_service: RecommendationService
    enrichment_service: IngredientEnrichmentService
    meal_detail_service: MealDetailService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_service = HealthProfileService(
        SupabaseHealthProfileRepository(supabase_client)
    )

    cache = InMemoryCache()
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )
    off_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.openfoodfacts_base_url,
        user_agent=resolved_settings.openfoodfacts_user_agent,
    )
    mealdb_client = HttpxMealDbClient.create(resolved_settings.mealdb_base_url)

    nutrition_service = NutritionService(
        fdc_client=fdc_client,
        cache=cache,
        debug=resolved_settings.debug_lookups,
    )
    allergen_service = AllergenService(client=off_client, cache=cache)
    enrichment_service = IngredientEnrichmentService(
        nutrition=nutrition_service,
        allergens=allergen_service,
        max_concurrency=resolved_settings.enrichment_concurrency,
    )
    recipe_service = RecipeService(client=mealdb_client, cache=cache)
    catalog = LocalMealCatalog(
        JsonMealRepository(resolved_settings.local_meals_path or BUNDLED_MEALS_PATH)
    )
    recommendation_service = RecommendationService(
        recipes=recipe_service,
        catalog=catalog,
        min_score=resolved_settings.min_score,
    )
    meal_detail_service = MealDetailService(
        catalog=catalog,
        recipes=recipe_service,
        enrichment=enrichment_service,
    )

    async def close_resources() -> None:
        await fdc_client.close()
        await off_client.close()
        await mealdb_client.close()

    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        recommendation_service=recommendation_service,
        enrichment_service=enrichment_service,
        meal_detail_service=meal_detail_service,
        close_resources=close_resources,
    )
