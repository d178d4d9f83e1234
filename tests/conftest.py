"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import UUID

import httpx
import pytest

from well_eats.adapters.fdc_client import FdcClient
from well_eats.adapters.mealdb_client import MealDbClient
from well_eats.adapters.openfoodfacts_client import OpenFoodFactsClient
from well_eats.config import Settings
from well_eats.containers import AppContainer
from well_eats.domain.meals import LocalMeal, MacroSummary, RemoteMeal
from well_eats.domain.nutrition import NutritionFacts
from well_eats.domain.profile import HealthProfile
from well_eats.services.allergens import AllergenService
from well_eats.services.cache import InMemoryCache
from well_eats.services.catalog import LocalMealCatalog, LocalMealRepository
from well_eats.services.enrichment import IngredientEnrichmentService
from well_eats.services.meal_details import MealDetailService
from well_eats.services.nutrition import NutritionService
from well_eats.services.profiles import HealthProfileRepository, HealthProfileService
from well_eats.services.recipes import RecipeService
from well_eats.services.recommendations import RecommendationService


def remote_meal(name: str, **kwargs: object) -> RemoteMeal:
    """Build a remote meal with a name-derived id."""
    return RemoteMeal(id=name.lower().replace(" ", "-"), name=name, **kwargs)


def local_meal(name: str, **kwargs: object) -> LocalMeal:
    """Build a local meal with a name-derived id."""
    return LocalMeal(id=f"local-{name.lower().replace(' ', '-')}", name=name, **kwargs)


def mealdb_row(meal_id: str, name: str, **extra: object) -> dict[str, object]:
    """Build a TheMealDB list row."""
    return {
        "idMeal": meal_id,
        "strMeal": name,
        "strMealThumb": f"https://img.test/{meal_id}.jpg",
        **extra,
    }


def http_error(status_code: int = 503) -> httpx.HTTPStatusError:
    """Build an HTTP status error as raised by ``raise_for_status``."""
    request = httpx.Request("GET", "https://api.test")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError("upstream failed", request=request, response=response)


@dataclass
class InMemoryHealthProfileRepository(HealthProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, HealthProfile] = field(default_factory=dict)
    writes: int = 0

    def get_profile(self, user_id: UUID) -> HealthProfile | None:
        return self.profiles.get(user_id)

    def upsert_profile(self, user_id: UUID, profile: HealthProfile) -> None:
        self.writes += 1
        self.profiles[user_id] = profile


@dataclass
class InMemoryLocalMealRepository(LocalMealRepository):
    """In-memory catalogue for tests."""

    meals: list[LocalMeal] = field(default_factory=list)

    def list_meals(self) -> list[LocalMeal]:
        return list(self.meals)


@dataclass
class FakeMealDbClient(MealDbClient):
    """Fake TheMealDB client serving canned rows."""

    categories: dict[str, list[dict[str, object]]] = field(default_factory=dict)
    searches: dict[str, list[dict[str, object]]] = field(default_factory=dict)
    lookups: dict[str, dict[str, object]] = field(default_factory=dict)
    failing_categories: set[str] = field(default_factory=set)
    fail_search: bool = False
    category_calls: list[str] = field(default_factory=list)

    async def filter_by_category(self, category: str) -> dict[str, object]:
        self.category_calls.append(category)
        if category in self.failing_categories:
            raise http_error()
        return {"meals": self.categories.get(category)}

    async def search_by_name(self, query: str) -> dict[str, object]:
        if self.fail_search:
            raise http_error()
        return {"meals": self.searches.get(query.lower())}

    async def lookup_meal(self, meal_id: str) -> dict[str, object]:
        row = self.lookups.get(meal_id)
        return {"meals": [row] if row else None}


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client keyed by ingredient name."""

    foods: dict[str, dict[str, float]] = field(default_factory=dict)
    search_calls: int = 0

    async def search_foods(self, query: str, page_size: int = 1) -> dict[str, object]:
        self.search_calls += 1
        names = list(self.foods)
        if query not in self.foods:
            return {"foods": []}
        return {"foods": [{"fdcId": names.index(query) + 1, "description": query}]}

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        values = list(self.foods.values())[fdc_id - 1]
        return {
            "fdcId": fdc_id,
            "foodNutrients": [
                {"nutrient": {"id": 1008}, "amount": values.get("calories", 0)},
                {"nutrient": {"id": 1003}, "amount": values.get("protein", 0)},
                {"nutrient": {"id": 1004}, "amount": values.get("fat", 0)},
                {"nutrient": {"id": 2000}, "amount": values.get("sugars", 0)},
                {"nutrient": {"id": 1093}, "amount": values.get("sodium", 0)},
            ],
        }


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake Open Food Facts client keyed by product name."""

    allergens: dict[str, list[str]] = field(default_factory=dict)
    fail: bool = False
    calls: int = 0

    async def search_products(
        self, query: str, page_size: int = 1
    ) -> dict[str, object]:
        self.calls += 1
        if self.fail:
            raise http_error()
        if query not in self.allergens:
            return {"count": 0, "products": []}
        return {
            "count": 1,
            "products": [
                {"product_name": query, "allergens_tags": self.allergens[query]}
            ],
        }


@dataclass
class StaticNutritionLookup:
    """Nutrition lookup that fails for selected ingredients."""

    facts: NutritionFacts = field(
        default_factory=lambda: NutritionFacts(
            calories=100.0, protein=5.0, fat=2.0, sugars=1.0, sodium=10.0
        )
    )
    failing: set[str] = field(default_factory=set)
    calls: list[str] = field(default_factory=list)

    async def lookup_nutrition(self, ingredient_name: str) -> NutritionFacts:
        self.calls.append(ingredient_name)
        if ingredient_name in self.failing:
            raise LookupError(ingredient_name)
        return self.facts


@dataclass
class StaticAllergenLookup:
    """Allergen lookup that fails for selected ingredients."""

    tags: dict[str, list[str]] = field(default_factory=dict)
    failing: set[str] = field(default_factory=set)

    async def lookup_allergens(self, ingredient_name: str) -> list[str]:
        if ingredient_name in self.failing:
            raise RuntimeError(ingredient_name)
        return list(self.tags.get(ingredient_name, []))


SAMPLE_LOCAL_MEALS = [
    local_meal(
        "Kontomire Stew",
        category="Vegetarian",
        tags=["ghanaian", "veggie"],
        ingredients=["cocoyam leaves", "palm oil"],
        nutrition=MacroSummary(calories=290, protein=11, fat=21, carbs=15),
    ),
    local_meal("Grilled Tilapia", category="Seafood", tags=["fish"]),
    local_meal("Jollof Rice", category="Rice", tags=["party", "chicken"]),
]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        fdc_api_key="fdc-key",
    )


@pytest.fixture
def profile_repository() -> InMemoryHealthProfileRepository:
    return InMemoryHealthProfileRepository()


@pytest.fixture
def mealdb_client() -> FakeMealDbClient:
    return FakeMealDbClient()


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient(
        foods={
            "chicken": {"calories": 165, "protein": 31, "fat": 3.6, "sodium": 74},
            "rice": {"calories": 130, "protein": 2.7, "fat": 0.3},
        }
    )


@pytest.fixture
def off_client() -> FakeOpenFoodFactsClient:
    return FakeOpenFoodFactsClient(allergens={"flour": ["en:gluten"]})


@pytest.fixture
def container(
    settings: Settings,
    profile_repository: InMemoryHealthProfileRepository,
    mealdb_client: FakeMealDbClient,
    fdc_client: FakeFdcClient,
    off_client: FakeOpenFoodFactsClient,
) -> AppContainer:
    cache = InMemoryCache()
    catalog = LocalMealCatalog(InMemoryLocalMealRepository(list(SAMPLE_LOCAL_MEALS)))
    recipe_service = RecipeService(client=mealdb_client, cache=cache)
    enrichment_service = IngredientEnrichmentService(
        nutrition=NutritionService(
            fdc_client=fdc_client, cache=cache, retry_attempts=0
        ),
        allergens=AllergenService(client=off_client, cache=cache),
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        profile_service=HealthProfileService(profile_repository),
        recommendation_service=RecommendationService(
            recipes=recipe_service, catalog=catalog
        ),
        enrichment_service=enrichment_service,
        meal_detail_service=MealDetailService(
            catalog=catalog,
            recipes=recipe_service,
            enrichment=enrichment_service,
        ),
        close_resources=close_resources,
    )
