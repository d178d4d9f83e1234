"""Request and response models for the HTTP API."""

from dataclasses import asdict

from pydantic import BaseModel, Field

from well_eats.domain.meals import LocalMeal, MealCandidate, MealDetail
from well_eats.domain.nutrition import IngredientInfo


class IngredientIn(BaseModel):
    """Ingredient as declared on a recipe."""

    name: str = Field(min_length=1)
    measure: str = ""


class EnrichRequest(BaseModel):
    """Ingredients to decorate with nutrition and allergens."""

    ingredients: list[IngredientIn]


def meal_payload(meal: MealCandidate) -> dict[str, object]:
    """Serialise a candidate meal, tagging its source."""
    payload = asdict(meal)
    payload["source"] = "local" if isinstance(meal, LocalMeal) else "remote"
    return payload


def ingredient_payload(info: IngredientInfo) -> dict[str, object]:
    """Serialise an enriched ingredient."""
    return asdict(info)


def detail_payload(detail: MealDetail) -> dict[str, object]:
    """Serialise a meal detail view."""
    return {
        "meal": meal_payload(detail.meal),
        "ingredients": [ingredient_payload(item) for item in detail.ingredients],
    }
