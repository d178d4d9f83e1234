"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NutritionFacts:
    """Per-100g nutrient facts for an ingredient."""

    calories: float
    protein: float
    fat: float
    sugars: float
    sodium: float


ZERO_NUTRITION = NutritionFacts(
    calories=0.0, protein=0.0, fat=0.0, sugars=0.0, sodium=0.0
)


@dataclass(frozen=True)
class IngredientInfo:
    """Ingredient decorated with nutrition and allergen facts."""

    name: str
    measure: str
    nutrition: NutritionFacts
    allergens: list[str]
