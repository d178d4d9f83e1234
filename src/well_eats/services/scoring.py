"""Keyword-based meal suitability scoring.

Recipe sources do not expose reliable structured diet or allergen metadata, so
a meal is judged only by the keywords found in its text. Penalties are ordered
by severity: allergies, then dietary regimes, then taste preferences. Bonuses
reward meals that advertise a matching diet or serve a health goal.
"""

from collections.abc import Iterable
from types import MappingProxyType

from well_eats.domain.meals import LocalMeal, MealCandidate, RemoteMeal, ScorableMeal
from well_eats.domain.profile import HealthProfile

BASE_SCORE = 100

FOOD_CATEGORIES = MappingProxyType(
    {
        "meat": ("beef", "pork", "lamb", "chicken", "turkey", "duck"),
        "seafood": ("fish", "shrimp", "crab", "lobster", "salmon", "tuna"),
        "dairy": ("milk", "cheese", "butter", "cream", "yogurt"),
        "gluten": ("wheat", "bread", "pasta", "flour", "barley", "rye"),
        "nuts": ("peanut", "almond", "walnut", "cashew", "pistachio"),
        "eggs": ("egg", "mayonnaise"),
        "soy": ("soy", "tofu", "tempeh", "miso"),
    }
)

# Keyed by DietaryFlags attribute name.
DIETARY_KEYWORDS = MappingProxyType(
    {
        "vegetarian": ("vegetarian", "veggie"),
        "vegan": ("vegan",),
        "gluten_free": ("gluten free", "gluten-free"),
        "dairy_free": ("dairy free", "dairy-free", "lactose free"),
        "ketogenic": ("keto", "ketogenic", "low carb"),
        "paleo": ("paleo", "paleolithic"),
        "low_sodium": ("low sodium", "low salt"),
    }
)

VEGETARIAN_PENALTY = 50
VEGAN_PENALTY = 60
GLUTEN_FREE_PENALTY = 40
DAIRY_FREE_PENALTY = 40
ALLERGY_PENALTY = 100
SEAFOOD_PREFERENCE_PENALTY = 20
MEAT_PREFERENCE_PENALTY = 20
SWEETS_PREFERENCE_PENALTY = 15
DIETARY_KEYWORD_BONUS = 20
HEALTH_GOAL_BONUS = 15

_SWEET_KEYWORDS = ("dessert", "sweet")
_WEIGHT_LOSS_KEYWORDS = ("salad", "light", "healthy")
_HEART_HEALTH_KEYWORDS = ("salmon", "avocado", "oats")


def to_scorable(meal: MealCandidate | ScorableMeal) -> ScorableMeal:
    """Normalize either meal shape into the text-only scoring view."""
    if isinstance(meal, ScorableMeal):
        return meal
    if isinstance(meal, RemoteMeal):
        return ScorableMeal(
            name=meal.name or "",
            category=meal.category or "",
            tags=meal.tags or "",
            body=meal.instructions or "",
        )
    if isinstance(meal, LocalMeal):
        return ScorableMeal(
            name=meal.name or "",
            category=meal.category or "",
            tags=" ".join(meal.tags or []),
            body="",
        )
    raise TypeError(f"Unsupported meal type: {type(meal).__name__}")


def allergy_keywords(allergy: str) -> tuple[str, ...]:
    """Resolve an allergy to keywords, falling back to the literal string."""
    # A blank entry would match every meal, so it is skipped.
    if not allergy.strip():
        return ()
    normalized = allergy.lower()
    return FOOD_CATEGORIES.get(normalized, (normalized,))


def calculate_meal_score(
    meal: MealCandidate | ScorableMeal, profile: HealthProfile
) -> int:
    """Score a meal against a health profile; never below zero."""
    text = to_scorable(meal).search_text
    dietary = profile.dietary
    preferences = profile.preferences
    goals = profile.health_goals

    has_meat = _contains_any(text, FOOD_CATEGORIES["meat"])
    has_seafood = _contains_any(text, FOOD_CATEGORIES["seafood"])
    has_dairy = _contains_any(text, FOOD_CATEGORIES["dairy"])

    score = BASE_SCORE

    if dietary.vegetarian and (has_meat or has_seafood):
        score -= VEGETARIAN_PENALTY
    if dietary.vegan and (
        has_meat
        or has_seafood
        or has_dairy
        or _contains_any(text, FOOD_CATEGORIES["eggs"])
    ):
        score -= VEGAN_PENALTY
    if dietary.gluten_free and _contains_any(text, FOOD_CATEGORIES["gluten"]):
        score -= GLUTEN_FREE_PENALTY
    if dietary.dairy_free and has_dairy:
        score -= DAIRY_FREE_PENALTY

    for allergy in profile.allergies:
        if _contains_any(text, allergy_keywords(allergy)):
            score -= ALLERGY_PENALTY

    if not preferences.seafood and has_seafood:
        score -= SEAFOOD_PREFERENCE_PENALTY
    if not preferences.meat and has_meat:
        score -= MEAT_PREFERENCE_PENALTY
    if not preferences.sweets and _contains_any(text, _SWEET_KEYWORDS):
        score -= SWEETS_PREFERENCE_PENALTY

    for flag, keywords in DIETARY_KEYWORDS.items():
        if getattr(dietary, flag) and _contains_any(text, keywords):
            score += DIETARY_KEYWORD_BONUS

    if goals.weight_loss and _contains_any(text, _WEIGHT_LOSS_KEYWORDS):
        score += HEALTH_GOAL_BONUS
    if goals.heart_health and _contains_any(text, _HEART_HEALTH_KEYWORDS):
        score += HEALTH_GOAL_BONUS

    # No upper clamp: bonuses may lift a strong match above the base score.
    return max(0, score)


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)
