"""Browse categories suggested from a health profile."""

from well_eats.domain.profile import HealthProfile

DEFAULT_CATEGORIES = ("Breakfast", "Chicken", "Beef")


def recommended_categories(profile: HealthProfile) -> list[str]:
    """Return recipe categories worth browsing, never empty."""
    dietary = profile.dietary
    plant_based = dietary.vegetarian or dietary.vegan
    categories: list[str] = []

    if plant_based:
        categories.append("Vegetarian")
    if profile.preferences.seafood and not plant_based:
        categories.append("Seafood")
    if profile.preferences.sweets:
        categories.append("Dessert")
    if profile.health_goals.weight_loss:
        categories.append("Side")

    return categories or list(DEFAULT_CATEGORIES)
