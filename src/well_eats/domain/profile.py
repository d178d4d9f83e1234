"""Health profile domain model."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ProfileSection(BaseModel):
    """Base for profile sections serialised with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class DietaryFlags(_ProfileSection):
    """Dietary regimes a user follows; flags are independent."""

    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = False
    dairy_free: bool = False
    ketogenic: bool = False
    paleo: bool = False
    low_carb: bool = False
    low_sodium: bool = False


class FoodPreferences(_ProfileSection):
    """Food-type affinities, opted in by default."""

    spicy_foods: bool = True
    seafood: bool = True
    meat: bool = True
    sweets: bool = True


class HealthGoals(_ProfileSection):
    """Health goals that earn recommendation bonuses."""

    weight_loss: bool = False
    muscle_gain: bool = False
    heart_health: bool = False
    diabetic_friendly: bool = False


class HealthProfile(_ProfileSection):
    """A user's dietary, allergy, preference and goal state."""

    dietary: DietaryFlags = Field(default_factory=DietaryFlags)
    allergies: list[str] = Field(default_factory=list)
    preferences: FoodPreferences = Field(default_factory=FoodPreferences)
    health_goals: HealthGoals = Field(default_factory=HealthGoals)
    # Stored for the client, never read by scoring.
    restrictions: list[str] = Field(default_factory=list)
