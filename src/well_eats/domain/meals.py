"""Domain models for candidate meals and their ingredients."""

from dataclasses import dataclass, field

from well_eats.domain.nutrition import IngredientInfo


@dataclass(frozen=True)
class RawIngredient:
    """Ingredient as declared on a recipe."""

    name: str
    measure: str = ""


@dataclass(frozen=True)
class MacroSummary:
    """Stored macros for a catalogue meal."""

    calories: float
    protein: float
    fat: float
    carbs: float


@dataclass(frozen=True)
class RemoteMeal:
    """Meal fetched from the remote recipe source."""

    id: str
    name: str
    thumbnail: str | None = None
    category: str | None = None
    area: str | None = None
    tags: str | None = None
    instructions: str | None = None
    ingredients: list[RawIngredient] = field(default_factory=list)


@dataclass(frozen=True)
class LocalMeal:
    """Meal from the bundled local catalogue."""

    id: str
    name: str
    category: str | None = None
    thumbnail: str | None = None
    tags: list[str] = field(default_factory=list)
    ingredients: list[str] = field(default_factory=list)
    instructions: str | None = None
    nutrition: MacroSummary | None = None


MealCandidate = RemoteMeal | LocalMeal


@dataclass(frozen=True)
class ScorableMeal:
    """Shape-agnostic text view of a meal used for keyword scoring."""

    name: str
    category: str
    tags: str
    body: str

    @property
    def search_text(self) -> str:
        """Lowercase concatenation of every text field."""
        return " ".join((self.name, self.category, self.tags, self.body)).lower()


@dataclass(frozen=True)
class MealDetail:
    """Meal with its ingredient breakdown for the detail view."""

    meal: MealCandidate
    ingredients: list[IngredientInfo]
