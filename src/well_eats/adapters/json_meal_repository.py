"""Local meal catalogue loaded from a JSON file."""

import json
from dataclasses import dataclass, field
from pathlib import Path

from well_eats.domain.meals import LocalMeal, MacroSummary
from well_eats.services.catalog import LocalMealRepository

BUNDLED_MEALS_PATH = Path(__file__).resolve().parents[1] / "data" / "local_meals.json"


@dataclass
class JsonMealRepository(LocalMealRepository):
    """Reads catalogue meals from a JSON array, once."""

    path: Path = BUNDLED_MEALS_PATH
    _meals: list[LocalMeal] | None = field(default=None, init=False, repr=False)

    def list_meals(self) -> list[LocalMeal]:
        """Return all meals, loading the file on first use."""
        if self._meals is None:
            rows = json.loads(Path(self.path).read_text(encoding="utf-8"))
            self._meals = [_meal_from_row(row) for row in rows]
        return list(self._meals)


def _meal_from_row(row: dict[str, object]) -> LocalMeal:
    nutrition = row.get("nutrition")
    return LocalMeal(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        category=row.get("category"),
        thumbnail=row.get("thumbnail"),
        tags=[str(tag) for tag in row.get("tags") or []],
        ingredients=[str(item) for item in row.get("ingredients") or []],
        instructions=row.get("instructions"),
        nutrition=(
            MacroSummary(
                calories=float(nutrition.get("calories", 0.0)),
                protein=float(nutrition.get("protein", 0.0)),
                fat=float(nutrition.get("fat", 0.0)),
                carbs=float(nutrition.get("carbs", 0.0)),
            )
            if isinstance(nutrition, dict)
            else None
        ),
    )
