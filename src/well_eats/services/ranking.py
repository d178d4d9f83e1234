"""Filter-and-rank pipeline over candidate meals."""

from collections.abc import Sequence
from typing import TypeVar

from well_eats.domain.meals import MealCandidate
from well_eats.domain.profile import HealthProfile
from well_eats.services.scoring import calculate_meal_score, to_scorable

DEFAULT_MIN_SCORE = 50

MealT = TypeVar("MealT", bound=MealCandidate)


def filter_and_rank(
    meals: Sequence[MealT],
    profile: HealthProfile,
    min_score: int = DEFAULT_MIN_SCORE,
) -> list[MealT]:
    """Keep meals scoring at least ``min_score``, best first.

    Equal scores keep their input order.
    """
    scored = [
        (calculate_meal_score(to_scorable(meal), profile), meal) for meal in meals
    ]
    kept = [(score, meal) for score, meal in scored if score >= min_score]
    kept.sort(key=lambda item: item[0], reverse=True)
    return [meal for _, meal in kept]
