"""Personalised meal recommendations."""

import asyncio
import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

import httpx

from well_eats.domain.meals import LocalMeal, MealCandidate, RemoteMeal
from well_eats.domain.profile import HealthProfile
from well_eats.services.catalog import LocalMealCatalog
from well_eats.services.categories import recommended_categories
from well_eats.services.ranking import DEFAULT_MIN_SCORE, filter_and_rank
from well_eats.services.recipes import RecipeService

FEED_CATEGORY_COUNT = 3
FEED_SECTION_SIZE = 10
FEATURED_POOL_SIZE = 6
SUGGESTION_LIMIT = 8

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MealFeed:
    """Home feed sections, best matches first."""

    personalized: list[RemoteMeal]
    recommended: list[RemoteMeal]
    explore: list[RemoteMeal]


@dataclass(frozen=True)
class Recommendation:
    """Ranked meals plus the categories re-queried when nothing matched."""

    meals: list[MealCandidate]
    fallback_categories: list[str] = field(default_factory=list)


@dataclass
class RecommendationService:
    """Combines candidate sources with the filter-and-rank pipeline."""

    recipes: RecipeService
    catalog: LocalMealCatalog
    min_score: int = DEFAULT_MIN_SCORE
    rng: random.Random = field(default_factory=random.Random)

    async def recommend(
        self, profile: HealthProfile, query: str | None = None
    ) -> Recommendation:
        """Rank candidates for a query, or the local catalogue when none.

        When nothing survives ranking, the profile's recommended categories
        are fetched and ranked instead.
        """
        candidates: list[MealCandidate]
        if query and query.strip():
            candidates = [*self.catalog.search(query), *await self._search(query)]
        else:
            candidates = list(self.catalog.all())

        ranked = filter_and_rank(candidates, profile, self.min_score)
        if ranked:
            return Recommendation(meals=ranked)

        categories = recommended_categories(profile)
        _logger.info("No candidates passed ranking; trying categories %s", categories)
        fallback = await self._fetch_categories(categories)
        return Recommendation(
            meals=filter_and_rank(fallback, profile, self.min_score),
            fallback_categories=categories,
        )

    async def personalized_feed(self, profile: HealthProfile) -> MealFeed:
        """Build the home feed from the profile's top categories."""
        categories = recommended_categories(profile)[:FEED_CATEGORY_COUNT]
        candidates = await self._fetch_categories(categories)
        ranked = filter_and_rank(candidates, profile, self.min_score)
        size = FEED_SECTION_SIZE
        return MealFeed(
            personalized=ranked[:size],
            recommended=ranked[size : size * 2],
            explore=ranked[size * 2 : size * 3],
        )

    def featured(self, profile: HealthProfile, count: int = 4) -> list[LocalMeal]:
        """Pick a shuffled handful from the best local matches."""
        pool = filter_and_rank(self.catalog.all(), profile, self.min_score)
        pool = pool[:FEATURED_POOL_SIZE]
        return self.rng.sample(pool, len(pool))[:count]

    async def suggestions(
        self, profile: HealthProfile, query: str, limit: int = SUGGESTION_LIMIT
    ) -> list[MealCandidate]:
        """Local then remote name matches, each ranked, capped at ``limit``."""
        if not query.strip():
            return []
        local = filter_and_rank(self.catalog.search(query), profile, self.min_score)
        remote = filter_and_rank(await self._search(query), profile, self.min_score)
        return [*local, *remote][:limit]

    async def _search(self, query: str) -> list[RemoteMeal]:
        try:
            return await self.recipes.search(query)
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning("Recipe search failed for %s: %s", query, exc)
            return []

    async def _fetch_categories(self, categories: Sequence[str]) -> list[RemoteMeal]:
        batches = await asyncio.gather(
            *(self._fetch_category(category) for category in categories)
        )
        return [meal for batch in batches for meal in batch]

    async def _fetch_category(self, category: str) -> list[RemoteMeal]:
        try:
            return await self.recipes.by_category(category)
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning("Recipe category %s failed: %s", category, exc)
            return []
