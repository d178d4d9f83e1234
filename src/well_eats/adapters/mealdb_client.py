"""TheMealDB recipe API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class MealDbClient(Protocol):
    """Interface for TheMealDB lookups."""

    async def filter_by_category(self, category: str) -> dict[str, object]:
        """List meals in a category."""

    async def search_by_name(self, query: str) -> dict[str, object]:
        """Search meals by name."""

    async def lookup_meal(self, meal_id: str) -> dict[str, object]:
        """Fetch a single meal with its ingredient slots."""


@dataclass
class HttpxMealDbClient(MealDbClient):
    """HTTPX-backed TheMealDB client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(cls, base_url: str) -> "HttpxMealDbClient":
        """Create a client owning its own httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient())

    async def filter_by_category(self, category: str) -> dict[str, object]:
        """List meals in a category."""
        return await self._get("filter.php", {"c": category})

    async def search_by_name(self, query: str) -> dict[str, object]:
        """Search meals by name."""
        return await self._get("search.php", {"s": query})

    async def lookup_meal(self, meal_id: str) -> dict[str, object]:
        """Fetch a single meal by id."""
        return await self._get("lookup.php", {"i": meal_id})

    async def _get(self, path: str, params: dict[str, str]) -> dict[str, object]:
        response = await self.http_client.get(
            f"{self.base_url}/{path}",
            params=params,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
