"""Ingredient allergen lookups backed by Open Food Facts."""

import logging
from dataclasses import dataclass

import httpx

from well_eats.adapters.openfoodfacts_client import OpenFoodFactsClient
from well_eats.services.cache import Cache

_logger = logging.getLogger(__name__)


@dataclass
class AllergenService:
    """Resolves ingredient names to allergen tags such as ``en:gluten``."""

    client: OpenFoodFactsClient
    cache: Cache
    ttl_seconds: int = 86400

    async def lookup_allergens(self, ingredient_name: str) -> list[str]:
        """Return allergen tags of the first matching product.

        An empty list means no product matched or the lookup failed.
        """
        query = ingredient_name.strip().lower()
        cache_key = f"off:allergens:{query}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return list(cached)

        try:
            payload = await self.client.search_products(query, page_size=1)
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning("Allergen lookup failed for %s: %s", query, exc)
            return []

        allergens = _first_product_allergens(payload)
        self.cache.set(cache_key, allergens, ttl_seconds=self.ttl_seconds)
        return list(allergens)


def _first_product_allergens(payload: object) -> list[str]:
    if not isinstance(payload, dict):
        return []
    products = payload.get("products")
    if not isinstance(products, list) or not products:
        return []
    product = products[0]
    if not isinstance(product, dict):
        return []
    tags = product.get("allergens_tags")
    if not isinstance(tags, list):
        return []
    return [tag for tag in tags if isinstance(tag, str) and tag]
