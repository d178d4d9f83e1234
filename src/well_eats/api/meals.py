"""Recommendation, meal detail and ingredient endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

import httpx
from fastapi import APIRouter, HTTPException, Request, status

from well_eats.api.schemas import (
    EnrichRequest,
    detail_payload,
    ingredient_payload,
    meal_payload,
)
from well_eats.domain.meals import RawIngredient
from well_eats.services.categories import recommended_categories

if TYPE_CHECKING:
    from well_eats.containers import AppContainer

router = APIRouter(tags=["meals"])
_logger = logging.getLogger(__name__)


@router.get("/users/{user_id}/recommendations")
async def recommendations(
    user_id: UUID, request: Request, q: str | None = None
) -> dict[str, object]:
    """Return ranked meals for the user, with any fallback categories used."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.load(user_id)
    result = await container.recommendation_service.recommend(profile, query=q)
    return {
        "meals": [meal_payload(meal) for meal in result.meals],
        "fallback_categories": result.fallback_categories,
    }


@router.get("/users/{user_id}/feed")
async def feed(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the personalised home feed sections."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.load(user_id)
    sections = await container.recommendation_service.personalized_feed(profile)
    return {
        "personalized": [meal_payload(meal) for meal in sections.personalized],
        "recommended": [meal_payload(meal) for meal in sections.recommended],
        "explore": [meal_payload(meal) for meal in sections.explore],
    }


@router.get("/users/{user_id}/featured")
async def featured(user_id: UUID, request: Request) -> dict[str, object]:
    """Return a few featured catalogue meals."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.load(user_id)
    meals = container.recommendation_service.featured(profile)
    return {"meals": [meal_payload(meal) for meal in meals]}


@router.get("/users/{user_id}/suggestions")
async def suggestions(user_id: UUID, q: str, request: Request) -> dict[str, object]:
    """Return search-as-you-type suggestions."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.load(user_id)
    meals = await container.recommendation_service.suggestions(profile, q)
    return {"meals": [meal_payload(meal) for meal in meals]}


@router.get("/users/{user_id}/categories")
async def categories(user_id: UUID, request: Request) -> dict[str, object]:
    """Return browse categories suggested by the user's profile."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.load(user_id)
    return {"categories": recommended_categories(profile)}


@router.get("/meals/{meal_id}")
async def meal_detail(meal_id: str, request: Request) -> dict[str, object]:
    """Return a meal with its enriched ingredient breakdown."""
    container: AppContainer = request.app.state.container
    try:
        detail = await container.meal_detail_service.get_detail(meal_id)
    except httpx.HTTPError as exc:
        _logger.exception("Meal lookup failed for %s", meal_id)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY) from exc
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return detail_payload(detail)


@router.post("/ingredients/enrich")
async def enrich_ingredients(
    body: EnrichRequest, request: Request
) -> dict[str, object]:
    """Decorate raw ingredients with nutrition and allergen facts."""
    container: AppContainer = request.app.state.container
    raw = [
        RawIngredient(name=item.name, measure=item.measure)
        for item in body.ingredients
    ]
    enriched = await container.enrichment_service.enrich(raw)
    return {"ingredients": [ingredient_payload(item) for item in enriched]}
