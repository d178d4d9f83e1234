"""Health profile endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Body, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from well_eats.domain.profile import HealthProfile

if TYPE_CHECKING:
    from well_eats.containers import AppContainer

router = APIRouter(prefix="/users/{user_id}/health-profile", tags=["profiles"])


@router.get("")
async def get_profile(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's profile, defaults included."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.load(user_id)
    return profile.model_dump(by_alias=True)


@router.put("")
async def replace_profile(
    user_id: UUID, profile: HealthProfile, request: Request
) -> dict[str, object]:
    """Replace the user's profile wholesale."""
    container: AppContainer = request.app.state.container
    saved = container.profile_service.save(user_id, profile)
    return saved.model_dump(by_alias=True)


@router.patch("")
async def update_profile(
    user_id: UUID,
    request: Request,
    updates: dict[str, object] = Body(...),  # noqa: B008
) -> dict[str, object]:
    """Replace only the profile sections present in the body."""
    container: AppContainer = request.app.state.container
    try:
        saved = container.profile_service.update(user_id, updates)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc
    return saved.model_dump(by_alias=True)
