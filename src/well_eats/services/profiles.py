"""Health profile persistence service."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from well_eats.domain.profile import HealthProfile

_logger = logging.getLogger(__name__)

# Accept both JSON (camelCase) and attribute (snake_case) section names.
_SECTION_NAMES = {
    **{name: name for name in HealthProfile.model_fields},
    **{
        info.alias: name
        for name, info in HealthProfile.model_fields.items()
        if info.alias
    },
}


class HealthProfileRepository(Protocol):
    """Persistence interface for health profiles."""

    def get_profile(self, user_id: UUID) -> HealthProfile | None:
        """Return the stored profile for a user, if any."""

    def upsert_profile(self, user_id: UUID, profile: HealthProfile) -> None:
        """Replace the stored profile for a user."""


@dataclass
class HealthProfileService:
    """Loads and stores whole health profiles; last writer wins."""

    repository: HealthProfileRepository

    def load(self, user_id: UUID) -> HealthProfile:
        """Return the user's profile, or the default profile."""
        return self.repository.get_profile(user_id) or HealthProfile()

    def save(self, user_id: UUID, profile: HealthProfile) -> HealthProfile:
        """Replace the user's profile wholesale."""
        self.repository.upsert_profile(user_id, profile)
        return profile

    def update(self, user_id: UUID, updates: Mapping[str, object]) -> HealthProfile:
        """Merge top-level sections over the current profile and save.

        A section present in ``updates`` replaces that whole section.
        """
        merged = self.load(user_id).model_dump()
        for key, value in updates.items():
            name = _SECTION_NAMES.get(key)
            if name is None:
                _logger.debug("Ignoring unknown profile section %s", key)
                continue
            merged[name] = value
        return self.save(user_id, HealthProfile.model_validate(merged))
