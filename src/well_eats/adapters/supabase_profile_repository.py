"""Supabase-backed health profile repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from well_eats.domain.profile import HealthProfile
from well_eats.services.profiles import HealthProfileRepository


@dataclass
class SupabaseHealthProfileRepository(HealthProfileRepository):
    """Stores one JSON profile document per user."""

    client: Client
    table_name: str = "health_profiles"

    def get_profile(self, user_id: UUID) -> HealthProfile | None:
        """Return the stored profile for a user, if present."""
        response = (
            self.client.table(self.table_name)
            .select("profile")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        document = response.data[0].get("profile")
        if not isinstance(document, dict):
            return None
        return HealthProfile.model_validate(document)

    def upsert_profile(self, user_id: UUID, profile: HealthProfile) -> None:
        """Insert or replace the user's profile document."""
        response = (
            self.client.table(self.table_name)
            .upsert(
                {
                    "user_id": str(user_id),
                    "profile": profile.model_dump(mode="json", by_alias=True),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save health profile")
