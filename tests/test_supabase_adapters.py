"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from uuid import uuid4

import pytest

from well_eats.adapters.supabase_profile_repository import (
    SupabaseHealthProfileRepository,
)
from well_eats.domain.profile import DietaryFlags, HealthProfile


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "upsert": []}
    )
    last_payload: object | None = None
    last_conflict: str | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def upsert(  # type: ignore[no-untyped-def]
        self, payload, on_conflict: str = ""
    ) -> "FakeTable":
        self._action = "upsert"
        self.last_payload = payload
        self.last_conflict = on_conflict
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_get_profile_parses_camel_case_document() -> None:
    client = FakeSupabaseClient()
    table = client.table("health_profiles")
    user_id = uuid4()
    table.queue(
        "select",
        [
            {
                "profile": {
                    "dietary": {"glutenFree": True},
                    "allergies": ["shellfish"],
                    "healthGoals": {"heartHealth": True},
                }
            }
        ],
    )

    profile = SupabaseHealthProfileRepository(client).get_profile(user_id)

    assert profile is not None
    assert profile.dietary.gluten_free is True
    assert profile.allergies == ["shellfish"]
    assert profile.health_goals.heart_health is True
    assert profile.preferences.meat is True
    assert table.last_filters == [("user_id", str(user_id))]


def test_get_profile_missing_row_is_none() -> None:
    client = FakeSupabaseClient()

    assert SupabaseHealthProfileRepository(client).get_profile(uuid4()) is None


def test_upsert_profile_writes_document() -> None:
    client = FakeSupabaseClient()
    table = client.table("health_profiles")
    table.queue("upsert", [{"user_id": "x"}])
    user_id = uuid4()

    SupabaseHealthProfileRepository(client).upsert_profile(
        user_id, HealthProfile(dietary=DietaryFlags(vegan=True))
    )

    payload = table.last_payload
    assert isinstance(payload, dict)
    assert payload["user_id"] == str(user_id)
    assert payload["profile"]["dietary"]["vegan"] is True
    assert payload["profile"]["healthGoals"]["weightLoss"] is False
    assert "updated_at" in payload
    assert table.last_conflict == "user_id"


def test_upsert_profile_without_data_raises() -> None:
    client = FakeSupabaseClient()

    with pytest.raises(RuntimeError, match="Failed to save health profile"):
        SupabaseHealthProfileRepository(client).upsert_profile(
            uuid4(), HealthProfile()
        )
