"""Supabase repository for the user profile."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutrition_engine.adapters.supabase_errors import execute_query
from nutrition_engine.domain.profile import Profile
from nutrition_engine.domain.records import profile_from_record, profile_to_record
from nutrition_engine.services.profiles import ProfileRepository

PROFILE_ROW_ID = "self"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for the single-user profile row."""

    client: Client
    table: str = "profiles"

    def get_profile(self) -> Profile | None:
        """Return the stored profile."""
        response = execute_query(
            self.client.table(self.table)
            .select("payload")
            .eq("id", PROFILE_ROW_ID)
            .limit(1),
            "read profile",
        )
        if not response.data:
            return None
        payload = response.data[0].get("payload")
        if not isinstance(payload, dict):
            return None
        return profile_from_record(payload)

    def save_profile(self, profile: Profile) -> None:
        """Replace the stored profile."""
        execute_query(
            self.client.table(self.table).upsert(
                {
                    "id": PROFILE_ROW_ID,
                    "payload": profile_to_record(profile),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            ),
            "save profile",
        )
