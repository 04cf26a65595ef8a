"""Supabase key-value storage for user settings."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from fitness_tracker.services.user_settings import SettingsStorage


@dataclass
class SupabaseSettingsStorage(SettingsStorage):
    """Supabase implementation for integer settings."""

    client: Client

    def get_int(self, key: str) -> int | None:
        """Return the stored value for a key."""
        response = (
            self.client.table("app_settings")
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("value")
        return None if value is None else int(value)

    def set_int(self, key: str, value: int) -> None:
        """Insert or update the value for a key."""
        response = (
            self.client.table("app_settings")
            .upsert(
                {
                    "key": key,
                    "value": value,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to store setting {key}")
