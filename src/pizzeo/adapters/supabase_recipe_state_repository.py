"""Supabase repository for recipe state."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from pizzeo.services.recipe_state import RecipeStateRepository


@dataclass
class SupabaseRecipeStateRepository(RecipeStateRepository):
    """Supabase implementation storing one JSON document per namespace."""

    client: Client
    table_name: str = "recipe_states"

    def load_state(self, namespace: str) -> dict[str, object] | None:
        """Return the stored state document for a namespace."""
        response = (
            self.client.table(self.table_name)
            .select("state")
            .eq("namespace", namespace)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("state")

    def save_state(self, namespace: str, state: dict[str, object]) -> None:
        """Insert or replace the state document for a namespace."""
        self.client.table(self.table_name).upsert(
            {
                "namespace": namespace,
                "state": state,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="namespace",
        ).execute()
