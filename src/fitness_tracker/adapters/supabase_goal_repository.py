"""Supabase repository for goals."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.goals import Goal
from fitness_tracker.services.goals import GoalRepository

_NIL_ID = str(UUID(int=0))


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for goals."""

    client: Client

    def load(self) -> list[Goal]:
        """Return every goal in creation order."""
        response = (
            self.client.table("goals")
            .select("id, name, target_value, current_value, deadline")
            .order("created_at")
            .execute()
        )
        return [
            Goal(
                id=UUID(str(row["id"])),
                name=str(row["name"]),
                target_value=float(row["target_value"]),
                current_value=float(row["current_value"]),
                deadline=date.fromisoformat(str(row["deadline"])),
            )
            for row in response.data or []
        ]

    def save(self, goals: Sequence[Goal]) -> None:
        """Upsert the given goals and delete rows that were removed.

        The upsert and the delete are separate requests. If the delete fails,
        the table keeps the new rows alongside stale ones until the next save.
        """
        if goals:
            self.client.table("goals").upsert(
                [
                    {
                        "id": str(goal.id),
                        "name": goal.name,
                        "target_value": goal.target_value,
                        "current_value": goal.current_value,
                        "deadline": goal.deadline.isoformat(),
                    }
                    for goal in goals
                ]
            ).execute()
        query = self.client.table("goals").delete()
        if goals:
            query = query.not_.in_("id", [str(goal.id) for goal in goals])
        else:
            query = query.neq("id", _NIL_ID)
        query.execute()
