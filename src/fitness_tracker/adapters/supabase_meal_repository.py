"""Supabase repository for the meal log."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.meals import Meal, MealType
from fitness_tracker.services.meals import MealRepository

_NIL_ID = str(UUID(int=0))


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation of the meal log."""

    client: Client

    def load(self) -> list[Meal]:
        """Return every meal ordered by log time."""
        response = (
            self.client.table("meals")
            .select("id, name, calories, meal_type, logged_at")
            .order("logged_at")
            .execute()
        )
        return [_row_to_meal(row) for row in response.data or []]

    def save(self, meals: Sequence[Meal]) -> None:
        """Upsert the given meals and delete rows no longer in the log.

        The upsert and the delete are separate requests. If the delete fails,
        the table keeps the new rows alongside stale ones until the next save.
        """
        if meals:
            self.client.table("meals").upsert(
                [_meal_to_row(meal) for meal in meals]
            ).execute()
        query = self.client.table("meals").delete()
        if meals:
            query = query.not_.in_("id", [str(meal.id) for meal in meals])
        else:
            query = query.neq("id", _NIL_ID)
        query.execute()


def _meal_to_row(meal: Meal) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "name": meal.name,
        "calories": meal.calories,
        "meal_type": meal.meal_type.value,
        "logged_at": meal.logged_at.isoformat(),
    }


def _row_to_meal(row: dict[str, object]) -> Meal:
    return Meal(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        calories=int(row["calories"]),
        meal_type=MealType(str(row["meal_type"])),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
    )
