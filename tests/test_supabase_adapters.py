"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from fitness_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from fitness_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from fitness_tracker.adapters.supabase_settings_storage import (
    SupabaseSettingsStorage,
)
from fitness_tracker.domain.goals import Goal
from fitness_tracker.domain.meals import Meal, MealType


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeQuery:
    table: "FakeTable"
    action: str
    payload: object | None = None
    filters: list[tuple[str, str, object]] = field(default_factory=list)

    @property
    def not_(self) -> "FakeQuery":
        self._negate = True
        return self

    def select(self, *_args) -> "FakeQuery":  # type: ignore[no-untyped-def]
        return self

    def eq(self, column: str, value) -> "FakeQuery":  # type: ignore[no-untyped-def]
        self.filters.append(("eq", column, value))
        return self

    def neq(self, column: str, value) -> "FakeQuery":  # type: ignore[no-untyped-def]
        self.filters.append(("neq", column, value))
        return self

    def in_(self, column: str, values) -> "FakeQuery":  # type: ignore[no-untyped-def]
        op = "not_in" if getattr(self, "_negate", False) else "in"
        self.filters.append((op, column, list(values)))
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeQuery":
        return self

    def limit(self, _count: int) -> "FakeQuery":
        return self

    def execute(self) -> FakeResponse:
        self.table.executed.append(self)
        queue = self.table.responses.get(self.action, [])
        return FakeResponse(data=queue.pop(0) if queue else [])


@dataclass
class FakeTable:
    name: str
    responses: dict[str, list[list[dict[str, object]]]] = field(default_factory=dict)
    executed: list[FakeQuery] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.responses.setdefault(action, []).append(data)

    def select(self, *_args) -> FakeQuery:  # type: ignore[no-untyped-def]
        return FakeQuery(self, "select")

    def upsert(self, payload) -> FakeQuery:  # type: ignore[no-untyped-def]
        return FakeQuery(self, "upsert", payload)

    def delete(self) -> FakeQuery:
        return FakeQuery(self, "delete")


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_meal_repository_load_maps_rows() -> None:
    client = FakeSupabaseClient()
    meal_id = uuid4()
    client.table("meals").queue(
        "select",
        [
            {
                "id": str(meal_id),
                "name": "Porridge",
                "calories": 320,
                "meal_type": "breakfast",
                "logged_at": "2024-05-01T08:15:00+00:00",
            }
        ],
    )

    meals = SupabaseMealRepository(client).load()

    assert len(meals) == 1
    assert meals[0].id == meal_id
    assert meals[0].meal_type is MealType.BREAKFAST
    assert meals[0].logged_at == datetime(2024, 5, 1, 8, 15, tzinfo=UTC)


def test_meal_repository_save_upserts_then_prunes() -> None:
    client = FakeSupabaseClient()
    meal = Meal(
        name="Salad",
        calories=250,
        meal_type=MealType.LUNCH,
        logged_at=datetime(2024, 5, 1, 12, 0, tzinfo=UTC),
    )

    SupabaseMealRepository(client).save([meal])

    upsert, delete = client.table("meals").executed
    assert upsert.action == "upsert"
    assert upsert.payload == [
        {
            "id": str(meal.id),
            "name": "Salad",
            "calories": 250,
            "meal_type": "lunch",
            "logged_at": "2024-05-01T12:00:00+00:00",
        }
    ]
    assert delete.action == "delete"
    assert delete.filters == [("not_in", "id", [str(meal.id)])]


def test_meal_repository_save_empty_clears_table() -> None:
    client = FakeSupabaseClient()

    SupabaseMealRepository(client).save([])

    (delete,) = client.table("meals").executed
    assert delete.action == "delete"
    assert delete.filters[0][0] == "neq"


def test_goal_repository_roundtrip_payload() -> None:
    client = FakeSupabaseClient()
    goal = Goal(
        name="Water", target_value=2000, current_value=500, deadline=date(2024, 5, 2)
    )
    client.table("goals").queue(
        "select",
        [
            {
                "id": str(goal.id),
                "name": "Water",
                "target_value": 2000,
                "current_value": 500,
                "deadline": "2024-05-02",
            }
        ],
    )
    repository = SupabaseGoalRepository(client)

    repository.save([goal])
    loaded = repository.load()

    upsert = client.table("goals").executed[0]
    assert upsert.payload[0]["deadline"] == "2024-05-02"
    assert loaded == [goal]
    assert loaded[0].target_value == 2000.0


def test_settings_storage_get_and_set() -> None:
    client = FakeSupabaseClient()
    table = client.table("app_settings")
    table.queue("select", [{"value": 2300}])
    table.queue("upsert", [{"key": "daily_calorie_goal", "value": 2500}])
    storage = SupabaseSettingsStorage(client)

    assert storage.get_int("daily_calorie_goal") == 2300
    assert storage.get_int("daily_calorie_goal") is None
    storage.set_int("daily_calorie_goal", 2500)

    upsert = table.executed[-1]
    assert upsert.payload["key"] == "daily_calorie_goal"
    assert upsert.payload["value"] == 2500


def test_settings_storage_set_raises_on_empty_response() -> None:
    storage = SupabaseSettingsStorage(FakeSupabaseClient())

    with pytest.raises(RuntimeError):
        storage.set_int("daily_calorie_goal", 2500)
