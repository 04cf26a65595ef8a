"""User settings service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from fitness_tracker.domain.errors import PersistenceWarning
from fitness_tracker.domain.user_settings import (
    DEFAULT_DAILY_CALORIE_GOAL,
    UserSettings,
)
from fitness_tracker.services.inputs import parse_positive_int

_logger = logging.getLogger(__name__)

DAILY_CALORIE_GOAL_KEY = "daily_calorie_goal"

SettingsListener = Callable[[UserSettings], None]


class SettingsStorage(Protocol):
    """Persistence interface for integer preferences."""

    def get_int(self, key: str) -> int | None:
        """Return the stored value for a key, if present."""

    def set_int(self, key: str, value: int) -> None:
        """Store a value for a key."""


@dataclass(frozen=True)
class SettingsUpdate:
    """Outcome of a settings change."""

    settings: UserSettings
    warning: PersistenceWarning | None = None

    @property
    def persisted(self) -> bool:
        return self.warning is None


@dataclass
class UserSettingsService:
    """Holds the current settings and writes changes through to storage."""

    storage: SettingsStorage
    settings: UserSettings = field(default_factory=UserSettings)
    _listeners: list[SettingsListener] = field(default_factory=list, repr=False)

    @classmethod
    def load(
        cls,
        storage: SettingsStorage,
        default_daily_calorie_goal: int = DEFAULT_DAILY_CALORIE_GOAL,
    ) -> "UserSettingsService":
        """Load stored settings, falling back to the default when unset or zero."""
        stored = storage.get_int(DAILY_CALORIE_GOAL_KEY)
        goal = stored if stored else default_daily_calorie_goal
        return cls(storage=storage, settings=UserSettings(daily_calorie_goal=goal))

    @property
    def daily_calorie_goal(self) -> int:
        return self.settings.daily_calorie_goal

    def subscribe(self, listener: SettingsListener) -> Callable[[], None]:
        """Register a change listener and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_daily_calorie_goal(self, value: int | str) -> SettingsUpdate:
        """Apply a new daily calorie goal, persist it and notify listeners."""
        goal = parse_positive_int(value, DAILY_CALORIE_GOAL_KEY)
        self.settings = UserSettings(daily_calorie_goal=goal)
        update = SettingsUpdate(settings=self.settings, warning=self.persist())
        for listener in list(self._listeners):
            listener(self.settings)
        return update

    def persist(self) -> PersistenceWarning | None:
        """Write the current settings to storage.

        Failures are returned as a warning; the in-memory value is kept.
        """
        try:
            self.storage.set_int(
                DAILY_CALORIE_GOAL_KEY, self.settings.daily_calorie_goal
            )
        except Exception as exc:
            _logger.warning(
                "Failed to persist setting: key=%s error=%s",
                DAILY_CALORIE_GOAL_KEY,
                exc,
            )
            return PersistenceWarning(DAILY_CALORIE_GOAL_KEY, exc)
        return None
