"""Error taxonomy for the fitness tracker core."""


class ValidationError(ValueError):
    """Raised when user input or an entity field is invalid."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class StateError(RuntimeError):
    """Raised when a session timer transition is not allowed."""


class PersistenceWarning(UserWarning):
    """Non-fatal failure to persist a value that was already applied in memory."""

    def __init__(self, key: str, cause: Exception) -> None:
        super().__init__(f"Failed to persist {key}: {cause}")
        self.key = key
        self.cause = cause
