"""Custom exception hierarchy for the NVC Exercises application."""


class NvcError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(NvcError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ValidationError(NvcError):
    """Request parameter validation error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=400)


class InvalidExerciseIdError(ValidationError):
    """Exercise identifier is not a run of digits."""

    def __init__(self, exercise_id: str) -> None:
        """Initialize with the rejected identifier."""
        self.exercise_id = exercise_id
        super().__init__("Invalid exercise ID format")

