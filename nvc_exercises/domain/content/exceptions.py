"""Content domain exceptions."""

from nvc_exercises.domain.common.exceptions import EntityNotFoundError


class ExerciseNotFoundError(EntityNotFoundError):
    """Raised when an exercise cannot be found."""

    def __init__(self, exercise_id: int) -> None:
        super().__init__("Exercise", exercise_id)
