"""Protocol for Exercise repository in content context."""

from typing import Protocol

from nvc_exercises.application.content.queries import ExerciseFilter
from nvc_exercises.domain.common.value_objects import ExerciseId
from nvc_exercises.domain.content.entities import Exercise


class ExerciseRepositoryProtocol(Protocol):
    """Protocol for Exercise repository operations."""

    def find_all(self, exercise_filter: ExerciseFilter) -> list[Exercise]:
        """
        Get every exercise matching all predicates of the filter.

        Args:
            exercise_filter: Pre-validated filter; empty matches everything

        Returns:
            List of exercise entities in storage order
        """
        ...

    def find_by_id(self, exercise_id: ExerciseId) -> Exercise | None:
        """
        Find an exercise by exact ID.

        Args:
            exercise_id: The exercise ID

        Returns:
            Exercise entity if found, None otherwise
        """
        ...

    def count(self) -> int:
        """Count stored exercises."""
        ...

    def add_all(self, exercises: list[Exercise]) -> list[Exercise]:
        """
        Persist new exercises in a single transaction.

        Args:
            exercises: Unsaved exercise entities

        Returns:
            Saved entities with database-generated IDs
        """
        ...
