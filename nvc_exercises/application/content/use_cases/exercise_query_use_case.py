"""Use case for reading exercises in the caller's language."""

import structlog

from nvc_exercises.application.content.protocols import ExerciseRepositoryProtocol
from nvc_exercises.application.content.queries import ExerciseFilter
from nvc_exercises.domain.common.value_objects import ExerciseId
from nvc_exercises.domain.content.exceptions import ExerciseNotFoundError
from nvc_exercises.domain.content.services import ExerciseProjector, ProjectedExercise
from nvc_exercises.domain.content.value_objects import Language

logger = structlog.get_logger(__name__)


class ExerciseQueryUseCase:
    """Composes the exercise repository with the projector."""

    def __init__(
        self,
        exercise_repository: ExerciseRepositoryProtocol,
        projector: ExerciseProjector,
    ) -> None:
        """Initialize use case with repository protocol and projector."""
        self.exercise_repository = exercise_repository
        self.projector = projector

    def list_exercises(
        self, exercise_filter: ExerciseFilter, language: str | None = None
    ) -> list[ProjectedExercise]:
        """
        List exercises matching the filter, projected into ``language``.

        Args:
            exercise_filter: Conjunctive filter, already validated
            language: "en", "zh", or None for language maps

        Returns:
            Projected exercises in storage order

        Raises:
            InvalidLanguageError: If language is not supported
        """
        resolved = Language.from_code(language) if language is not None else None

        exercises = self.exercise_repository.find_all(exercise_filter)
        logger.debug(
            "exercises_listed",
            predicates=exercise_filter.predicates(),
            language=resolved,
            count=len(exercises),
        )
        return self.projector.project_many(exercises, resolved)

    def get_exercise(self, exercise_id: int, language: str | None = None) -> ProjectedExercise:
        """
        Get one exercise by ID, projected into ``language``.

        Args:
            exercise_id: Numeric exercise ID
            language: "en", "zh", or None for language maps

        Returns:
            The projected exercise

        Raises:
            InvalidLanguageError: If language is not supported
            ExerciseNotFoundError: If no exercise has this ID
        """
        resolved = Language.from_code(language) if language is not None else None

        exercise = self.exercise_repository.find_by_id(ExerciseId(exercise_id))
        if exercise is None:
            raise ExerciseNotFoundError(exercise_id)

        return self.projector.project(exercise, resolved)
