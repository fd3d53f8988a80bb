"""
Projection of stored bilingual exercises into the shape a caller asked for.

Without a language every bilingual field stays a ``{"en": ..., "zh": ...}``
map. With a language each field collapses to the string in that language and
``steps`` collapses to a list of strings in the same order.
"""

from dataclasses import dataclass

from nvc_exercises.domain.content.entities import Exercise
from nvc_exercises.domain.content.value_objects import BilingualText, Language

# A projected bilingual field: a plain string or a language map
LocalizedValue = str | dict[str, str]


@dataclass(frozen=True)
class ProjectedExercise:
    """An exercise resolved to zero or one language, ready for serialization."""

    id: str
    category: str
    name: LocalizedValue
    description: LocalizedValue
    difficulty: str | None = None
    audience: str | None = None
    related_ids: list[str] | None = None
    scenario: LocalizedValue | None = None
    example: LocalizedValue | None = None
    alternative: LocalizedValue | None = None
    request_template: LocalizedValue | None = None
    gratitude_expression: LocalizedValue | None = None
    steps: list[LocalizedValue] | None = None


class ExerciseProjector:
    """Domain service that resolves an exercise's bilingual fields."""

    def project(self, exercise: Exercise, language: str | Language | None = None) -> ProjectedExercise:
        """
        Project an exercise into the requested language.

        Args:
            exercise: The stored exercise
            language: "en", "zh", or None for language maps

        Returns:
            ProjectedExercise with every bilingual field resolved

        Raises:
            InvalidLanguageError: If language is set but not a supported code
        """
        resolved = Language.from_code(language) if language is not None else None

        def localize(text: BilingualText | None) -> LocalizedValue | None:
            if text is None:
                return None
            if resolved is None:
                return text.to_map()
            return text.in_language(resolved)

        steps = [localize(step) for step in exercise.steps]

        return ProjectedExercise(
            id=str(exercise.id),
            category=exercise.category.value,
            name=localize(exercise.name),  # type: ignore[arg-type]
            description=localize(exercise.description),  # type: ignore[arg-type]
            difficulty=exercise.difficulty.value if exercise.difficulty else None,
            audience=exercise.audience.value if exercise.audience else None,
            related_ids=[str(related) for related in exercise.related_ids] or None,
            scenario=localize(exercise.scenario),
            example=localize(exercise.example),
            alternative=localize(exercise.alternative),
            request_template=localize(exercise.request_template),
            gratitude_expression=localize(exercise.gratitude_expression),
            steps=steps or None,  # type: ignore[arg-type]
        )

    def project_many(
        self, exercises: list[Exercise], language: str | Language | None = None
    ) -> list[ProjectedExercise]:
        """Project a list of exercises; the language is checked even when the list is empty."""
        if language is not None:
            Language.from_code(language)
        return [self.project(exercise, language) for exercise in exercises]
