"""Exercise entity."""

from dataclasses import dataclass, field

from nvc_exercises.domain.common.entity import Entity
from nvc_exercises.domain.common.value_objects import ExerciseId
from nvc_exercises.domain.content.value_objects import (
    Audience,
    BilingualText,
    Difficulty,
    ExerciseCategory,
)


@dataclass(eq=False)
class Exercise(Entity[ExerciseId]):
    """
    A categorized, bilingual NVC learning unit.

    Business Rules:
    - Name and description are required in both languages
    - Category-specific fields are optional; whether one is present depends on
      the data, not on the category
    - Related exercise ids are not checked for existence
    - Exercises are loaded in bulk and never changed afterwards
    """

    id: ExerciseId
    category: ExerciseCategory
    name: BilingualText
    description: BilingualText
    difficulty: Difficulty | None = None
    audience: Audience | None = None
    related_ids: list[ExerciseId] = field(default_factory=list)
    scenario: BilingualText | None = None
    example: BilingualText | None = None
    alternative: BilingualText | None = None
    request_template: BilingualText | None = None
    gratitude_expression: BilingualText | None = None
    steps: list[BilingualText] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        category: ExerciseCategory,
        name: BilingualText,
        description: BilingualText,
        *,
        difficulty: Difficulty | None = None,
        audience: Audience | None = None,
        related_ids: list[ExerciseId] | None = None,
        scenario: BilingualText | None = None,
        example: BilingualText | None = None,
        alternative: BilingualText | None = None,
        request_template: BilingualText | None = None,
        gratitude_expression: BilingualText | None = None,
        steps: list[BilingualText] | None = None,
    ) -> "Exercise":
        """Create a new exercise (ID will be 0 until persisted)."""
        return cls(
            id=ExerciseId.generate(),
            category=category,
            name=name,
            description=description,
            difficulty=difficulty,
            audience=audience,
            related_ids=list(related_ids or []),
            scenario=scenario,
            example=example,
            alternative=alternative,
            request_template=request_template,
            gratitude_expression=gratitude_expression,
            steps=list(steps or []),
        )
