"""Pydantic schemas for Exercise API responses and seed files."""

from pydantic import BaseModel, ConfigDict, Field, PositiveInt
from pydantic.alias_generators import to_camel

from nvc_exercises.domain.common.value_objects import ExerciseId
from nvc_exercises.domain.content.entities import Exercise
from nvc_exercises.domain.content.value_objects import (
    Audience,
    BilingualText,
    Difficulty,
    ExerciseCategory,
)


class BilingualTextSchema(BaseModel):
    """Text in both supported languages."""

    en: str = Field(..., min_length=1, description="English text")
    zh: str = Field(..., min_length=1, description="Chinese text")

    def to_domain(self) -> BilingualText:
        return BilingualText(en=self.en, zh=self.zh)


# Either a single-language string or an {en, zh} map
LocalizedField = str | BilingualTextSchema


class ExerciseResponse(BaseModel):
    """Schema for a projected exercise."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    category: ExerciseCategory
    name: LocalizedField
    description: LocalizedField
    difficulty: Difficulty | None = None
    audience: Audience | None = None
    related_ids: list[str] | None = None
    scenario: LocalizedField | None = None
    example: LocalizedField | None = None
    alternative: LocalizedField | None = None
    request_template: LocalizedField | None = None
    gratitude_expression: LocalizedField | None = None
    steps: list[LocalizedField] | None = None


class ExerciseSeed(BaseModel):
    """Schema for one exercise in a seed file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    category: ExerciseCategory
    name: BilingualTextSchema
    description: BilingualTextSchema
    difficulty: Difficulty | None = None
    audience: Audience | None = None
    related_ids: list[PositiveInt] = Field(default_factory=list)
    scenario: BilingualTextSchema | None = None
    example: BilingualTextSchema | None = None
    alternative: BilingualTextSchema | None = None
    request_template: BilingualTextSchema | None = None
    gratitude_expression: BilingualTextSchema | None = None
    steps: list[BilingualTextSchema] = Field(default_factory=list)

    def to_domain(self) -> Exercise:
        """Build an unsaved Exercise entity."""

        def optional(text: BilingualTextSchema | None) -> BilingualText | None:
            return text.to_domain() if text else None

        return Exercise.create(
            category=self.category,
            name=self.name.to_domain(),
            description=self.description.to_domain(),
            difficulty=self.difficulty,
            audience=self.audience,
            related_ids=[ExerciseId(related) for related in self.related_ids],
            scenario=optional(self.scenario),
            example=optional(self.example),
            alternative=optional(self.alternative),
            request_template=optional(self.request_template),
            gratitude_expression=optional(self.gratitude_expression),
            steps=[step.to_domain() for step in self.steps],
        )
