"""Mapper for Exercise ORM ↔ Domain conversion."""

from nvc_exercises.domain.common.exceptions import InvariantViolationError, ValidationError
from nvc_exercises.domain.common.value_objects import ExerciseId
from nvc_exercises.domain.content.entities import Exercise
from nvc_exercises.domain.content.value_objects import (
    Audience,
    BilingualText,
    Difficulty,
    ExerciseCategory,
)
from nvc_exercises.models import Exercise as ExerciseORM


class ExerciseMapper:
    """Mapper for Exercise ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ExerciseORM) -> Exercise:
        """
        Convert ORM model to domain entity.

        Raises:
            InvariantViolationError: If the stored row is not a valid exercise, e.g. an
                empty text variant, an unknown category or unaligned step lists
        """
        try:
            return self._exercise_from_row(orm_model)
        except (ValidationError, ValueError) as e:
            raise InvariantViolationError(f"Exercise {orm_model.id}", str(e)) from e

    def _exercise_from_row(self, orm_model: ExerciseORM) -> Exercise:
        return Exercise(
            id=ExerciseId(orm_model.id),
            category=ExerciseCategory(orm_model.category),
            name=BilingualText(en=orm_model.name_en, zh=orm_model.name_zh),
            description=BilingualText(en=orm_model.description_en, zh=orm_model.description_zh),
            difficulty=Difficulty(orm_model.difficulty) if orm_model.difficulty else None,
            audience=Audience(orm_model.audience) if orm_model.audience else None,
            related_ids=[ExerciseId(int(related)) for related in orm_model.related_ids or []],
            scenario=BilingualText.from_columns(orm_model.scenario_en, orm_model.scenario_zh),
            example=BilingualText.from_columns(orm_model.example_en, orm_model.example_zh),
            alternative=BilingualText.from_columns(
                orm_model.alternative_en, orm_model.alternative_zh
            ),
            request_template=BilingualText.from_columns(
                orm_model.request_template_en, orm_model.request_template_zh
            ),
            gratitude_expression=BilingualText.from_columns(
                orm_model.gratitude_expression_en, orm_model.gratitude_expression_zh
            ),
            steps=self._steps_to_domain(orm_model),
        )

    def _steps_to_domain(self, orm_model: ExerciseORM) -> list[BilingualText]:
        steps_en = orm_model.steps_en
        steps_zh = orm_model.steps_zh
        if not steps_en or not steps_zh:
            return []
        if len(steps_en) != len(steps_zh):
            raise InvariantViolationError(
                f"Exercise {orm_model.id}",
                f"steps_en has {len(steps_en)} entries but steps_zh has {len(steps_zh)}",
            )
        return [BilingualText(en=en, zh=zh) for en, zh in zip(steps_en, steps_zh, strict=True)]

    def to_orm(self, domain_entity: Exercise) -> ExerciseORM:
        """Convert domain entity to a new ORM model."""

        def split(text: BilingualText | None) -> tuple[str | None, str | None]:
            return (text.en, text.zh) if text else (None, None)

        scenario_en, scenario_zh = split(domain_entity.scenario)
        example_en, example_zh = split(domain_entity.example)
        alternative_en, alternative_zh = split(domain_entity.alternative)
        request_template_en, request_template_zh = split(domain_entity.request_template)
        gratitude_en, gratitude_zh = split(domain_entity.gratitude_expression)

        return ExerciseORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted() else None,
            category=domain_entity.category.value,
            name_en=domain_entity.name.en,
            name_zh=domain_entity.name.zh,
            description_en=domain_entity.description.en,
            description_zh=domain_entity.description.zh,
            difficulty=domain_entity.difficulty.value if domain_entity.difficulty else None,
            audience=domain_entity.audience.value if domain_entity.audience else None,
            related_ids=[related.value for related in domain_entity.related_ids] or None,
            scenario_en=scenario_en,
            scenario_zh=scenario_zh,
            example_en=example_en,
            example_zh=example_zh,
            alternative_en=alternative_en,
            alternative_zh=alternative_zh,
            request_template_en=request_template_en,
            request_template_zh=request_template_zh,
            gratitude_expression_en=gratitude_en,
            gratitude_expression_zh=gratitude_zh,
            steps_en=[step.en for step in domain_entity.steps] or None,
            steps_zh=[step.zh for step in domain_entity.steps] or None,
        )
