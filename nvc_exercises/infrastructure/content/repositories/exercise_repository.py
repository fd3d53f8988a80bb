"""Repository for Exercise domain entities."""

import logging

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.orm import Session

from nvc_exercises.application.content.queries import ExerciseFilter
from nvc_exercises.domain.common.value_objects import ExerciseId
from nvc_exercises.domain.content.entities import Exercise
from nvc_exercises.infrastructure.content.mappers import ExerciseMapper
from nvc_exercises.models import Exercise as ExerciseORM

logger = logging.getLogger(__name__)

# Largest value a 64-bit INTEGER primary key can hold
_MAX_ROW_ID = 2**63 - 1

# Filterable attributes; anything else in a predicate is a programming error
_FILTER_COLUMNS = {
    "category": ExerciseORM.category,
    "difficulty": ExerciseORM.difficulty,
    "audience": ExerciseORM.audience,
}


def build_conditions(exercise_filter: ExerciseFilter) -> list[ColumnElement[bool]]:
    """Turn the filter's predicates into bound equality conditions."""
    return [_FILTER_COLUMNS[name] == value for name, value in exercise_filter.predicates()]


class ExerciseRepository:
    """Repository for Exercise domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ExerciseMapper()

    def find_all(self, exercise_filter: ExerciseFilter) -> list[Exercise]:
        """
        Get every exercise matching all predicates of the filter.

        Args:
            exercise_filter: Pre-validated filter; empty matches everything

        Returns:
            List of exercise entities ordered by id
        """
        stmt = select(ExerciseORM).where(*build_conditions(exercise_filter)).order_by(ExerciseORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, exercise_id: ExerciseId) -> Exercise | None:
        """
        Find an exercise by exact ID.

        Args:
            exercise_id: The exercise ID

        Returns:
            Exercise entity if found, None otherwise
        """
        if exercise_id.value > _MAX_ROW_ID:
            return None
        orm_model = self.db.get(ExerciseORM, exercise_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def count(self) -> int:
        """Count stored exercises."""
        return self.db.execute(select(func.count(ExerciseORM.id))).scalar() or 0

    def add_all(self, exercises: list[Exercise]) -> list[Exercise]:
        """
        Persist new exercises in a single transaction.

        Args:
            exercises: Unsaved exercise entities

        Returns:
            Saved entities with database-generated IDs
        """
        orm_models = [self.mapper.to_orm(exercise) for exercise in exercises]
        try:
            self.db.add_all(orm_models)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        for orm_model in orm_models:
            self.db.refresh(orm_model)
        logger.info(f"Stored {len(orm_models)} exercises")
        return [self.mapper.to_domain(orm) for orm in orm_models]
