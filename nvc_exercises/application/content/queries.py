"""Queries of the content context."""

from dataclasses import dataclass

from nvc_exercises.application.common.query import Query
from nvc_exercises.domain.content.value_objects import Audience, Difficulty, ExerciseCategory

# (attribute name, required value) pairs, combined with AND
Predicate = tuple[str, str]


@dataclass(frozen=True)
class ExerciseFilter(Query):
    """
    Conjunctive equality filter over the exercise attributes.

    Unset fields impose no constraint; an empty filter matches everything.
    """

    category: ExerciseCategory | None = None
    difficulty: Difficulty | None = None
    audience: Audience | None = None

    def predicates(self) -> list[Predicate]:
        """Return one equality predicate per provided field, in a stable order."""
        candidates: list[tuple[str, ExerciseCategory | Difficulty | Audience | None]] = [
            ("category", self.category),
            ("difficulty", self.difficulty),
            ("audience", self.audience),
        ]
        return [(name, value.value) for name, value in candidates if value is not None]

    @classmethod
    def parse(
        cls,
        category: str | None = None,
        difficulty: str | None = None,
        audience: str | None = None,
    ) -> "ExerciseFilter":
        """
        Build a filter from raw request values.

        Empty strings count as absent.

        Raises:
            ValidationError: If a value is outside its enumeration
        """
        return cls(
            category=ExerciseCategory.parse(category, "category") if category else None,
            difficulty=Difficulty.parse(difficulty, "difficulty") if difficulty else None,
            audience=Audience.parse(audience, "audience") if audience else None,
        )
