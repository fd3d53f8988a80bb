"""Closed enumerations that classify an exercise."""

from enum import StrEnum
from typing import Self

from nvc_exercises.domain.common.exceptions import ValidationError


class _ParsableEnum(StrEnum):
    """StrEnum whose parse() raises a domain ValidationError listing the valid values."""

    @classmethod
    def parse(cls, value: str, field: str) -> Self:
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValidationError(
                f"Invalid {field}. Valid values are: {valid}", field=field, value=value
            ) from None


class ExerciseCategory(_ParsableEnum):
    """The seven NVC exercise categories."""

    OBSERVATION_EVALUATION = "observation-evaluation"
    FEELINGS_THOUGHTS = "feelings-thoughts"
    NEEDS_DEMANDS = "needs-demands"
    LISTENING_BARRIERS = "listening-barriers"
    REQUESTS = "requests"
    GRATITUDE = "gratitude"
    CONFLICT_RESOLUTION = "conflict-resolution"


class Difficulty(_ParsableEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Audience(_ParsableEnum):
    INDIVIDUAL = "individual"
    GROUP = "group"
