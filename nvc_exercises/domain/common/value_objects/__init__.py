"""Common value objects shared across all domain modules."""

from .ids import ApiKeyId, ExerciseId

__all__ = [
    "ApiKeyId",
    "ExerciseId",
]
