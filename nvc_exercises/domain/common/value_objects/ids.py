"""Strongly-typed entity identifiers."""

from dataclasses import dataclass

from nvc_exercises.domain.common.entity import EntityId


@dataclass(frozen=True)
class ExerciseId(EntityId):
    """Identifier of an exercise."""


@dataclass(frozen=True)
class ApiKeyId(EntityId):
    """Identifier of an issued API key."""
