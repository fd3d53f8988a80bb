"""
Content bounded context - Domain layer.

Owns the bilingual NVC exercises and their projection into one language.

Aggregates:
- Exercise: an immutable, categorized learning unit
"""

from .entities import Exercise
from .exceptions import ExerciseNotFoundError

__all__ = ["Exercise", "ExerciseNotFoundError"]
