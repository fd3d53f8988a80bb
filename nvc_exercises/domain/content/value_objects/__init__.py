"""Value objects of the content context."""

from .bilingual_text import BilingualText
from .exercise_attributes import Audience, Difficulty, ExerciseCategory
from .language import InvalidLanguageError, Language

__all__ = [
    "Audience",
    "BilingualText",
    "Difficulty",
    "ExerciseCategory",
    "InvalidLanguageError",
    "Language",
]
