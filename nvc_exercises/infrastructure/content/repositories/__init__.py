from .exercise_repository import ExerciseRepository

__all__ = ["ExerciseRepository"]
