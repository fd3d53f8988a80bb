from .exercise_mapper import ExerciseMapper

__all__ = ["ExerciseMapper"]
