from .exercise_repository import ExerciseRepositoryProtocol

__all__ = ["ExerciseRepositoryProtocol"]
