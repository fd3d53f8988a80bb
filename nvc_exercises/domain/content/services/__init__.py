from .exercise_projector import ExerciseProjector, LocalizedValue, ProjectedExercise

__all__ = ["ExerciseProjector", "LocalizedValue", "ProjectedExercise"]
