from .exercise_schemas import BilingualTextSchema, ExerciseResponse, ExerciseSeed

__all__ = ["BilingualTextSchema", "ExerciseResponse", "ExerciseSeed"]
