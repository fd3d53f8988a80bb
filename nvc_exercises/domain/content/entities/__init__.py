from .exercise import Exercise

__all__ = ["Exercise"]
