"""
Query base class.

Queries describe a read request without side effects. They are immutable and
carry only filter parameters.

Example:
    @dataclass(frozen=True)
    class ExerciseFilter(Query):
        category: ExerciseCategory | None = None
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Query:
    """Base class for immutable read requests."""
