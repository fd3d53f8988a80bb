"""Shared domain building blocks."""

from .entity import Entity, EntityId
from .exceptions import DomainError, EntityNotFoundError, InvariantViolationError, ValidationError
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "InvariantViolationError",
    "ValidationError",
    "ValueObject",
]
