"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity assigned by persistence
"""

from .entity import Entity
from .exceptions import DomainError, ValidationError
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "ValidationError",
    "ValueObject",
]
