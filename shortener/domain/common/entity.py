"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Identity is assigned by persistence. A freshly created entity carries
``id=None`` until a repository stores it and hands back the saved copy.
"""

from abc import ABC


class Entity(ABC):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Transient until persisted (``id`` is None or empty)

    Subclasses must have an ``id: str | None`` attribute.
    """

    id: str | None

    @property
    def is_persisted(self) -> bool:
        """True once persistence has assigned an identity."""
        return bool(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        if not self.is_persisted:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if not self.is_persisted:
            return id(self)
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
