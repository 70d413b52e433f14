"""Base class for Value Objects."""


class ValueObject:
    """
    Marker base for the domain's value objects.

    Value objects here are ``@dataclass(frozen=True)`` classes that check
    their input in ``__post_init__`` and raise a DomainError subclass on
    bad input (``ValidUrl``, ``Email``, ``Password``, ``Digest`` and
    ``PlainRefreshSecret``). The dataclass supplies equality, hashing and
    repr, so this class adds no behaviour of its own.
    """
