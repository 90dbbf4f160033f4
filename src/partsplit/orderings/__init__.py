"""Part ordering strategies for joining."""

from partsplit.orderings.lexical import LexicalOrdering
from partsplit.orderings.numeric import NumericOrdering
from partsplit.protocols import OrderingStrategy

# Registry of available orderings
_ORDERINGS: dict[str, OrderingStrategy] = {
    "lexical": LexicalOrdering(),
    "numeric": NumericOrdering(),
}

DEFAULT_ORDERING = "lexical"


def get_ordering(name: str = DEFAULT_ORDERING) -> OrderingStrategy:
    """Look up an ordering strategy by name.

    Args:
        name: Registered ordering name

    Returns:
        The matching OrderingStrategy

    Raises:
        KeyError: If no ordering is registered under that name
    """
    return _ORDERINGS[name]


def available_orderings() -> list[str]:
    """Names accepted by get_ordering(), default first."""
    return sorted(_ORDERINGS, key=lambda name: name != DEFAULT_ORDERING)


def register_ordering(ordering: OrderingStrategy) -> None:
    """Register a custom ordering (for plugins/extensions).

    Args:
        ordering: An object implementing the OrderingStrategy protocol
    """
    _ORDERINGS[ordering.name] = ordering


__all__ = [
    "get_ordering",
    "available_orderings",
    "register_ordering",
    "LexicalOrdering",
    "NumericOrdering",
    "DEFAULT_ORDERING",
]
