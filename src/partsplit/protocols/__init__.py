"""Protocol definitions for extensible components."""

from partsplit.protocols.ordering import OrderingStrategy

__all__ = ["OrderingStrategy"]
