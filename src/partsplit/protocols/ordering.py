"""Protocol for part ordering strategies."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class OrderingStrategy(Protocol):
    """Protocol for ordering discovered parts before they are joined.

    Uses structural subtyping - no inheritance required.
    """

    @property
    def name(self) -> str:
        """Return identifier for this ordering (e.g., 'lexical')."""
        ...

    def order(self, paths: list[Path], suffix: str) -> list[Path]:
        """Return the paths in the order their contents should be joined."""
        ...
