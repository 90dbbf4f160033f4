"""Split and join operations."""

from partsplit.operations.joiner import FileJoiner
from partsplit.operations.splitter import (
    MIN_PRACTICAL_SIZE,
    FileSplitter,
    check_practical_size,
    plan_parts,
)

__all__ = [
    "FileSplitter",
    "FileJoiner",
    "plan_parts",
    "check_practical_size",
    "MIN_PRACTICAL_SIZE",
]
