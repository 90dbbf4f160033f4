"""Ordering by the integer index that follows the suffix token."""

import re
from pathlib import Path

_LEADING_DIGITS = re.compile(r"\d+")


class NumericOrdering:
    """Sort parts by the number after the last occurrence of the suffix.

    Files without a parseable index sort after numbered ones. Ties fall back
    to lexical order so the result is deterministic.
    """

    name = "numeric"

    def order(self, paths: list[Path], suffix: str) -> list[Path]:
        return sorted(paths, key=lambda path: self._sort_key(path, suffix))

    @staticmethod
    def part_index(path: Path, suffix: str) -> int | None:
        """Extract the part index from a file name, if there is one."""
        if not suffix or suffix not in path.name:
            return None
        tail = path.name.rsplit(suffix, 1)[1]
        match = _LEADING_DIGITS.match(tail)
        return int(match.group()) if match else None

    def _sort_key(self, path: Path, suffix: str) -> tuple[int, int, str]:
        index = self.part_index(path, suffix)
        if index is None:
            return (1, 0, str(path))
        return (0, index, str(path))
