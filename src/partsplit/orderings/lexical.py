"""Plain string ordering of part paths."""

from pathlib import Path


class LexicalOrdering:
    """Sort parts by their full path string.

    Unpadded indices past 9 come out of order ("part10" sorts before
    "part2"). Split with a pad width if more than ten parts are expected.
    """

    name = "lexical"

    def order(self, paths: list[Path], suffix: str) -> list[Path]:
        return sorted(paths, key=str)
