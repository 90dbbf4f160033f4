"""Core data models for source files and their parts."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SourceFile:
    """A file read fully into memory for splitting."""

    path: Path
    contents: bytes

    @property
    def base_name(self) -> str:
        """File name without its last extension."""
        return self.path.stem

    @property
    def extension(self) -> str:
        return self.path.suffix

    @property
    def size(self) -> int:
        return len(self.contents)


@dataclass(frozen=True)
class Part:
    """One written fragment of a source file."""

    index: int
    offset: int
    size: int
    path: Path

    @property
    def end(self) -> int:
        return self.offset + self.size


@dataclass(frozen=True)
class PartSet:
    """Files discovered in a folder for joining, in join order."""

    folder: Path
    suffix: str
    paths: tuple[Path, ...]

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self):
        return iter(self.paths)

    @property
    def total_size(self) -> int:
        return sum(path.stat().st_size for path in self.paths)
