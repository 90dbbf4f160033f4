"""Join part files from a folder back into a single file."""

import logging
from pathlib import Path
from typing import Iterator, Optional

from partsplit.errors import (
    DirectoryNotFoundError,
    FileCreateError,
    FileReadError,
    FileWriteError,
    NoMatchingFilesError,
    UsageError,
)
from partsplit.models import PartSet
from partsplit.orderings import get_ordering
from partsplit.protocols import OrderingStrategy
from partsplit.utils.naming import DEFAULT_SUFFIX

logger = logging.getLogger(__name__)


class FileJoiner:
    """Concatenate every file in a folder whose name contains a suffix token."""

    DEFAULT_SUFFIX = DEFAULT_SUFFIX
    OUTPUT_TEMPLATE = "{folder} - unsplit"

    def __init__(
        self,
        suffix: Optional[str] = None,
        ordering: OrderingStrategy | str | None = None,
    ):
        """Initialize the joiner.

        Args:
            suffix: Substring a file name must contain to be joined.
                Defaults to "_part".
            ordering: OrderingStrategy or registered name. Defaults to
                lexical ordering of full paths.
        """
        self.suffix = suffix or self.DEFAULT_SUFFIX
        if ordering is None or isinstance(ordering, str):
            name = ordering or "lexical"
            try:
                ordering = get_ordering(name)
            except KeyError:
                raise UsageError(f"Unknown ordering {name!r}") from None
        self.ordering = ordering

    def resolve_folder(self, folder: Path | str | None = None) -> Path:
        """Return the folder to join from, checking that it exists."""
        folder_path = Path(folder) if folder else Path.cwd()
        if not folder_path.is_dir():
            raise DirectoryNotFoundError(f"Folder {folder_path} does not exist.")
        return folder_path

    def default_output(self, folder: Path | str | None = None) -> Path:
        """Default output path: `{folder name} - unsplit` in the CWD."""
        folder_path = Path(folder) if folder else Path.cwd()
        name = folder_path.resolve().name
        return Path(self.OUTPUT_TEMPLATE.format(folder=name))

    def discover(
        self,
        folder: Path | str | None = None,
        exclude: Path | str | None = None,
    ) -> PartSet:
        """Find the regular files in `folder` whose name contains the suffix.

        Args:
            folder: Folder to scan. Defaults to the CWD.
            exclude: A path never treated as a part (the join output)

        Returns:
            PartSet in join order. May be empty.
        """
        folder_path = self.resolve_folder(folder)
        excluded = Path(exclude).resolve() if exclude is not None else None

        matches = []
        for entry in folder_path.iterdir():
            if not entry.is_file() or self.suffix not in entry.name:
                continue
            if excluded is not None and entry.resolve() == excluded:
                continue
            matches.append(entry)

        ordered = self.ordering.order(matches, self.suffix)
        return PartSet(folder=folder_path, suffix=self.suffix, paths=tuple(ordered))

    def iter_join(
        self,
        folder: Path | str | None = None,
        output: Path | str | None = None,
    ) -> Iterator[Path]:
        """Join parts, yielding each part path after it has been appended.

        Args:
            folder: Folder holding the parts. Defaults to the CWD.
            output: Joined file path. Defaults to `{folder name} - unsplit`.

        Yields:
            Part paths in the order they were appended
        """
        output_path = Path(output) if output else self.default_output(folder)
        parts = self.discover(folder, exclude=output_path)
        if not parts:
            raise NoMatchingFilesError(
                f"No files found with suffix {self.suffix} in folder {parts.folder}."
            )

        logger.debug(
            f"Joining {len(parts)} parts from {parts.folder} ({self.ordering.name} order)"
        )

        try:
            out_file = open(output_path, "wb")
        except OSError as exc:
            raise FileCreateError(f"Failed to create or open file {output_path}.") from exc

        with out_file:
            for part_path in parts:
                try:
                    data = part_path.read_bytes()
                except OSError as exc:
                    raise FileReadError(f"Failed to open file {part_path}.") from exc
                try:
                    out_file.write(data)
                except OSError as exc:
                    raise FileWriteError(f"Failed to write to {output_path}.") from exc
                logger.debug(f"  appended {part_path} ({len(data)} bytes)")
                yield part_path

    def join(
        self,
        folder: Path | str | None = None,
        output: Path | str | None = None,
    ) -> list[Path]:
        """Join parts and return the paths appended, in order."""
        return list(self.iter_join(folder, output))
