"""Split a file into numbered parts of at most a given size."""

import logging
from pathlib import Path
from typing import Iterator, Optional

from partsplit.errors import (
    DirectoryCreateError,
    FileWriteError,
    InvalidSizeError,
    SourceNotFoundError,
)
from partsplit.models import Part, SourceFile
from partsplit.utils.naming import DEFAULT_SUFFIX, part_filename

logger = logging.getLogger(__name__)

# FileSplitter accepts any positive limit; front ends refuse smaller ones
MIN_PRACTICAL_SIZE = 1000


def plan_parts(total_size: int, limit: int) -> list[tuple[int, int, int]]:
    """Compute the byte ranges a split would produce.

    Args:
        total_size: Size of the source in bytes
        limit: Maximum size of each part in bytes

    Returns:
        List of (index, offset, size) triples in ascending index order.
        Every part is `limit` bytes except possibly the last.
    """
    if limit < 1:
        raise InvalidSizeError(
            f"Size cannot be less than 1 byte. Given size was {limit} byte(s)."
        )

    plan = []
    offset = 0
    index = 0
    while offset < total_size:
        size = min(limit, total_size - offset)
        plan.append((index, offset, size))
        offset += size
        index += 1
    return plan


def check_practical_size(limit: int) -> None:
    """Refuse limits too small to be a sensible part size.

    Raises:
        InvalidSizeError: If limit is below 1 or below MIN_PRACTICAL_SIZE
    """
    if limit < 1:
        raise InvalidSizeError(
            f"Size cannot be less than 1 byte. Given size was {limit} byte(s)."
        )
    if limit < MIN_PRACTICAL_SIZE:
        raise InvalidSizeError(
            "Splitting a file into sizes less than 1,000 bytes is impractical. "
            "The file was not split."
        )


class FileSplitter:
    """Split files into `{base}{suffix}{index}{extension}` parts.

    Parts are written to the working directory, or to an `output`
    subfolder of it when a split produces more than ten parts.
    """

    DEFAULT_SUFFIX = DEFAULT_SUFFIX
    OUTPUT_FOLDER = "output"
    SUBFOLDER_THRESHOLD = 10

    def __init__(
        self,
        suffix: Optional[str] = None,
        extension: Optional[str] = None,
        pad_width: int = 0,
        workdir: Path | str | None = None,
    ):
        """Initialize the splitter.

        Args:
            suffix: Token between base name and index. Defaults to "_part".
            extension: Part extension ("bin" or ".bin"); None for no extension
            pad_width: Zero-pad part indices to this many digits
            workdir: Directory parts are written under. Defaults to the CWD
                at split time.
        """
        self.suffix = suffix or self.DEFAULT_SUFFIX
        self.extension = extension
        self.pad_width = pad_width
        self._workdir = Path(workdir) if workdir is not None else None

    @property
    def workdir(self) -> Path:
        return self._workdir if self._workdir is not None else Path.cwd()

    def read_source(self, path: Path | str) -> SourceFile:
        """Read the whole source file into memory."""
        source_path = Path(path)
        if not source_path.is_file():
            raise SourceNotFoundError(f"File {source_path} does not exist.")
        try:
            contents = source_path.read_bytes()
        except OSError as exc:
            raise SourceNotFoundError(f"File {source_path} could not be read.") from exc
        return SourceFile(path=source_path, contents=contents)

    def output_dir(self, num_parts: int) -> Path:
        """Directory a split into `num_parts` parts is written to."""
        if num_parts > self.SUBFOLDER_THRESHOLD:
            return self.workdir / self.OUTPUT_FOLDER
        return self.workdir

    def part_paths(self, source: SourceFile, limit: int) -> list[Path]:
        """Paths the parts of `source` would be written to, without writing."""
        plan = plan_parts(source.size, limit)
        folder = self.output_dir(len(plan))
        return [folder / self._part_name(source, index) for index, _, _ in plan]

    def iter_split(self, path: Path | str, limit: int) -> Iterator[Part]:
        """Split a file, yielding each part after it has been written.

        Args:
            path: File to split
            limit: Maximum part size in bytes

        Yields:
            Part objects in ascending index order
        """
        if limit < 1:
            raise InvalidSizeError(
                f"Size cannot be less than 1 byte. Given size was {limit} byte(s)."
            )
        source = self.read_source(path)
        yield from self.write_parts(source, limit)

    def write_parts(self, source: SourceFile, limit: int) -> Iterator[Part]:
        """Write the parts of an already-read source, yielding each one."""
        plan = plan_parts(source.size, limit)
        folder = self.output_dir(len(plan))

        logger.debug(f"Splitting {source.path} ({source.size} bytes) into {len(plan)} parts")

        if len(plan) > self.SUBFOLDER_THRESHOLD:
            try:
                folder.mkdir(exist_ok=True)
            except OSError as exc:
                raise DirectoryCreateError(f"Failed to create directory {folder}.") from exc

        for index, offset, size in plan:
            part_path = folder / self._part_name(source, index)
            try:
                with open(part_path, "wb") as f:
                    f.write(source.contents[offset : offset + size])
            except OSError as exc:
                raise FileWriteError(f"Failed to create file {part_path}.") from exc

            logger.debug(f"  wrote {part_path} ({size} bytes)")
            yield Part(index=index, offset=offset, size=size, path=part_path)

    def split(self, path: Path | str, limit: int) -> list[Part]:
        """Split a file and return every part written."""
        return list(self.iter_split(path, limit))

    def _part_name(self, source: SourceFile, index: int) -> str:
        return part_filename(
            source.base_name, self.suffix, index, self.extension, self.pad_width
        )
