"""CLI entry point for partsplit."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from partsplit.errors import PartSplitError, UsageError
from partsplit.operations import FileJoiner, FileSplitter, check_practical_size
from partsplit.orderings import DEFAULT_ORDERING, available_orderings, get_ordering
from partsplit.utils import format_size
from partsplit.utils.naming import DEFAULT_EXTENSION, DEFAULT_SUFFIX

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str) -> None:
        self.print_help(sys.stdout)
        raise UsageError(f"{self.prog}: error: {message}")


def split(
    filename: str,
    size: int,
    suffix: str = DEFAULT_SUFFIX,
    extension: Optional[str] = None,
    pad_width: int = 0,
    dry_run: bool = False,
) -> None:
    """Split a file into numbered parts.

    Args:
        filename: File to split
        size: Maximum part size in bytes
        suffix: Token placed before each part index
        extension: Part extension, or None for no extension
        pad_width: Zero-pad part indices to this many digits
        dry_run: Only list the parts that would be written
    """
    check_practical_size(size)
    splitter = FileSplitter(suffix=suffix, extension=extension, pad_width=pad_width)

    if dry_run:
        source = splitter.read_source(filename)
        paths = splitter.part_paths(source, size)
        logger.info(f"{filename} ({format_size(source.size)}) -> {len(paths)} parts")
        for path in paths:
            logger.info(f"  {path}")
        return

    parts = splitter.split(filename, size)
    if parts and parts[0].path.parent != splitter.workdir:
        logger.info(f"Wrote {len(parts)} parts to {parts[0].path.parent}")
    logger.info(f"Successfully split file {filename}.")


def unsplit(
    folder: Optional[str] = None,
    output: Optional[str] = None,
    suffix: str = DEFAULT_SUFFIX,
    order: str = DEFAULT_ORDERING,
) -> None:
    """Join the parts in a folder back into one file.

    Args:
        folder: Folder holding the parts (default: current directory)
        output: Joined file path (default: "<folder> - unsplit")
        suffix: Substring part file names contain
        order: Registered ordering name
    """
    joiner = FileJoiner(suffix=suffix, ordering=order)
    output_path = Path(output) if output else joiner.default_output(folder)

    joined = joiner.join(folder, output_path)
    logger.info(f"Combined {len(joined)} parts")
    logger.info(f"Successfully combined files into {output_path}.")


def info(folder: Optional[str] = None, suffix: str = DEFAULT_SUFFIX) -> None:
    """Show the parts a join of `folder` would use, in join order.

    Args:
        folder: Folder holding the parts (default: current directory)
        suffix: Substring part file names contain
    """
    joiner = FileJoiner(suffix=suffix)
    parts = joiner.discover(folder)

    print(f"Folder: {parts.folder}")
    print(f"Suffix: {parts.suffix}")
    print(f"")
    if not parts:
        print("No matching parts.")
        return

    print(f"Parts (join order):")
    for path in parts:
        print(f"  {path.name}  {format_size(path.stat().st_size)}")
    print(f"")
    print(f"  Count: {len(parts)}")
    print(f"  Total: {format_size(parts.total_size)}")

    numeric = get_ordering("numeric").order(list(parts), parts.suffix)
    if numeric != list(parts.paths):
        print(f"")
        print(
            "Warning: part indices are not zero-padded, so the default join "
            "order differs from numeric order. Use --order numeric to join "
            "by index."
        )


def deck() -> None:
    """Launch the Deck TUI."""
    # Import here to avoid loading textual unless needed
    from partsplit.deck import main as deck_main

    deck_main()


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="partsplit",
        description="Split files into numbered parts and join them back",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every part as it is written or read",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # split command
    split_parser = subparsers.add_parser(
        "split",
        help="Split a file into numbered parts",
    )
    split_parser.add_argument("filename", help="File to split")
    split_parser.add_argument(
        "-s",
        "--size",
        type=int,
        required=True,
        help="Maximum size of each part in bytes (at least 1000)",
    )
    split_parser.add_argument(
        "--suffix",
        default=DEFAULT_SUFFIX,
        help=f"Text placed before each part number (default: {DEFAULT_SUFFIX})",
    )
    split_parser.add_argument(
        "-e",
        "--extension",
        nargs="?",
        const=DEFAULT_EXTENSION,
        default=None,
        help=f"Give parts an extension (default when flag is given: {DEFAULT_EXTENSION})",
    )
    split_parser.add_argument(
        "--pad",
        type=int,
        default=0,
        metavar="WIDTH",
        help="Zero-pad part numbers to WIDTH digits (default: no padding)",
    )
    split_parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="List the parts that would be written without writing them",
    )

    # unsplit command
    unsplit_parser = subparsers.add_parser(
        "unsplit",
        aliases=["join"],
        help="Join the parts in a folder into one file",
    )
    unsplit_parser.add_argument(
        "folder",
        nargs="?",
        default=None,
        help="Folder holding the parts (default: current directory)",
    )
    unsplit_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help='Output file (default: "<folder> - unsplit")',
    )
    unsplit_parser.add_argument(
        "--suffix",
        default=DEFAULT_SUFFIX,
        help=f"Only join files whose name contains this (default: {DEFAULT_SUFFIX})",
    )
    unsplit_parser.add_argument(
        "--order",
        choices=available_orderings(),
        default=DEFAULT_ORDERING,
        help=f"How parts are ordered (default: {DEFAULT_ORDERING})",
    )

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show the parts a join would use",
    )
    info_parser.add_argument(
        "folder",
        nargs="?",
        default=None,
        help="Folder holding the parts (default: current directory)",
    )
    info_parser.add_argument(
        "--suffix",
        default=DEFAULT_SUFFIX,
        help=f"Only list files whose name contains this (default: {DEFAULT_SUFFIX})",
    )

    # deck command
    subparsers.add_parser(
        "deck",
        help="Launch the interactive Deck TUI",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Process exit status: 0 on success, 1 on any failure
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"\n{e}")
        return 1

    if args.verbose:
        logging.getLogger("partsplit").setLevel(logging.DEBUG)

    try:
        if args.command == "split":
            split(
                args.filename,
                args.size,
                suffix=args.suffix,
                extension=args.extension,
                pad_width=args.pad,
                dry_run=args.dry_run,
            )
        elif args.command in ("unsplit", "join"):
            unsplit(args.folder, args.output, suffix=args.suffix, order=args.order)
        elif args.command == "info":
            info(args.folder, suffix=args.suffix)
        elif args.command == "deck":
            deck()
    except PartSplitError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
