"""Exceptions raised by split and join operations."""


class PartSplitError(RuntimeError):
    """Base exception for partsplit errors."""


class UsageError(PartSplitError):
    """Raised when arguments are missing, malformed or contradictory."""


class InvalidSizeError(PartSplitError):
    """Raised when a chunk limit is non-positive or impractically small."""


class SourceNotFoundError(PartSplitError):
    """Raised when the file to split does not exist or is unreadable."""


class DirectoryNotFoundError(PartSplitError):
    """Raised when the folder to join from does not exist."""


class DirectoryCreateError(PartSplitError):
    """Raised when the output subfolder cannot be created."""


class FileCreateError(PartSplitError):
    """Raised when the joined output file cannot be opened."""


class FileWriteError(PartSplitError):
    """Raised when a part file cannot be created or written."""


class FileReadError(PartSplitError):
    """Raised when a part file cannot be read during a join."""


class NoMatchingFilesError(PartSplitError):
    """Raised when a join finds no files containing the suffix token."""
