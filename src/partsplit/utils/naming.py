"""Part file naming rules shared by splitting and joining."""

from typing import Optional

DEFAULT_SUFFIX = "_part"

# Used when an extension is requested without naming one
DEFAULT_EXTENSION = ".bin"


def resolve_extension(extension: Optional[str]) -> str:
    """Normalize a requested part extension.

    Args:
        extension: Requested extension, e.g. "bin" or ".bin". None or an
            empty string means parts get no extension.

    Returns:
        The extension to append, including its leading separator, or ""
    """
    if not extension:
        return ""
    if "." in extension:
        return extension
    return "." + extension


def part_filename(
    base_name: str,
    suffix: str,
    index: int,
    extension: Optional[str] = None,
    pad_width: int = 0,
) -> str:
    """Build the file name for one part.

    Args:
        base_name: Source file name without its extension
        suffix: Token placed between the base name and the index
        index: 0-based part index
        extension: Extension policy, see resolve_extension()
        pad_width: Zero-pad the index to this many digits (0 = no padding)

    Returns:
        e.g. "movie_part3.bin" or "movie_part003.bin"
    """
    number = f"{index:0{pad_width}d}" if pad_width > 0 else str(index)
    return f"{base_name}{suffix}{number}{resolve_extension(extension)}"
