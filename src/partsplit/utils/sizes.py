"""Human-readable byte sizes."""


def format_size(size: int) -> str:
    """Format a byte count the way the CLI and deck display it."""
    if size >= 1024 * 1024:
        return f"{size / (1024 * 1024):.1f} MB"
    if size >= 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size} B"
