"""Utility functions for partsplit."""

from partsplit.utils.naming import part_filename, resolve_extension
from partsplit.utils.sizes import format_size

__all__ = ["part_filename", "resolve_extension", "format_size"]
