"""Data models for partsplit."""

from partsplit.models.part import Part, PartSet, SourceFile

__all__ = ["SourceFile", "Part", "PartSet"]
