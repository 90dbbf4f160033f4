"""partsplit - split files into numbered parts and join them back."""

__version__ = "0.1.0"
