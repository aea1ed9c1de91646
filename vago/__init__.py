"""List and dict helpers, a Slice list type, a nil-aware decimal and a structured logger."""

__version__ = "0.1.0"
__all__ = ["dec", "maps", "slices", "slice", "lol"]