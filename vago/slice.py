"""A list type with functional helper methods."""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Tuple, TypeVar

from vago import slices

T = TypeVar("T")


class Slice(List[T]):
    """A list that offers the helpers of :mod:`vago.slices` as methods."""

    def __str__(self) -> str:
        lines = ["[\n"]
        lines.extend(f"\t{i} -> {x}\n" for i, x in enumerate(self))
        lines.append("]\n")
        return "".join(lines)

    def range_each(self, fn: Callable[[T, int], bool]) -> None:
        """Call ``fn(element, index)`` for each element until it returns false."""
        slices.range_each(self, fn)

    def for_each(self, fn: Callable[[T], Any]) -> None:
        """Call ``fn`` on every element."""
        slices.for_each(self, fn)

    def get(self, idx: int) -> Optional[T]:
        """Element at ``idx``, or None when the index is out of range.

        Negative indices are out of range; they do not count from the end.
        """
        if 0 <= idx < len(self):
            return self[idx]
        return None

    def contains(self, predicate: Callable[[T], bool]) -> bool:
        """Whether any element matches ``predicate``."""
        return slices.contains(self, predicate)

    def index_of(self, predicate: Callable[[T], bool]) -> int:
        """Position of the first element matching ``predicate``, or -1."""
        return slices.index_of(self, predicate)

    def equals(self, other: List[T], predicate: Callable[[T, T], bool]) -> bool:
        """Whether ``other`` has the same length and pairwise equal elements."""
        return slices.equals(self, other, predicate)

    def clone(self) -> "Slice[T]":
        """Return a shallow copy."""
        return Slice(self)

    def delete(self, idx: int) -> "Slice[T]":
        """Remove the element at ``idx`` without keeping order; return self."""
        slices.delete(self, idx)
        return self

    def push(self, item: T) -> "Slice[T]":
        """Add ``item`` at the end and return self."""
        self.append(item)
        return self

    def append_vector(self, items: Iterable[T]) -> "Slice[T]":
        """Add all ``items`` at the end and return self."""
        self.extend(items)
        return self

    def map(self, fn: Callable[[T], Any]) -> "Slice[Any]":
        """Return a new Slice with ``fn`` applied to every element."""
        return Slice(slices.map_items(self, fn))

    def map_in_place(self, fn: Callable[[T], T]) -> "Slice[T]":
        """Replace every element with ``fn(element)`` and return self."""
        slices.map_in_place(self, fn)
        return self

    def filter(self, predicate: Callable[[T], bool]) -> "Slice[T]":
        """Return a new Slice of the elements matching ``predicate``."""
        return Slice(slices.filter_items(self, predicate))

    def filter_map_tuple(self, fn: Callable[[T], Tuple[Any, bool]]) -> "Slice[Any]":
        """Transform and filter at once; ``fn`` returns ``(value, keep)``."""
        return Slice(slices.filter_map_tuple(self, fn))

    def filter_map(self, fn: Callable[[T], Optional[Any]]) -> "Slice[Any]":
        """Transform and filter at once; results of None are dropped."""
        return Slice(slices.filter_map(self, fn))

    def filter_in_place(self, predicate: Callable[[T], bool]) -> "Slice[T]":
        """Keep only the elements matching ``predicate`` and return self."""
        slices.filter_in_place(self, predicate)
        return self

    def reduce(self, fn: Callable[[Any, T], Any]) -> Any:
        """Fold the elements into one value, starting from 0."""
        return slices.reduce(self, fn)

    def fold(self, fn: Callable[[Any, T], Any], initial: Any) -> Any:
        """Fold the elements into one value, starting from ``initial``."""
        return slices.fold(self, fn, initial)