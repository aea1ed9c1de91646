"""Functional helpers for lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")


@dataclass(frozen=True)
class WrappedIdx(Generic[T]):
    """An element paired with the index it held in its list."""

    value: T
    idx: int


def equals(one: List[T], other: List[T], predicate: Callable[[T, T], bool]) -> bool:
    """Whether both lists have the same length and pairwise equal elements."""
    if len(one) != len(other):
        return False
    return all(predicate(x, y) for x, y in zip(one, other))


def to_map(items: Iterable[T], key: Callable[[T], K]) -> Dict[K, T]:
    """Index the elements by ``key``; later elements win on duplicate keys."""
    return {key(x): x for x in items}


def to_map_idx(items: Iterable[T], key: Callable[[T], K]) -> Dict[K, WrappedIdx[T]]:
    """Index the elements by ``key``, keeping each element's position."""
    return {key(x): WrappedIdx(x, i) for i, x in enumerate(items)}


def index_of(items: Iterable[T], predicate: Callable[[T], bool]) -> int:
    """Position of the first element matching ``predicate``, or -1."""
    return next((i for i, x in enumerate(items) if predicate(x)), -1)


def contains(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Whether any element matches ``predicate``."""
    return index_of(items, predicate) >= 0


def includes(items: Iterable[T], target: T) -> bool:
    """Whether ``target`` is among the elements."""
    return contains(items, lambda x: x == target)


def some(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Alias of :func:`contains`."""
    return contains(items, predicate)


def any_match(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Alias of :func:`contains`."""
    return contains(items, predicate)


def all_match(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Whether every element matches ``predicate`` (true for no elements)."""
    return all(predicate(x) for x in items)


def map_items(items: Iterable[T], fn: Callable[[T], U]) -> List[U]:
    """Return a new list with ``fn`` applied to every element."""
    return [fn(x) for x in items]


def map_in_place(items: List[T], fn: Callable[[T], T]) -> List[T]:
    """Replace every element with ``fn(element)`` and return the same list."""
    items[:] = [fn(x) for x in items]
    return items


def filter_items(items: Iterable[T], predicate: Callable[[T], bool]) -> List[T]:
    """Return a new list of the elements matching ``predicate``."""
    return [x for x in items if predicate(x)]


def filter_map_tuple(items: Iterable[T], fn: Callable[[T], Tuple[U, bool]]) -> List[U]:
    """Transform and filter at once; ``fn`` returns ``(value, keep)``."""
    result: List[U] = []
    for x in items:
        value, keep = fn(x)
        if keep:
            result.append(value)
    return result


def filter_map(items: Iterable[T], fn: Callable[[T], Optional[U]]) -> List[U]:
    """Transform and filter at once; results of None are dropped."""
    result: List[U] = []
    for x in items:
        value = fn(x)
        if value is not None:
            result.append(value)
    return result


def filter_in_place(items: List[T], predicate: Callable[[T], bool]) -> List[T]:
    """Keep only the elements matching ``predicate`` and return the same list."""
    items[:] = [x for x in items if predicate(x)]
    return items


def reduce(items: Iterable[T], fn: Callable[[Any, T], Any]) -> Any:
    """Fold the elements into one value, starting from 0."""
    return fold(items, fn, 0)


def fold(items: Iterable[T], fn: Callable[[U, T], U], initial: U) -> U:
    """Fold the elements into one value, starting from ``initial``."""
    acc = initial
    for x in items:
        acc = fn(acc, x)
    return acc


def cut(items: List[T], start: int, stop: int) -> List[T]:
    """Return the list without the elements from ``start`` to ``stop`` inclusive.

    Bounds are clamped into the list. When ``start`` is greater than ``stop``,
    ``stop`` is taken as the number of extra elements to remove after ``start``.
    """
    if not items:
        return list(items)
    last = len(items) - 1
    start = min(max(start, 0), last)
    stop = min(max(stop, 0), last)
    if len(items) == 1:
        return []
    if start > stop:
        return items[:start] + items[start + stop + 1 :]
    return items[:start] + items[stop + 1 :]


def append(items: List[T], item: T) -> List[T]:
    """Return a new list with ``item`` added at the end."""
    return [*items, item]


def append_vector(items: List[T], more: Iterable[T]) -> List[T]:
    """Return a new list with ``more`` added at the end."""
    return [*items, *more]


def delete(items: List[T], idx: int) -> List[T]:
    """Remove the element at ``idx`` by moving the last element into its place.

    Order is not kept. Out-of-range indices leave the list unchanged.
    """
    if 0 <= idx < len(items):
        last = items.pop()
        if idx < len(items):
            items[idx] = last
    return items


def delete_order(items: List[T], idx: int) -> List[T]:
    """Remove the element at ``idx`` keeping order; out of range is a no-op."""
    if 0 <= idx < len(items):
        del items[idx]
    return items


def find(items: Iterable[T], predicate: Callable[[T], bool]) -> Optional[T]:
    """First element matching ``predicate``, or None."""
    return find_idx(items, predicate)[0]


def find_idx(items: Iterable[T], predicate: Callable[[T], bool]) -> Tuple[Optional[T], int]:
    """First element matching ``predicate`` and its index, or ``(None, -1)``."""
    for i, x in enumerate(items):
        if predicate(x):
            return x, i
    return None, -1


def extract_idx(items: List[T], idx: int) -> T:
    """Remove and return the element at ``idx`` (order is not kept).

    Raises IndexError when ``idx`` is out of range.
    """
    if not 0 <= idx < len(items):
        raise IndexError("extract index out of range")
    item = items[idx]
    delete(items, idx)
    return item


def extract(items: List[T], predicate: Callable[[T], bool]) -> Optional[T]:
    """Remove and return the first element matching ``predicate``, or None."""
    item, idx = find_idx(items, predicate)
    if idx < 0:
        return None
    delete(items, idx)
    return item


def pop(items: List[T]) -> T:
    """Remove and return the last element; IndexError when empty."""
    if not items:
        raise IndexError("pop from empty list")
    return items.pop()


def peek(items: List[T], idx: int) -> T:
    """Return the element at ``idx`` without removing it; IndexError if absent."""
    if not 0 <= idx < len(items):
        raise IndexError("peek index out of range")
    return items[idx]


def push_front(items: List[T], item: T) -> List[T]:
    """Return a new list with ``item`` in front."""
    return [item, *items]


def unshift(items: List[T], item: T) -> List[T]:
    """Alias of :func:`push_front`."""
    return push_front(items, item)


def pop_front(items: List[T]) -> T:
    """Remove and return the first element; IndexError when empty."""
    if not items:
        raise IndexError("pop from empty list")
    return items.pop(0)


def shift(items: List[T]) -> T:
    """Alias of :func:`pop_front`."""
    return pop_front(items)


def insert(items: Optional[List[T]], item: T, idx: int) -> List[T]:
    """Return a new list with ``item`` placed at ``idx``.

    A missing list yields ``[item]``; an out-of-range index returns the list unchanged.
    """
    if items is None:
        return [item]
    if not 0 <= idx <= len(items):
        return items
    return [*items[:idx], item, *items[idx:]]


def insert_vector(items: Optional[List[T]], more: Optional[List[T]], idx: int) -> List[T]:
    """Return a new list with ``more`` placed at ``idx``.

    A missing list yields a copy of ``more``; nothing to insert or an
    out-of-range index returns the list unchanged.
    """
    if items is None:
        return list(more or [])
    if not more:
        return items
    if not 0 <= idx <= len(items):
        return items
    return [*items[:idx], *more, *items[idx:]]


def copy(items: Optional[List[T]]) -> Optional[List[T]]:
    """Shallow copy of the list; None stays None."""
    if items is None:
        return None
    return list(items)


def range_each(items: Iterable[T], fn: Callable[[T, int], bool]) -> None:
    """Call ``fn(element, index)`` for each element until it returns false."""
    for i, x in enumerate(items):
        if not fn(x, i):
            return


def for_each(items: Iterable[T], fn: Callable[[T], Any]) -> None:
    """Call ``fn`` on every element."""
    for x in items:
        fn(x)