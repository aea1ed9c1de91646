"""Functional helpers for dictionaries."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")
K2 = TypeVar("K2")
V2 = TypeVar("V2")
R = TypeVar("R")

_MISSING = object()


def equals(
    m1: Optional[Dict[K, V]], m2: Optional[Dict[K, V]], eq: Callable[[V, V], bool]
) -> bool:
    """Whether both dicts hold the same keys with values equal under ``eq``.

    ``None`` only equals ``None``.
    """
    if m1 is None or m2 is None:
        return m1 is None and m2 is None
    if len(m1) != len(m2):
        return False
    for key, v1 in m1.items():
        v2 = m2.get(key, _MISSING)
        if v2 is _MISSING or not eq(v1, v2):
            return False
    return True


def map_entries(
    m: Optional[Dict[K, V]], fn: Callable[[K, V], Tuple[K2, V2]]
) -> Optional[Dict[K2, V2]]:
    """Build a new dict from the (key, value) pairs that ``fn`` returns."""
    if m is None:
        return None
    return dict(fn(k, v) for k, v in m.items())


def filter_map(
    m: Optional[Dict[K, V]], fn: Callable[[K, V], Optional[Tuple[K2, V2]]]
) -> Optional[Dict[K2, V2]]:
    """Transform entries, dropping those for which ``fn`` returns None."""
    if m is None:
        return None
    result: Dict[K2, V2] = {}
    for k, v in m.items():
        pair = fn(k, v)
        if pair is not None:
            new_key, new_value = pair
            result[new_key] = new_value
    return result


def filter_map_tuple(
    m: Optional[Dict[K, V]], fn: Callable[[K, V], Tuple[K2, V2, bool]]
) -> Optional[Dict[K2, V2]]:
    """Transform entries; ``fn`` returns (key, value, keep)."""
    if m is None:
        return None
    result: Dict[K2, V2] = {}
    for k, v in m.items():
        new_key, new_value, keep = fn(k, v)
        if keep:
            result[new_key] = new_value
    return result


def filter_entries(
    m: Optional[Dict[K, V]], predicate: Callable[[K, V], bool]
) -> Optional[Dict[K, V]]:
    """Return a new dict with the entries that satisfy ``predicate``."""
    if m is None:
        return None
    return {k: v for k, v in m.items() if predicate(k, v)}


def filter_in_place(
    m: Optional[Dict[K, V]], predicate: Callable[[K, V], bool]
) -> Optional[Dict[K, V]]:
    """Remove entries that fail ``predicate`` from ``m`` and return it."""
    if m is None:
        return None
    for k, v in list(m.items()):
        if not predicate(k, v):
            del m[k]
    return m


def reduce(m: Optional[Dict[K, V]], fn: Callable[[Any, K, V], Any]) -> Any:
    """Fold the entries into one value, starting from 0."""
    return fold(m, fn, 0)


def fold(m: Optional[Dict[K, V]], fn: Callable[[R, K, V], R], initial: R) -> R:
    """Fold the entries into one value, starting from ``initial``."""
    acc = initial
    if m is None:
        return acc
    for k, v in m.items():
        acc = fn(acc, k, v)
    return acc


def to_list(m: Optional[Dict[K, V]], fn: Callable[[K, V], R]) -> List[R]:
    """Return ``fn(key, value)`` for every entry, in iteration order."""
    if m is None:
        return []
    return [fn(k, v) for k, v in m.items()]