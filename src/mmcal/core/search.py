from __future__ import annotations

from typing import Any, Callable, Sequence, TypeVar

T = TypeVar("T")


def _identity(x: Any) -> Any:
    return x


def find_key(table: Sequence[T], key: int, *, key_of: Callable[[T], int] = _identity) -> int:
    """
    Exact-key binary search over a table sorted by key_of(row).
    Returns the index of the matching row, or -1 when the key is absent.
    """
    lo, hi = 0, len(table) - 1
    while hi >= lo:
        mid = (lo + hi) // 2
        k = key_of(table[mid])
        if k > key:
            hi = mid - 1
        elif k < key:
            lo = mid + 1
        else:
            return mid
    return -1
