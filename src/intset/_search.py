from __future__ import annotations

from collections.abc import Sequence


def index_of(xs: Sequence[int], key: int) -> int:
    """Index of ``key`` in ascending ``xs``, or -1 if absent."""
    lo, hi = 0, len(xs) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        v = xs[mid]
        if v < key:
            lo = mid + 1
        elif v > key:
            hi = mid - 1
        else:
            return mid
    return -1


def contains(xs: Sequence[int], key: int) -> bool:
    return index_of(xs, key) >= 0
