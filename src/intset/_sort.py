from __future__ import annotations

from collections.abc import MutableSequence


def _partition(arr: MutableSequence[int], low: int, high: int) -> int:
    # First element of the range is the pivot; the hole it leaves is filled
    # alternately from the right and left ends until they meet.
    key = arr[low]
    while low < high:
        while low < high and arr[high] >= key:
            high -= 1
        if low < high:
            arr[low] = arr[high]
            low += 1
        while low < high and arr[low] <= key:
            low += 1
        if low < high:
            arr[high] = arr[low]
            high -= 1
    arr[low] = key
    return low


def sort_ascending(arr: MutableSequence[int], start: int = 0, end: int | None = None) -> None:
    """Quicksort ``arr[start:end+1]`` in place.

    Recurses into the smaller partition and iterates over the larger one, so
    the stack depth stays logarithmic even on already-sorted input.
    """
    if end is None:
        end = len(arr) - 1
    while start < end:
        pos = _partition(arr, start, end)
        if pos - start < end - pos:
            sort_ascending(arr, start, pos - 1)
            start = pos + 1
        else:
            sort_ascending(arr, pos + 1, end)
            end = pos - 1
