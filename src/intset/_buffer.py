from __future__ import annotations

import logging

from intset._errors import AllocationError, IntSetError

logger = logging.getLogger(__name__)

INT32_MAX = 2**31 - 1
DEFAULT_CAPACITY = 32


class GrowableBuffer:
    """Owning, duplicate-suppressing accumulator of 32-bit integers.

    Storage is a preallocated list of ``capacity`` slots of which the first
    ``len(self)`` are live. A full buffer doubles its capacity on the next
    new insert; it never shrinks. Elements keep insertion order.
    """

    __slots__ = ("_storage", "_length", "_max_capacity")

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY, *, max_capacity: int = INT32_MAX) -> None:
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be positive, got {initial_capacity}")
        if max_capacity < initial_capacity:
            raise ValueError(f"max_capacity {max_capacity} is below initial_capacity {initial_capacity}")
        self._storage: list[int] | None = _allocate(initial_capacity)
        self._length = 0
        self._max_capacity = max_capacity

    @property
    def capacity(self) -> int:
        return len(self._live_storage())

    def __len__(self) -> int:
        return self._length

    def __contains__(self, value: object) -> bool:
        storage = self._live_storage()
        for i in range(self._length):
            if storage[i] == value:
                return True
        return False

    def insert(self, value: int) -> None:
        storage = self._live_storage()
        if value in self:
            return
        if self._length == len(storage):
            storage = self._grow(storage)
        storage[self._length] = value
        self._length += 1

    def _grow(self, storage: list[int]) -> list[int]:
        new_capacity = 2 * len(storage)
        if new_capacity > self._max_capacity:
            raise AllocationError(
                f"cannot grow buffer past {self._max_capacity} elements (requested {new_capacity})"
            )
        grown = _allocate(new_capacity)
        grown[: self._length] = storage[: self._length]
        logger.debug("buffer grew from %d to %d slots", len(storage), new_capacity)
        self._storage = grown
        return grown

    def finalize(self) -> list[int]:
        """Hand out the live elements and release the storage."""
        storage = self._live_storage()
        out = storage[: self._length]
        self._storage = None
        self._length = 0
        return out

    def _live_storage(self) -> list[int]:
        if self._storage is None:
            raise IntSetError("buffer already finalized")
        return self._storage

    def __repr__(self) -> str:
        if self._storage is None:
            return "GrowableBuffer(<finalized>)"
        return f"GrowableBuffer({self._storage[: self._length]!r}, capacity={len(self._storage)})"


def _allocate(slots: int) -> list[int]:
    try:
        return [0] * slots
    except MemoryError as e:
        raise AllocationError(f"cannot allocate {slots} slots") from e
