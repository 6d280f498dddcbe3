from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator
from typing import Any

from intset._buffer import INT32_MAX
from intset._contracts import is_canonical
from intset._search import contains
from intset._sort import sort_ascending

INT32_MIN = -(2**31)


def _check_int32(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"intset elements must be int, got {type(value).__name__}")
    if not INT32_MIN <= value <= INT32_MAX:
        raise OverflowError(f"{value} is outside the 32-bit signed range")
    return value


@dataclasses.dataclass(frozen=True, eq=False)
class IntSet:
    """Immutable set of 32-bit integers kept in canonical (strictly ascending) order.

    Build one with :meth:`parse` or :meth:`from_iterable`; the constructor
    itself only accepts an already-canonical tuple and rejects anything else.
    """

    elements: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        elements = self.elements
        if not isinstance(elements, tuple):
            raise TypeError(f"IntSet expects a tuple, got {type(elements).__name__}")
        prev: int | None = None
        for x in elements:
            _check_int32(x)
            if prev is not None and x <= prev:
                raise ValueError(f"elements are not strictly ascending: {prev} then {x}")
            prev = x

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> IntSet:
        return _EMPTY

    @classmethod
    def parse(cls, text: str | bytes, **kwargs: Any) -> IntSet:
        from intset._parser import parse

        return parse(text, **kwargs)

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> IntSet:
        return cls.from_unsorted(list({_check_int32(v) for v in values}))

    @classmethod
    def from_unsorted(cls, unique: list[int]) -> IntSet:
        """Sort a list of distinct values in place and wrap it.

        A list already in ascending order is wrapped without sorting.
        """
        if not is_canonical(unique):
            sort_ascending(unique)
        return cls(tuple(unique)) if unique else _EMPTY

    # ------------------------------------------------------------------
    # container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[int]:
        return iter(self.elements)

    def __contains__(self, value: object) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return contains(self.elements, value)

    def __bool__(self) -> bool:
        return bool(self.elements)

    def __hash__(self) -> int:
        return hash((IntSet, self.elements))

    # ------------------------------------------------------------------
    # comparison and algebra; delegates to intset._algebra
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        from intset._algebra import equal

        return equal(self, other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        from intset._algebra import not_equal

        return not_equal(self, other)

    def __le__(self, other: IntSet) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        from intset._algebra import is_subset

        return is_subset(self, other)

    def __ge__(self, other: IntSet) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        from intset._algebra import contains_all

        return contains_all(self, other)

    def __lt__(self, other: IntSet) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        return len(self) < len(other) and self <= other

    def __gt__(self, other: IntSet) -> bool:
        if not isinstance(other, IntSet):
            return NotImplemented
        return len(self) > len(other) and self >= other

    def __or__(self, other: IntSet) -> IntSet:
        if not isinstance(other, IntSet):
            return NotImplemented
        from intset._algebra import union

        return union(self, other)

    def __and__(self, other: IntSet) -> IntSet:
        if not isinstance(other, IntSet):
            return NotImplemented
        from intset._algebra import intersect

        return intersect(self, other)

    def __xor__(self, other: IntSet) -> IntSet:
        if not isinstance(other, IntSet):
            return NotImplemented
        from intset._algebra import symmetric_difference

        return symmetric_difference(self, other)

    def __sub__(self, other: IntSet) -> IntSet:
        if not isinstance(other, IntSet):
            return NotImplemented
        from intset._algebra import difference

        return difference(self, other)

    # ------------------------------------------------------------------
    # text
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        from intset._format import format_intset

        return format_intset(self)

    def __repr__(self) -> str:
        return f"IntSet({str(self)!r})"


_EMPTY = IntSet()
