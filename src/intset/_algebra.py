"""Set algebra over canonical IntSets.

Every operation is pure: inputs are never mutated and set-valued results
are assembled in a scratch list, sorted with sort_ascending, then frozen.
Membership tests against the other operand use binary search.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from intset._contracts import ensures, is_canonical, requires
from intset._intset import IntSet
from intset._search import contains


def _both_sets(a: Any, b: Any) -> bool:
    return isinstance(a, IntSet) and isinstance(b, IntSet)


def _canonical_result(a: Any, b: Any, result: IntSet) -> bool:
    return isinstance(result, IntSet) and is_canonical(result.elements)


def _only_from(a: IntSet, b: IntSet) -> list[int]:
    return [x for x in a.elements if not contains(b.elements, x)]


def member(value: int, s: IntSet) -> bool:
    """Whether ``value`` is an element of ``s``."""
    return contains(s.elements, value)


def cardinality(s: IntSet) -> int:
    return len(s.elements)


@requires(_both_sets)
def contains_all(a: IntSet, b: IntSet) -> bool:
    """``a ⊇ b``: every element of ``b`` is found in ``a``."""
    for x in b.elements:
        if not contains(a.elements, x):
            return False
    return True


@requires(_both_sets)
def is_subset(a: IntSet, b: IntSet) -> bool:
    """``a ⊆ b``."""
    return contains_all(b, a)


@requires(_both_sets)
def equal(a: IntSet, b: IntSet) -> bool:
    return contains_all(a, b) and contains_all(b, a)


def not_equal(a: IntSet, b: IntSet) -> bool:
    return not equal(a, b)


@ensures(lambda a, b, result: len(result) <= min(len(a), len(b)))
@ensures(_canonical_result)
@requires(_both_sets)
def intersect(a: IntSet, b: IntSet) -> IntSet:
    kept = [x for x in a.elements if contains(b.elements, x)]
    return IntSet.from_unsorted(kept)


@ensures(lambda a, b, result: len(result) <= len(a) + len(b))
@ensures(_canonical_result)
@requires(_both_sets)
def union(a: IntSet, b: IntSet) -> IntSet:
    merged = list(b.elements)
    merged.extend(_only_from(a, b))
    return IntSet.from_unsorted(merged)


@ensures(_canonical_result)
@requires(_both_sets)
def symmetric_difference(a: IntSet, b: IntSet) -> IntSet:
    out = _only_from(a, b)
    out.extend(_only_from(b, a))
    return IntSet.from_unsorted(out)


@ensures(lambda a, b, result: len(result) <= len(a))
@ensures(_canonical_result)
@requires(_both_sets)
def difference(a: IntSet, b: IntSet) -> IntSet:
    return IntSet.from_unsorted(_only_from(a, b))


# Operator spellings of the SQL-facing original, used by the command line.
BINARY_OPERATORS: dict[str, Callable[[IntSet, IntSet], Any]] = {
    ">@": contains_all,
    "@<": is_subset,
    "=": equal,
    "<>": not_equal,
    "&&": intersect,
    "||": union,
    "!!": symmetric_difference,
    "-": difference,
}
