"""Hypothesis strategies for IntSets and their literal text.

Useful for property-testing code that consumes intsets::

    from hypothesis import given
    from intset import int_sets

    @given(int_sets())
    def test_roundtrip(s): ...
"""

from __future__ import annotations

from hypothesis import strategies as st

from intset._buffer import INT32_MAX
from intset._intset import INT32_MIN, IntSet

_SEPARATORS = st.sampled_from([",", ", ", " ,", " , ", ",  "])


def int32s(*, min_value: int = INT32_MIN, max_value: int = INT32_MAX) -> st.SearchStrategy[int]:
    return st.integers(min_value=max(min_value, INT32_MIN), max_value=min(max_value, INT32_MAX))


def int_sets(
    *,
    min_value: int = 0,
    max_value: int = INT32_MAX,
    max_size: int = 20,
) -> st.SearchStrategy[IntSet]:
    """IntSets whose elements lie in ``[min_value, max_value]``.

    The default range is non-negative so every generated set can be written
    back as a literal.
    """
    return st.lists(int32s(min_value=min_value, max_value=max_value), max_size=max_size).map(IntSet.from_iterable)


@st.composite
def literals(draw: st.DrawFn, *, max_value: int = INT32_MAX, max_size: int = 20) -> str:
    """Valid literal text: unordered, possibly repeated elements, legal spacing."""
    values = draw(st.lists(int32s(min_value=0, max_value=max_value), max_size=max_size))
    body = ""
    for i, v in enumerate(values):
        if i:
            body += draw(_SEPARATORS)
        body += str(v)
        if draw(st.booleans()):
            body += " "
    lead = draw(st.sampled_from(["", " "]))
    trail = draw(st.sampled_from(["", " "]))
    return f"{lead}{{{body}}}{trail}"
