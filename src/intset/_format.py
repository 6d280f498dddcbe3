from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from intset._intset import IntSet


def format_intset(s: IntSet) -> str:
    """Canonical text of ``s``: ``{}`` or comma-joined decimals in braces, no spaces."""
    if len(s) == 0:
        return "{}"
    return "{" + ",".join(str(x) for x in s.elements) + "}"
