from intset._algebra import (
    cardinality,
    contains_all,
    difference,
    equal,
    intersect,
    is_subset,
    member,
    not_equal,
    symmetric_difference,
    union,
)
from intset._buffer import GrowableBuffer
from intset._cli import main
from intset._contracts import enable_contracts, ensures, requires
from intset._errors import (
    AllocationError,
    ContractViolation,
    DanglingComma,
    DuplicateSeparator,
    IntSetError,
    IntSetSyntaxError,
    InvalidCharacter,
    MissingClosingBrace,
    MissingSeparator,
    NumericOverflow,
    UnbalancedBraces,
)
from intset._format import format_intset
from intset._intset import IntSet
from intset._parser import parse
from intset._search import contains
from intset._sort import sort_ascending
from intset._strategies import int32s, int_sets, literals

__all__ = [
    "AllocationError",
    "ContractViolation",
    "DanglingComma",
    "DuplicateSeparator",
    "GrowableBuffer",
    "IntSet",
    "IntSetError",
    "IntSetSyntaxError",
    "InvalidCharacter",
    "MissingClosingBrace",
    "MissingSeparator",
    "NumericOverflow",
    "UnbalancedBraces",
    "cardinality",
    "contains",
    "contains_all",
    "difference",
    "enable_contracts",
    "ensures",
    "equal",
    "format_intset",
    "int32s",
    "int_sets",
    "intersect",
    "is_subset",
    "literals",
    "main",
    "member",
    "not_equal",
    "parse",
    "requires",
    "sort_ascending",
    "symmetric_difference",
    "union",
]
