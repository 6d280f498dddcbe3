"""Exception hierarchy for intset.

Every failure the package raises derives from IntSetError. Literal
rejections additionally derive from ValueError and carry the offending
position so callers can point at it.
"""

from __future__ import annotations


class IntSetError(Exception):
    """Base class for all intset failures."""


class IntSetSyntaxError(IntSetError, ValueError):
    kind = "SyntaxError"

    def __init__(self, message: str, text: str, position: int) -> None:
        super().__init__(message)
        self.message = message
        self.text = text
        self.position = position

    def illustration(self) -> str:
        return f"{self.text}\n{' ' * self.position}^"

    def __str__(self) -> str:
        return f"invalid intset syntax: {self.message} (at offset {self.position} in {self.text!r})"


class UnbalancedBraces(IntSetSyntaxError):
    kind = "UnbalancedBraces"


class MissingClosingBrace(IntSetSyntaxError):
    kind = "MissingClosingBrace"


class DuplicateSeparator(IntSetSyntaxError):
    kind = "DuplicateSeparator"


class MissingSeparator(IntSetSyntaxError):
    kind = "MissingSeparator"


class DanglingComma(IntSetSyntaxError):
    kind = "DanglingComma"


class InvalidCharacter(IntSetSyntaxError):
    kind = "InvalidCharacter"


class NumericOverflow(IntSetSyntaxError):
    kind = "NumericOverflow"


class AllocationError(IntSetError, MemoryError):
    """Storage for a buffer or set could not be obtained."""


class ContractViolation(IntSetError, AssertionError):
    pass
