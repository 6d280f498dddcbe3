"""Literal parser: ``"{3, 1,2}"`` text to a canonical IntSet.

A single left-to-right pass drives a small state machine (ParserState)
and commits finished numbers into a GrowableBuffer. The first rule that
breaks aborts the parse with a typed IntSetSyntaxError; no partial set is
ever returned.

Grammar::

    literal := ' '* '{' body '}' ' '*
    body    := [number (sep number)*]
    sep     := ' '* ',' ' '*
    number  := digit+            (at most 2**31 - 1)

Spaces may follow any number and are otherwise ignored.
"""

from __future__ import annotations

import dataclasses
import enum
import logging

from intset._buffer import DEFAULT_CAPACITY, INT32_MAX, GrowableBuffer
from intset._errors import (
    DanglingComma,
    DuplicateSeparator,
    InvalidCharacter,
    MissingClosingBrace,
    MissingSeparator,
    NumericOverflow,
    UnbalancedBraces,
)
from intset._intset import IntSet

logger = logging.getLogger(__name__)


class Committer(enum.Enum):
    """What last flushed a pending number into the buffer."""

    NONE = "none"
    BLANK = "blank"
    COMMA = "comma"
    CLOSE_BRACE = "close_brace"


@dataclasses.dataclass
class ParserState:
    left_braces: int = 0
    right_braces: int = 0
    pending_comma: bool = False
    pending_number: bool = False
    committer: Committer = Committer.NONE
    accumulator: int = 0


class _Parser:
    def __init__(self, text: str, buffer: GrowableBuffer) -> None:
        self.text = text
        self.buffer = buffer
        self.state = ParserState()

    def run(self) -> list[int]:
        for pos, ch in enumerate(self.text):
            self.step(pos, ch)
        self._end()
        return self.buffer.finalize()

    def step(self, pos: int, ch: str) -> None:
        if ch == "{":
            self._open_brace(pos)
        elif ch == "}":
            self._close_brace(pos)
        elif ch == " ":
            self._commit(Committer.BLANK)
        elif ch == ",":
            self._comma(pos)
        elif "0" <= ch <= "9":
            self._digit(pos, ord(ch) - ord("0"))
        else:
            raise InvalidCharacter(f"unexpected character {ch!r}", self.text, pos)

    def _commit(self, by: Committer) -> None:
        st = self.state
        if not st.pending_number:
            return
        self.buffer.insert(st.accumulator)
        logger.debug("committed %d (by %s)", st.accumulator, by.value)
        st.pending_number = False
        st.accumulator = 0
        st.committer = by

    def _outside_body(self, pos: int) -> None:
        st = self.state
        if st.left_braces == 0:
            raise UnbalancedBraces("missing opening brace before element", self.text, pos)
        if st.right_braces > 0:
            raise UnbalancedBraces("content after closing brace", self.text, pos)

    def _open_brace(self, pos: int) -> None:
        st = self.state
        st.left_braces += 1
        if st.left_braces > 1:
            raise UnbalancedBraces("too many opening braces", self.text, pos)

    def _close_brace(self, pos: int) -> None:
        st = self.state
        st.right_braces += 1
        if st.right_braces > 1:
            raise UnbalancedBraces("too many closing braces", self.text, pos)
        if st.left_braces != 1:
            raise UnbalancedBraces("closing brace without opening brace", self.text, pos)
        self._commit(Committer.CLOSE_BRACE)

    def _comma(self, pos: int) -> None:
        st = self.state
        self._outside_body(pos)
        if st.pending_comma:
            raise DuplicateSeparator("two commas without a number between them", self.text, pos)
        self._commit(Committer.COMMA)
        st.pending_comma = True

    def _digit(self, pos: int, digit: int) -> None:
        st = self.state
        self._outside_body(pos)
        starts_number = not st.pending_number
        st.pending_number = True
        st.accumulator = st.accumulator * 10 + digit
        if st.accumulator > INT32_MAX:
            raise NumericOverflow(f"number exceeds {INT32_MAX}", self.text, pos)
        if not starts_number:
            return
        if st.committer is not Committer.NONE and st.committer is not Committer.COMMA and not st.pending_comma:
            raise MissingSeparator("numbers must be separated by a comma", self.text, pos)
        st.pending_comma = False

    def _end(self) -> None:
        st = self.state
        end = len(self.text)
        if st.pending_comma:
            raise DanglingComma("comma is not followed by a number", self.text, end)
        if st.right_braces != 1:
            raise MissingClosingBrace("missing closing brace", self.text, end)


def parse(
    text: str | bytes,
    *,
    initial_capacity: int = DEFAULT_CAPACITY,
    max_capacity: int = INT32_MAX,
) -> IntSet:
    """Parse an intset literal into its canonical IntSet.

    Raises a subclass of IntSetSyntaxError for malformed text and
    AllocationError if the element buffer cannot grow.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError as e:
            raise InvalidCharacter("non-ASCII byte", text.decode("ascii", "replace"), e.start) from e
    if not isinstance(text, str):
        raise TypeError(f"intset literal must be str or bytes, got {type(text).__name__}")

    buffer = GrowableBuffer(initial_capacity, max_capacity=max_capacity)
    unique = _Parser(text, buffer).run()
    result = IntSet.from_unsorted(unique)
    logger.debug("parsed %r into %d element(s)", text, len(result))
    return result
