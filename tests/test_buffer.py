"""Tests for GrowableBuffer."""

from __future__ import annotations

import logging

import pytest

from intset._buffer import GrowableBuffer
from intset._errors import AllocationError, IntSetError


class TestInsert:
    def test_starts_empty(self):
        buf = GrowableBuffer(4)
        assert len(buf) == 0
        assert buf.capacity == 4

    def test_appends_in_insertion_order(self):
        buf = GrowableBuffer(4)
        for v in (5, 1, 3):
            buf.insert(v)
        assert buf.finalize() == [5, 1, 3]

    def test_duplicates_are_ignored(self):
        buf = GrowableBuffer(4)
        for v in (2, 2, 7, 2, 7):
            buf.insert(v)
        assert len(buf) == 2
        assert buf.finalize() == [2, 7]

    def test_contains(self):
        buf = GrowableBuffer(2)
        buf.insert(9)
        assert 9 in buf
        assert 0 not in buf  # unused slots are zero-filled but not live


class TestGrowth:
    def test_doubles_when_full(self):
        buf = GrowableBuffer(2)
        buf.insert(1)
        buf.insert(2)
        assert buf.capacity == 2
        buf.insert(3)
        assert buf.capacity == 4
        assert buf.finalize() == [1, 2, 3]

    def test_duplicate_into_full_buffer_does_not_grow(self):
        buf = GrowableBuffer(2)
        buf.insert(1)
        buf.insert(2)
        buf.insert(2)
        assert buf.capacity == 2

    def test_many_inserts(self):
        buf = GrowableBuffer(1)
        for v in range(100):
            buf.insert(v)
        assert buf.capacity == 128
        assert buf.finalize() == list(range(100))

    def test_ceiling_raises_allocation_error(self):
        buf = GrowableBuffer(2, max_capacity=3)
        buf.insert(1)
        buf.insert(2)
        with pytest.raises(AllocationError):
            buf.insert(3)

    def test_growth_is_logged(self, caplog):
        buf = GrowableBuffer(1)
        with caplog.at_level(logging.DEBUG, logger="intset._buffer"):
            buf.insert(1)
            buf.insert(2)
        assert "grew from 1 to 2" in caplog.text


class TestFinalize:
    def test_finalize_releases_storage(self):
        buf = GrowableBuffer(2)
        buf.insert(1)
        buf.finalize()
        with pytest.raises(IntSetError):
            buf.insert(2)
        with pytest.raises(IntSetError):
            buf.finalize()

    def test_bad_capacities(self):
        with pytest.raises(ValueError):
            GrowableBuffer(0)
        with pytest.raises(ValueError):
            GrowableBuffer(8, max_capacity=4)
