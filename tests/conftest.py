"""Shared fixtures for intset tests."""

from __future__ import annotations

import pytest

from intset._contracts import enable_contracts
from intset._term import force_color


@pytest.fixture(autouse=True)
def _reset_global_switches():
    """Contracts on and colors off for every test; restore env-driven defaults after."""
    enable_contracts(True)
    force_color(False)
    yield
    enable_contracts(None)
    force_color(None)


@pytest.fixture
def parse_ok():
    from intset import parse

    def _parse(text: str) -> list[int]:
        return list(parse(text).elements)

    return _parse
