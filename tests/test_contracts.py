"""Tests for the @requires / @ensures contract decorators."""

from __future__ import annotations

import pytest

from intset import intersect, parse
from intset._contracts import (
    contracts_enabled,
    contracts_of,
    enable_contracts,
    ensures,
    is_canonical,
    requires,
)
from intset._errors import ContractViolation


# ---------------------------------------------------------------------------
# @requires
# ---------------------------------------------------------------------------

class TestRequires:
    def test_passes_when_satisfied(self):
        @requires(lambda x: x > 0)
        def f(x: int) -> int:
            return x * 2
        assert f(5) == 10

    def test_raises_when_violated(self):
        @requires(lambda x: x > 0)
        def f(x: int) -> int:
            return x * 2
        with pytest.raises(ContractViolation, match="Precondition failed"):
            f(x=-1)

    def test_violation_is_an_assertion_error(self):
        @requires(lambda x: False)
        def f(x: int) -> int:
            return x
        with pytest.raises(AssertionError):
            f(1)

    def test_predicate_error_counts_as_failure(self):
        @requires(lambda x: x.missing)
        def f(x: int) -> int:
            return x
        with pytest.raises(ContractViolation, match="AttributeError"):
            f(1)

    def test_stacking_accumulates(self):
        @requires(lambda x: x > 0)
        @requires(lambda x: x < 100)
        def f(x: int) -> int:
            return x
        assert len(contracts_of(f)["requires"]) == 2
        with pytest.raises(ContractViolation):
            f(200)


# ---------------------------------------------------------------------------
# @ensures
# ---------------------------------------------------------------------------

class TestEnsures:
    def test_passes_when_satisfied(self):
        @ensures(lambda x, result: result > x)
        def f(x: int) -> int:
            return x + 1
        assert f(5) == 6

    def test_raises_when_violated(self):
        @ensures(lambda x, result: result > x)
        def f(x: int) -> int:
            return x - 1
        with pytest.raises(ContractViolation, match="Postcondition failed for .*f"):
            f(5)

    def test_also_checks_requires(self):
        @ensures(lambda x, result: result > 0)
        @requires(lambda x: x > 0)
        def f(x: int) -> int:
            return x
        with pytest.raises(ContractViolation, match="Precondition failed"):
            f(-1)


# ---------------------------------------------------------------------------
# one wrapper per function
# ---------------------------------------------------------------------------

class TestSingleWrapper:
    def test_stacked_decorators_share_one_wrapper(self):
        def f(x: int) -> int:
            return x
        inner = requires(lambda x: True)(f)
        outer = ensures(lambda x, result: True)(inner)
        assert outer is inner
        assert outer.__wrapped__ is f
        assert outer.__name__ == "f"

    def test_each_predicate_runs_once_per_call(self):
        calls = {"pre": 0, "post_a": 0, "post_b": 0}

        def pre(x):
            calls["pre"] += 1
            return True

        def post_a(x, result):
            calls["post_a"] += 1
            return True

        def post_b(x, result):
            calls["post_b"] += 1
            return True

        @ensures(post_b)
        @ensures(post_a)
        @requires(pre)
        def f(x: int) -> int:
            return x

        f(1)
        assert calls == {"pre": 1, "post_a": 1, "post_b": 1}

    def test_algebra_operations_carry_contracts(self):
        c = contracts_of(intersect)
        assert len(c["requires"]) == 1
        assert len(c["ensures"]) == 2
        assert intersect(parse("{1,2}"), parse("{2}")) == parse("{2}")

    def test_undecorated_function_has_no_contracts(self):
        assert contracts_of(len) == {"requires": [], "ensures": []}


# ---------------------------------------------------------------------------
# switches and predicates
# ---------------------------------------------------------------------------

class TestSwitch:
    def test_disabled_skips_checks(self):
        @ensures(lambda x, result: False)
        @requires(lambda x: False)
        def f(x: int) -> int:
            return x
        enable_contracts(False)
        assert f(3) == 3

    @pytest.mark.parametrize("value, expected", [("0", False), ("off", False), ("No", False), ("1", True), ("yes", True)])
    def test_environment(self, monkeypatch, value, expected):
        monkeypatch.setenv("INTSET_CHECK_CONTRACTS", value)
        enable_contracts(None)
        assert contracts_enabled() is expected

    def test_default_is_on(self, monkeypatch):
        monkeypatch.delenv("INTSET_CHECK_CONTRACTS", raising=False)
        enable_contracts(None)
        assert contracts_enabled() is True


class TestIsCanonical:
    def test_cases(self):
        assert is_canonical([])
        assert is_canonical([1])
        assert is_canonical([-3, 0, 9])
        assert not is_canonical([1, 1])
        assert not is_canonical([2, 1])
