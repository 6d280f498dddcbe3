"""Pre/postcondition checks for the set algebra.

``@requires`` and ``@ensures`` attach predicates to a single checking
wrapper per function; stacking more decorators adds predicates to that
wrapper instead of nesting new ones, so each predicate runs once per call.
Predicates receive the call's arguments; postconditions also get
``result=``. A failed or raising predicate raises ContractViolation.

Checking is on unless INTSET_CHECK_CONTRACTS is set to 0/false/no/off,
or :func:`enable_contracts` says otherwise.
"""

from __future__ import annotations

import functools
import os
from collections.abc import Callable, Sequence
from typing import Any

from intset._errors import ContractViolation

Predicate = Callable[..., bool]

_CONTRACTS_ATTR = "__intset_contracts__"

_ENABLED: bool | None = None


def contracts_enabled() -> bool:
    global _ENABLED
    if _ENABLED is None:
        flag = os.environ.get("INTSET_CHECK_CONTRACTS", "1").strip().lower()
        _ENABLED = flag not in ("0", "false", "no", "off")
    return _ENABLED


def enable_contracts(enabled: bool | None) -> None:
    """Force checking on or off; ``None`` re-reads the environment."""
    global _ENABLED
    _ENABLED = enabled


def contracts_of(fn: Callable[..., Any]) -> dict[str, list[Predicate]]:
    return getattr(fn, _CONTRACTS_ATTR, {"requires": [], "ensures": []})


def _violated(pred: Predicate, *args: Any, **kwargs: Any) -> str | None:
    try:
        return None if pred(*args, **kwargs) else "returned False"
    except Exception as e:
        return f"{type(e).__name__}: {e}"


def _checked(fn: Callable[..., Any]) -> Callable[..., Any]:
    if hasattr(fn, _CONTRACTS_ATTR):
        return fn
    contracts: dict[str, list[Predicate]] = {"requires": [], "ensures": []}
    name = f"{fn.__module__}.{fn.__qualname__}"

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not contracts_enabled():
            return fn(*args, **kwargs)
        for pred in contracts["requires"]:
            err = _violated(pred, *args, **kwargs)
            if err:
                raise ContractViolation(f"Precondition failed for {name}: {err}")
        result = fn(*args, **kwargs)
        for pred in contracts["ensures"]:
            err = _violated(pred, *args, **kwargs, result=result)
            if err:
                raise ContractViolation(f"Postcondition failed for {name}: {err}")
        return result

    setattr(wrapper, _CONTRACTS_ATTR, contracts)
    return wrapper


def requires(pred: Predicate) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
        wrapper = _checked(fn)
        contracts_of(wrapper)["requires"].append(pred)
        return wrapper

    return deco


def ensures(pred: Predicate) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
        wrapper = _checked(fn)
        contracts_of(wrapper)["ensures"].append(pred)
        return wrapper

    return deco


def is_canonical(xs: Sequence[int]) -> bool:
    return all(xs[i] < xs[i + 1] for i in range(len(xs) - 1))
