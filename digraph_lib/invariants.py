"""
Representation-invariant checks shared by the graph implementations.

Checks run after every mutating operation while they are enabled. They are
on by default when Python runs with assertions enabled, and can be forced on
or off with the DIGRAPH_LIB_CHECK_REP environment variable or at runtime with
set_rep_checks(). A failed check raises AssertionError: it means the graph
implementation itself is broken, never that a caller passed bad input.
"""

import os
from contextlib import contextmanager
from typing import Collection, Hashable, Iterable, Iterator, Tuple

ENV_VAR = "DIGRAPH_LIB_CHECK_REP"
_FALSE_VALUES = {"0", "false", "no", "off"}


def _initial_setting() -> bool:
    value = os.environ.get(ENV_VAR, "").strip().lower()
    if not value:
        return __debug__
    return value not in _FALSE_VALUES


_enabled: bool = _initial_setting()


def rep_checks_enabled() -> bool:
    """Returns whether post-mutation invariant checks are currently run."""
    return _enabled


def set_rep_checks(enabled: bool) -> None:
    """Turns post-mutation invariant checks on or off for every graph."""
    global _enabled
    _enabled = bool(enabled)


@contextmanager
def rep_checks(enabled: bool) -> Iterator[None]:
    """
    Temporarily turns invariant checks on or off.

    The previous setting is restored on exit, even if the block raises.
    """
    previous = rep_checks_enabled()
    set_rep_checks(enabled)
    try:
        yield
    finally:
        set_rep_checks(previous)


def _require(condition: bool, message: str) -> None:
    # Explicit raise so the flag still works under python -O.
    if not condition:
        raise AssertionError(message)


def check_unique(items: Iterable[Hashable], kind: str = "vertex label") -> None:
    """Asserts that no item appears twice."""
    seen = set()
    for item in items:
        _require(item not in seen, f"Duplicate {kind} {item!r}.")
        seen.add(item)


def check_positive(weights: Iterable[int]) -> None:
    """Asserts that every stored weight is a positive int."""
    for weight in weights:
        _require(isinstance(weight, int) and weight > 0, f"Stored weight {weight!r} is not positive.")


def check_endpoints(pairs: Iterable[Tuple[str, str]], vertices: Collection[str]) -> None:
    """Asserts that both ends of every (source, target) pair are vertices."""
    for source, target in pairs:
        _require(source in vertices, f"Edge source {source!r} is not a vertex.")
        _require(target in vertices, f"Edge target {target!r} is not a vertex.")
