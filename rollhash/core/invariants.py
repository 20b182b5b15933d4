"""Invariant checkers for the rolling hash engine.

Each function takes a ``RollingHashState`` snapshot and returns True when the
invariant holds; ``check_all()`` returns the list of violated invariant IDs
(empty = all pass).
"""

from __future__ import annotations

from typing import Callable

from .errors import InvalidElementError
from .state import RollingHashState, encode


def inv_hash_in_range(s: RollingHashState) -> bool:
    return 0 <= s.hash_value < s.modulus


def inv_powers_cover_window(s: RollingHashState) -> bool:
    # powers[len(window)] must exist for append_front
    return len(s.powers) >= len(s.window) + 1


def inv_powers_consistent(s: RollingHashState) -> bool:
    if s.modulus < 1 or not s.powers or s.powers[0] != 1 % s.modulus:
        return False
    return all(
        s.powers[k] == (s.powers[k - 1] * s.base) % s.modulus
        for k in range(1, len(s.powers))
    )


def inv_elements_valid(s: RollingHashState) -> bool:
    """Every element is a non-negative int or a single character."""
    try:
        s.codes()
    except InvalidElementError:
        return False
    return True


def inv_hash_matches_window(s: RollingHashState) -> bool:
    if s.modulus < 1 or not inv_elements_valid(s):
        return False
    return s.hash_value == encode(s.window, s.base, s.modulus)


# ---------------------------------------------------------------------------
# Registry + check_all
# ---------------------------------------------------------------------------

INVARIANT_REGISTRY: dict[str, Callable[[RollingHashState], bool]] = {
    "inv_hash_in_range": inv_hash_in_range,
    "inv_powers_cover_window": inv_powers_cover_window,
    "inv_powers_consistent": inv_powers_consistent,
    "inv_elements_valid": inv_elements_valid,
    "inv_hash_matches_window": inv_hash_matches_window,
}


def check_all(state: RollingHashState) -> list[str]:
    """Return list of violated invariant IDs (empty = all pass)."""
    return [
        inv_id
        for inv_id, check_fn in INVARIANT_REGISTRY.items()
        if not check_fn(state)
    ]
