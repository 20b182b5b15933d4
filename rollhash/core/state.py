"""Frozen snapshots of rolling hash state and the batch reference encoding.

``recompute_hash()`` is the from-scratch polynomial encoding the incremental
engine must always agree with:
``sum(window[i] * BASE^(len-1-i)) mod MOD`` (front element carries the highest power).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .errors import InvalidElementError
from .params import DEFAULT_PARAMS, HashParams

Element = int | str


@dataclass(frozen=True)
class RollingHashState:
    """Point-in-time copy of an engine's window, hash and power table."""

    window: tuple[Element, ...]
    hash_value: int
    powers: tuple[int, ...]
    base: int
    modulus: int

    def codes(self) -> tuple[int, ...]:
        return tuple(element_code(x) for x in self.window)


def element_code(x: Any) -> int:
    """Raw integer value hashed for a window element.

    Ints must be non-negative; a single-character str hashes as its Unicode
    scalar value. Both are reduced modulo MOD by the hash, so an int and the
    character with the same code point always hash alike.
    """
    if isinstance(x, bool):
        raise InvalidElementError(f"bool is not a window element: {x!r}")
    if isinstance(x, int):
        if x < 0:
            raise InvalidElementError(f"element {x} is negative")
        return x
    if isinstance(x, str):
        if len(x) != 1:
            raise InvalidElementError(f"str elements must be one character, got {x!r}")
        return ord(x)
    raise InvalidElementError(f"unsupported element type {type(x).__name__}")


def encode(window: Iterable[Element], base: int, modulus: int) -> int:
    """Horner's rule over raw ``base``/``modulus`` values (no validation)."""
    h = 0
    for x in window:
        h = (h * base + element_code(x)) % modulus
    return h


def recompute_hash(window: Iterable[Element], params: HashParams = DEFAULT_PARAMS) -> int:
    """Hash *window* from scratch."""
    return encode(window, params.base, params.modulus)
