"""Double-ended rolling hash engine.

The engine owns three co-evolving fields:

- ``_window``: deque of elements, front = oldest, back = newest;
- ``_hash``: ``sum(window[i] * BASE^(len-1-i)) mod MOD`` as a ``Modular``;
- ``_powers``: append-only table with ``_powers[k] == BASE^k``, kept at least
  ``len(window) + 1`` long so ``BASE^len`` is always available.

Appending at either end is additive. Removing from the back has to shift every
surviving term down one power of ``BASE``, which is a modular division; that
is why ``MOD`` must be prime.

Removals on an empty window are no-ops. Instances are not thread-safe; callers
sharing one across threads must lock around it.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

from .errors import InvariantViolationError
from .invariants import check_all
from .modular import Modular
from .params import DEFAULT_PARAMS, HashParams
from .state import Element, RollingHashState, element_code


class RollingHash:
    """Polynomial hash of a window that can grow or shrink at either end."""

    def __init__(self, params: HashParams = DEFAULT_PARAMS) -> None:
        self._params = params
        self._base = params.base_residue()
        # BASE != 0 (mod MOD) is guaranteed by HashParams validation
        self._base_inverse = self._base.inverse()
        self._window: deque[Element] = deque()
        self._hash: Modular = params.zero()
        self._powers: list[Modular] = [params.one()]

    # -- Construction ---------------------------------------------------------

    @classmethod
    def from_sequence(cls, items: Iterable[Element], params: HashParams = DEFAULT_PARAMS) -> RollingHash:
        """Equivalent to ``append_back`` of every item in order."""
        rh = cls(params)
        rh.extend_back(items)
        return rh

    @classmethod
    def from_text(cls, text: str, params: HashParams = DEFAULT_PARAMS) -> RollingHash:
        """Hash *text* per Unicode scalar value."""
        return cls.from_sequence(text, params)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview, params: HashParams = DEFAULT_PARAMS) -> RollingHash:
        """Hash *data* per byte (differs from ``from_text`` for multi-byte encodings)."""
        return cls.from_sequence(bytes(data), params)

    # -- Queries --------------------------------------------------------------

    @property
    def params(self) -> HashParams:
        return self._params

    def current_hash(self) -> int:
        """Current hash as a plain int residue."""
        return self._hash.value

    def window(self) -> tuple[Element, ...]:
        """Current window contents, front first."""
        return tuple(self._window)

    def power(self, k: int) -> int:
        """``BASE^k mod MOD``, extending the table if needed."""
        if k < 0:
            raise ValueError("power index must be non-negative")
        self._grow_powers(k + 1)
        return self._powers[k].value

    def __len__(self) -> int:
        return len(self._window)

    def __repr__(self) -> str:
        return (
            f"RollingHash(len={len(self._window)}, hash={self._hash.value}, "
            f"base={self._params.base}, modulus={self._params.modulus})"
        )

    # -- Mutations ------------------------------------------------------------

    def append_back(self, x: Element) -> None:
        """Push *x* as the newest element: ``hash = hash*BASE + x``."""
        code = self._params.residue(element_code(x))
        self._window.append(x)
        self._hash = self._hash.mul(self._base).add(code)
        self._grow_powers(len(self._window) + 1)

    def remove_front(self) -> None:
        """Drop the oldest element: ``hash = hash - front*BASE^(len-1)``."""
        if not self._window:
            return
        front = self._window[0]
        factor = self._powers[len(self._window) - 1]
        self._hash = self._hash.sub(factor.mul(self._params.residue(element_code(front))))
        self._window.popleft()

    def remove_back(self) -> None:
        """Drop the newest element: ``hash = (hash - back) / BASE``."""
        if not self._window:
            return
        back = self._window[-1]
        # dividing by BASE == multiplying by BASE^-1
        self._hash = self._hash.sub(self._params.residue(element_code(back))).mul(self._base_inverse)
        self._window.pop()

    def append_front(self, x: Element) -> None:
        """Push *x* as the oldest element: ``hash = hash + x*BASE^len``."""
        code = self._params.residue(element_code(x))
        factor = self._powers[len(self._window)]
        self._hash = self._hash.add(factor.mul(code))
        self._window.appendleft(x)
        self._grow_powers(len(self._window) + 1)

    # -- Conveniences ---------------------------------------------------------

    def extend_back(self, items: Iterable[Element]) -> None:
        for x in items:
            self.append_back(x)

    def slide(self, x: Element) -> int:
        """Shift a fixed-size window by one: drop the front, append *x*. Returns the new hash."""
        self.remove_front()
        self.append_back(x)
        return self._hash.value

    def clear(self) -> None:
        """Empty the window. The power table is kept."""
        self._window.clear()
        self._hash = self._params.zero()

    # -- Introspection --------------------------------------------------------

    def snapshot(self) -> RollingHashState:
        return RollingHashState(
            window=tuple(self._window),
            hash_value=self._hash.value,
            powers=tuple(p.value for p in self._powers),
            base=self._params.base,
            modulus=self._params.modulus,
        )

    def check_invariants(self) -> None:
        """Recheck every invariant from scratch (O(len)). Raises on violation."""
        violations = check_all(self.snapshot())
        if violations:
            raise InvariantViolationError(violations)

    # -- Internals ------------------------------------------------------------

    def _grow_powers(self, needed: int) -> None:
        powers = self._powers
        while len(powers) < needed:
            powers.append(powers[-1].mul(self._base))
