"""Modular value type: a residue in ``[0, modulus)`` closed over ``Z/modulus``.

Values are immutable (frozen dataclass). The modulus is carried alongside the
residue, and every operation reads it from the operands instead of from a global.
Equality, ordering and hashing look at the residue only.

Operands may be another ``Modular`` with the same modulus or a plain ``int``,
which is reduced first. ``+ - * /`` delegate to ``add/sub/mul/div``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .arith import inverse_mod, pow_mod
from .errors import ModulusMismatchError


@dataclass(frozen=True, order=True)
class Modular:
    """A residue ``value`` modulo ``modulus`` with ``0 <= value < modulus``."""

    value: int
    modulus: int = field(compare=False)

    def __post_init__(self) -> None:
        if self.modulus < 1:
            raise ValueError(f"modulus must be positive, got {self.modulus}")
        if not 0 <= self.value < self.modulus:
            raise ValueError(f"residue {self.value} outside [0, {self.modulus})")

    @classmethod
    def of(cls, raw: int, modulus: int) -> Modular:
        """Reduce *raw* modulo *modulus*. Total for any int."""
        return cls(raw % modulus, modulus)

    # -- Coercion -------------------------------------------------------------

    def _coerce(self, other: object) -> Modular | None:
        if isinstance(other, Modular):
            if other.modulus != self.modulus:
                raise ModulusMismatchError(
                    f"cannot combine residues mod {self.modulus} and mod {other.modulus}"
                )
            return other
        if isinstance(other, int):
            return Modular.of(other, self.modulus)
        return None

    def _require(self, other: object) -> Modular:
        rhs = self._coerce(other)
        if rhs is None:
            raise TypeError(f"expected Modular or int, got {type(other).__name__}")
        return rhs

    # -- Named arithmetic -----------------------------------------------------

    def add(self, other: Modular | int) -> Modular:
        rhs = self._require(other)
        return Modular((self.value + rhs.value) % self.modulus, self.modulus)

    def sub(self, other: Modular | int) -> Modular:
        """``(a + MOD - b) mod MOD``; intermediates never go negative."""
        rhs = self._require(other)
        return Modular((self.value + self.modulus - rhs.value) % self.modulus, self.modulus)

    def mul(self, other: Modular | int) -> Modular:
        rhs = self._require(other)
        return Modular((self.value * rhs.value) % self.modulus, self.modulus)

    def div(self, other: Modular | int) -> Modular:
        """``a * inverse(b)``.

        The modulus must be prime. Dividing by the zero residue is a caller
        precondition violation: it is not checked and the result is unspecified.
        """
        rhs = self._require(other)
        return self.mul(rhs.inverse())

    def inverse(self) -> Modular:
        """Fermat inverse ``value^(MOD-2)``; same zero-residue precondition as ``div``."""
        return Modular(inverse_mod(self.value, self.modulus), self.modulus)

    def pow(self, exponent: int) -> Modular:
        return Modular(pow_mod(self.value, exponent, self.modulus), self.modulus)

    # -- Operator sugar -------------------------------------------------------

    def __add__(self, other: object) -> Modular:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.add(rhs)

    __radd__ = __add__

    def __sub__(self, other: object) -> Modular:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.sub(rhs)

    def __rsub__(self, other: object) -> Modular:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.sub(self)

    def __mul__(self, other: object) -> Modular:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.mul(rhs)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Modular:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.div(rhs)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value
