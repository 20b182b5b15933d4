"""Construction-time constants for a rolling hash: ``BASE`` and ``MOD``.

``HashParams`` validates on construction so that every engine built from it
can rely on:
- ``MOD`` prime (every nonzero residue is invertible, ``remove_back`` works),
- ``0 < BASE < MOD`` and ``gcd(BASE, MOD) == 1`` (``BASE`` is never the zero residue),
- one hash step fits the 64-bit reference accumulator.
"""

from __future__ import annotations

from dataclasses import dataclass

from .arith import DEFAULT_BASE, DEFAULT_MODULUS, fits_accumulator, gcd, is_prime
from .errors import InvalidParamsError
from .modular import Modular


@dataclass(frozen=True)
class HashParams:
    """Polynomial hash parameters shared by every value in one engine."""

    base: int = DEFAULT_BASE
    modulus: int = DEFAULT_MODULUS

    def __post_init__(self) -> None:
        reason = validate_params(self.base, self.modulus)
        if reason is not None:
            raise InvalidParamsError(reason)

    def residue(self, raw: int) -> Modular:
        """Reduce *raw* into this modulus."""
        return Modular.of(raw, self.modulus)

    def base_residue(self) -> Modular:
        return Modular(self.base, self.modulus)

    def zero(self) -> Modular:
        return Modular(0, self.modulus)

    def one(self) -> Modular:
        return Modular(1 % self.modulus, self.modulus)

    def to_dict(self) -> dict[str, int]:
        return {"base": self.base, "modulus": self.modulus}


def validate_params(base: int, modulus: int) -> str | None:
    """Check BASE/MOD. Returns a rejection reason or None."""
    if isinstance(base, bool) or not isinstance(base, int):
        return "base_not_int"
    if isinstance(modulus, bool) or not isinstance(modulus, int):
        return "modulus_not_int"
    if not is_prime(modulus):
        return "modulus_not_prime"
    if not 0 < base < modulus:
        return "base_out_of_range"
    if gcd(base, modulus) != 1:
        return "base_not_coprime"
    if not fits_accumulator(modulus, base):
        return "accumulator_overflow"
    return None


DEFAULT_PARAMS = HashParams()
