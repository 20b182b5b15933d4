"""Pure integer arithmetic for the rolling hash.

Every function is stateless and operates on plain Python ints.

Python ints never wrap, but the reference instantiation is defined over an
unsigned 64-bit accumulator, so parameters are also checked against that width
(``fits_accumulator``) to keep hashes interoperable with fixed-width
implementations.
"""

from __future__ import annotations

# Reference instantiation
DEFAULT_BASE: int = 257
DEFAULT_MODULUS: int = 1_000_000_007
ACCUMULATOR_BITS: int = 64
U64_MAX: int = (1 << ACCUMULATOR_BITS) - 1

# Deterministic Miller-Rabin witnesses for n < 3_317_044_064_679_887_385_961_981
_MR_WITNESSES: tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


# -- Exponentiation / inverse ------------------------------------------------

def pow_mod(base: int, exponent: int, modulus: int) -> int:
    """``base^exponent mod modulus`` by binary exponentiation.

    Scans the exponent from the least significant bit upward, squaring the
    base each step and multiplying it into the accumulator on set bits.
    """
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    result = 1 % modulus
    b = base % modulus
    e = exponent
    while e > 0:
        if e & 1:
            result = (result * b) % modulus
        b = (b * b) % modulus
        e >>= 1
    return result


def inverse_mod(x: int, modulus: int) -> int:
    """Multiplicative inverse of *x* modulo a prime *modulus* (Fermat).

    Precondition: ``x % modulus != 0``. The zero residue has no inverse; the
    precondition is not checked and the result for it is unspecified.
    """
    return pow_mod(x, modulus - 2, modulus)


# -- Parameter validation helpers --------------------------------------------

def gcd(a: int, b: int) -> int:
    """Greatest common divisor (Euclid)."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin primality test for ``n < 3.3e24``."""
    if n < 2:
        return False
    for p in _MR_WITNESSES:
        if n % p == 0:
            return n == p

    d = n - 1
    r = 0
    while d % 2 == 0:
        d //= 2
        r += 1

    for a in _MR_WITNESSES:
        x = pow_mod(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False
    return True


def fits_accumulator(modulus: int, base: int, width_bits: int = ACCUMULATOR_BITS) -> bool:
    """True when one hash step cannot overflow a *width_bits* unsigned accumulator.

    Checks both the residue product ``(MOD-1)^2`` and the append step
    ``(MOD-1)*BASE + (MOD-1)``.
    """
    limit = (1 << width_bits) - 1
    top = modulus - 1
    return top * top <= limit and top * base + top <= limit
