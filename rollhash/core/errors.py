"""Exception types for the rolling hash.

The four window mutations never raise; these cover construction-time
validation, mixed-modulus arithmetic and the opt-in invariant check
(``RollingHash.check_invariants()``).
"""

from __future__ import annotations


class RollingHashError(Exception):
    """Base class for every error raised by `rollhash`."""


class InvalidParamsError(RollingHashError):
    """Raised when BASE/MOD (or chunking parameters) fail validation."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid params: {reason}")


class ModulusMismatchError(RollingHashError):
    """Raised when two modular values with different moduli are combined."""


class InvalidElementError(RollingHashError):
    """Raised when a window element is not an in-range int or a single character."""


class InvariantViolationError(RollingHashError):
    """Raised when engine state violates one or more invariants."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")


class ConfigError(RollingHashError):
    """Raised when a configuration file or mapping cannot be turned into params."""
