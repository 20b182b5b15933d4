"""`rollhash.core`: modular arithmetic primitive and the rolling hash engine.

Public API:
- `Modular` (residue type; `add/sub/mul/div`)
- `HashParams` / `DEFAULT_PARAMS` (BASE and MOD, validated on construction)
- `RollingHash` (`append_back`, `remove_front`, `remove_back`, `append_front`)
- `check_all(state)` invariant checks over a `RollingHashState` snapshot
"""

from .engine import RollingHash
from .errors import (
    ConfigError,
    InvalidElementError,
    InvalidParamsError,
    InvariantViolationError,
    ModulusMismatchError,
    RollingHashError,
)
from .invariants import INVARIANT_REGISTRY, check_all
from .modular import Modular
from .params import DEFAULT_PARAMS, HashParams, validate_params
from .state import RollingHashState, element_code, recompute_hash

__all__ = [
    "RollingHash",
    "Modular",
    "HashParams",
    "DEFAULT_PARAMS",
    "validate_params",
    "RollingHashState",
    "element_code",
    "recompute_hash",
    "INVARIANT_REGISTRY",
    "check_all",
    "RollingHashError",
    "InvalidParamsError",
    "ModulusMismatchError",
    "InvalidElementError",
    "InvariantViolationError",
    "ConfigError",
]
