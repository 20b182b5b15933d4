"""`rollhash`: a double-ended polynomial rolling hash.

The hash of a window is ``sum(window[i] * BASE^(len-1-i)) mod MOD`` and is kept
up to date in O(1) amortized time as elements are added or removed at either
end. Defaults: ``BASE = 257``, ``MOD = 1_000_000_007``.

This is a checksum, not a cryptographic digest: BASE and MOD are small and
public, and collisions between chosen inputs are easy to find.
"""

from .chunking import ChunkerConfig, chunk_boundaries, iter_chunks
from .config import chunker_config_from_mapping, load_chunker_config, load_params, params_from_mapping
from .core import (
    DEFAULT_PARAMS,
    ConfigError,
    HashParams,
    InvalidElementError,
    InvalidParamsError,
    InvariantViolationError,
    Modular,
    ModulusMismatchError,
    RollingHash,
    RollingHashError,
    RollingHashState,
)
from .search import find_all, find_first, window_hashes

__version__ = "0.1.0"

__all__ = [
    "RollingHash",
    "RollingHashState",
    "Modular",
    "HashParams",
    "DEFAULT_PARAMS",
    "find_all",
    "find_first",
    "window_hashes",
    "ChunkerConfig",
    "chunk_boundaries",
    "iter_chunks",
    "load_params",
    "load_chunker_config",
    "chunker_config_from_mapping",
    "params_from_mapping",
    "RollingHashError",
    "InvalidParamsError",
    "ModulusMismatchError",
    "InvalidElementError",
    "InvariantViolationError",
    "ConfigError",
]
