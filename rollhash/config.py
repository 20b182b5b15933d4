"""Load hash and chunking parameters from mappings or YAML files.

Accepted YAML shapes::

    base: 257
    modulus: 1000000007

or nested under a section key::

    rolling_hash:
      base: 257
      modulus: 1000000007
    chunking:
      window_size: 48
      min_size: 512
      target_size: 8192
      max_size: 16384
      magic: 13

Missing keys fall back to the defaults.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from .chunking import ChunkerConfig
from .core import ConfigError, HashParams, InvalidParamsError

logger = logging.getLogger(__name__)

PARAMS_SECTION = "rolling_hash"
CHUNKING_SECTION = "chunking"

_PARAM_KEYS: tuple[str, ...] = ("base", "modulus")
_CHUNKER_INT_KEYS: tuple[str, ...] = tuple(
    f.name for f in fields(ChunkerConfig) if f.name not in ("fixed_size", "params")
)


def _require_int(obj: Any, *, name: str) -> int:
    if isinstance(obj, bool) or not isinstance(obj, int):
        raise ConfigError(f"{name} must be an integer, got {type(obj).__name__}")
    return obj


def _reject_unknown(mapping: Mapping[str, Any], allowed: tuple[str, ...], *, where: str) -> None:
    unknown = sorted(set(mapping) - set(allowed))
    if unknown:
        raise ConfigError(f"unknown {where} keys: {', '.join(map(str, unknown))}")


def params_from_mapping(mapping: Mapping[str, Any]) -> HashParams:
    """Build ``HashParams`` from a ``{base, modulus}`` mapping."""
    _reject_unknown(mapping, _PARAM_KEYS, where=PARAMS_SECTION)
    kwargs = {key: _require_int(mapping[key], name=key) for key in _PARAM_KEYS if key in mapping}
    try:
        return HashParams(**kwargs)
    except InvalidParamsError as exc:
        raise ConfigError(str(exc)) from exc


def chunker_config_from_mapping(
    mapping: Mapping[str, Any], params: HashParams | None = None
) -> ChunkerConfig:
    """Build ``ChunkerConfig`` from a mapping of its size fields (+ ``fixed_size``)."""
    _reject_unknown(mapping, _CHUNKER_INT_KEYS + ("fixed_size",), where=CHUNKING_SECTION)
    kwargs: dict[str, Any] = {
        key: _require_int(mapping[key], name=key) for key in _CHUNKER_INT_KEYS if key in mapping
    }
    if "fixed_size" in mapping:
        if not isinstance(mapping["fixed_size"], bool):
            raise ConfigError("fixed_size must be a boolean")
        kwargs["fixed_size"] = mapping["fixed_size"]
    if params is not None:
        kwargs["params"] = params
    try:
        return ChunkerConfig(**kwargs)
    except InvalidParamsError as exc:
        raise ConfigError(str(exc)) from exc


def _load_yaml_mapping(path: Path) -> Mapping[str, Any]:
    try:
        obj = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
    if obj is None:
        return {}
    if not isinstance(obj, Mapping):
        raise ConfigError(f"config {path} must be a mapping")
    return obj


def _section(doc: Mapping[str, Any], key: str, *, bare_ok: bool) -> Mapping[str, Any]:
    if key in doc:
        section = doc[key]
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            raise ConfigError(f"{key} must be a mapping")
        return section
    if bare_ok and not (set(doc) & {PARAMS_SECTION, CHUNKING_SECTION}):
        return doc
    return {}


def load_params(path: str | Path) -> HashParams:
    """Read ``HashParams`` from a YAML file (bare or under ``rolling_hash:``)."""
    doc = _load_yaml_mapping(Path(path))
    params = params_from_mapping(_section(doc, PARAMS_SECTION, bare_ok=True))
    logger.debug("loaded hash params from %s: base=%d modulus=%d", path, params.base, params.modulus)
    return params


def load_chunker_config(path: str | Path) -> ChunkerConfig:
    """Read ``ChunkerConfig`` from the ``chunking:`` section of a YAML file.

    Hash parameters come from the ``rolling_hash:`` section of the same file.
    """
    doc = _load_yaml_mapping(Path(path))
    params = params_from_mapping(_section(doc, PARAMS_SECTION, bare_ok=False))
    config = chunker_config_from_mapping(_section(doc, CHUNKING_SECTION, bare_ok=False), params)
    logger.debug("loaded chunker config from %s: %s", path, config)
    return config
