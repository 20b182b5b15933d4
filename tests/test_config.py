"""Tests for rollhash/config.py: YAML / mapping configuration."""

from pathlib import Path

import pytest

from rollhash import (
    DEFAULT_PARAMS,
    ChunkerConfig,
    ConfigError,
    HashParams,
    chunker_config_from_mapping,
    load_chunker_config,
    load_params,
    params_from_mapping,
)

EXAMPLE_CONFIG = Path(__file__).resolve().parents[1] / "rollhash.example.yaml"


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "rollhash.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestParamsFromMapping:
    def test_empty_is_default(self):
        assert params_from_mapping({}) == DEFAULT_PARAMS

    def test_override(self):
        assert params_from_mapping({"base": 31, "modulus": 1009}) == HashParams(31, 1009)

    def test_partial(self):
        assert params_from_mapping({"base": 131}) == HashParams(131, 1_000_000_007)

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="unknown rolling_hash keys: mod"):
            params_from_mapping({"mod": 7})

    def test_non_int(self):
        with pytest.raises(ConfigError, match="base must be an integer"):
            params_from_mapping({"base": "257"})

    def test_bool_rejected(self):
        with pytest.raises(ConfigError):
            params_from_mapping({"base": True})

    def test_invalid_params_wrapped(self):
        with pytest.raises(ConfigError, match="modulus_not_prime") as excinfo:
            params_from_mapping({"modulus": 1_000_000_006})
        assert excinfo.value.__cause__ is not None


class TestChunkerFromMapping:
    def test_empty_is_default(self):
        assert chunker_config_from_mapping({}) == ChunkerConfig()

    def test_override_with_params(self):
        params = HashParams(31, 1009)
        config = chunker_config_from_mapping({"min_size": 64, "window_size": 16, "fixed_size": True}, params)
        assert config.min_size == 64
        assert config.window_size == 16
        assert config.fixed_size is True
        assert config.params == params

    def test_fixed_size_must_be_bool(self):
        with pytest.raises(ConfigError, match="fixed_size"):
            chunker_config_from_mapping({"fixed_size": "yes"})

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="unknown chunking keys"):
            chunker_config_from_mapping({"params": {}})

    def test_invalid_sizes_wrapped(self):
        with pytest.raises(ConfigError, match="chunk_sizes_unordered"):
            chunker_config_from_mapping({"max_size": 100})


class TestLoadParams:
    def test_bare_mapping(self, tmp_path):
        path = _write(tmp_path, "base: 31\nmodulus: 1009\n")
        assert load_params(path) == HashParams(31, 1009)

    def test_nested_section(self, tmp_path):
        path = _write(tmp_path, "rolling_hash:\n  base: 31\n  modulus: 1009\nchunking:\n  magic: 7\n")
        assert load_params(str(path)) == HashParams(31, 1009)

    def test_empty_file_is_default(self, tmp_path):
        assert load_params(_write(tmp_path, "")) == DEFAULT_PARAMS

    def test_empty_section_is_default(self, tmp_path):
        assert load_params(_write(tmp_path, "rolling_hash:\n")) == DEFAULT_PARAMS

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="cannot read config"):
            load_params(tmp_path / "missing.yaml")

    def test_bad_yaml(self, tmp_path):
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_params(_write(tmp_path, "base: [1, 2\n"))

    def test_not_a_mapping(self, tmp_path):
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_params(_write(tmp_path, "- 1\n- 2\n"))

    def test_section_not_a_mapping(self, tmp_path):
        with pytest.raises(ConfigError, match="rolling_hash must be a mapping"):
            load_params(_write(tmp_path, "rolling_hash: 5\n"))


class TestLoadChunkerConfig:
    def test_sections(self, tmp_path):
        path = _write(
            tmp_path,
            "rolling_hash:\n  base: 31\n  modulus: 1009\n"
            "chunking:\n  window_size: 16\n  min_size: 64\n  target_size: 256\n  max_size: 1024\n",
        )
        config = load_chunker_config(path)
        assert config == ChunkerConfig(
            window_size=16, min_size=64, target_size=256, max_size=1024, params=HashParams(31, 1009)
        )

    def test_missing_sections_default(self, tmp_path):
        assert load_chunker_config(_write(tmp_path, "{}\n")) == ChunkerConfig()

    def test_example_file(self):
        assert load_params(EXAMPLE_CONFIG) == DEFAULT_PARAMS
        assert load_chunker_config(EXAMPLE_CONFIG) == ChunkerConfig()
