from __future__ import annotations

import json

from rollhash import HashParams, RollingHash


def test_find_collision_small_modulus() -> None:
    from tools.find_hash_collision import find_collision

    params = HashParams(31, 1009)
    found = find_collision(params, length=8, max_iterations=2000, seed=1)

    assert found is not None
    assert found.first != found.second
    assert len(found.first) == len(found.second) == 8
    assert RollingHash.from_text(found.first, params).current_hash() == found.hash_value
    assert RollingHash.from_text(found.second, params).current_hash() == found.hash_value
    assert found.iterations <= 2000


def test_find_collision_is_reproducible() -> None:
    from tools.find_hash_collision import find_collision

    params = HashParams(31, 1009)
    assert find_collision(params, length=8, max_iterations=2000, seed=42) == find_collision(
        params, length=8, max_iterations=2000, seed=42
    )


def test_find_collision_budget_exhausted() -> None:
    from tools.find_hash_collision import find_collision

    assert find_collision(HashParams(), length=16, max_iterations=1, seed=0) is None


def test_main_reports_json(tmp_path, capsys) -> None:
    from tools.find_hash_collision import main

    cfg = tmp_path / "hash.yaml"
    cfg.write_text("base: 31\nmodulus: 1009\n", encoding="utf-8")

    rc = main(["--config", str(cfg), "--length", "6", "--max-iterations", "5000", "--seed", "3"])

    assert rc == 0
    report = json.loads(capsys.readouterr().out)
    assert report["found"] is True
    assert report["params"] == {"base": 31, "modulus": 1009}
    assert report["first"] != report["second"]


def test_main_not_found_exit_code(capsys) -> None:
    from tools.find_hash_collision import main

    rc = main(["--length", "10", "--max-iterations", "1"])

    assert rc == 1
    assert json.loads(capsys.readouterr().out)["found"] is False


def test_main_bad_config(tmp_path, capsys) -> None:
    from tools.find_hash_collision import main

    cfg = tmp_path / "hash.yaml"
    cfg.write_text("modulus: 1000\n", encoding="utf-8")

    assert main(["--config", str(cfg)]) == 2
    assert "modulus_not_prime" in capsys.readouterr().err


def test_main_bad_length(capsys) -> None:
    from tools.find_hash_collision import main

    assert main(["--length", "0"]) == 2
    assert "length must be positive" in capsys.readouterr().err
