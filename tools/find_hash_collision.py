#!/usr/bin/env python3
"""
Search for two distinct same-length strings with equal rolling hashes.

The hash is a checksum over a public ~30-bit modulus, so collisions between
random inputs show up after about sqrt(MOD) samples (birthday bound). This
tool makes that concrete: it samples random alphanumeric strings, remembers
each hash, and stops at the first repeat produced by a different string.

Example:
  python3 tools/find_hash_collision.py --length 100 --seed 7
  python3 tools/find_hash_collision.py --config hash.yaml --max-iterations 200000
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import string
import sys
from dataclasses import asdict, dataclass
from pathlib import Path

from rollhash import ConfigError, HashParams, RollingHash, load_params

logger = logging.getLogger("find_hash_collision")

ALPHABET = string.ascii_letters + string.digits


@dataclass(frozen=True)
class Collision:
    first: str
    second: str
    hash_value: int
    iterations: int


def random_string(rng: random.Random, length: int, alphabet: str = ALPHABET) -> str:
    return "".join(rng.choice(alphabet) for _ in range(length))


def find_collision(
    params: HashParams,
    *,
    length: int,
    max_iterations: int,
    seed: int | None = None,
    progress_every: int = 100_000,
) -> Collision | None:
    """Sample up to *max_iterations* strings; return the first collision or None."""
    if length < 1:
        raise ValueError("length must be positive")
    rng = random.Random(seed)
    seen: dict[int, str] = {}
    for i in range(1, max_iterations + 1):
        s = random_string(rng, length)
        h = RollingHash.from_text(s, params).current_hash()
        prev = seen.get(h)
        if prev is not None and prev != s:
            return Collision(first=prev, second=s, hash_value=h, iterations=i)
        seen[h] = s
        if progress_every and i % progress_every == 0:
            logger.info("iterations: %d (distinct hashes: %d)", i, len(seen))
    return None


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Find a rolling hash collision between random strings.")
    p.add_argument("--length", type=int, default=100, help="Length of sampled strings (default: 100)")
    p.add_argument("--max-iterations", type=int, default=1_000_000, help="Sample budget (default: 1000000)")
    p.add_argument("--seed", type=int, default=None, help="RNG seed for reproducible searches")
    p.add_argument("--config", type=Path, default=None, help="YAML file with base/modulus (default: 257 / 1e9+7)")
    p.add_argument("--verbose", action="store_true", help="Log progress to stderr")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format="%(message)s")

    try:
        params = load_params(args.config) if args.config is not None else HashParams()
        collision = find_collision(
            params, length=int(args.length), max_iterations=int(args.max_iterations), seed=args.seed,
        )
    except (ConfigError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    report: dict[str, object] = {"params": params.to_dict(), "length": int(args.length)}
    if collision is None:
        report["found"] = False
        report["iterations"] = int(args.max_iterations)
        print(json.dumps(report, indent=2, sort_keys=True))
        return 1

    report["found"] = True
    report.update(asdict(collision))
    print(json.dumps(report, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
