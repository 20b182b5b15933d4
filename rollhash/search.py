"""Rabin-Karp substring search on top of ``RollingHash``.

A fixed-size window slides over the text one element at a time
(``remove_front`` + ``append_back``); only windows whose hash equals the
pattern hash are compared directly, so collisions never produce false matches.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from .core import DEFAULT_PARAMS, HashParams, RollingHash

Text = str | bytes | bytearray | memoryview


def _as_sequence(data: Text) -> Sequence[int] | str:
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected str or bytes-like, got {type(data).__name__}")


def window_hashes(
    seq: Text, size: int, params: HashParams = DEFAULT_PARAMS
) -> Iterator[tuple[int, int]]:
    """Yield ``(start, hash)`` for every full window of *size* elements in *seq*."""
    if size < 0:
        raise ValueError("window size must be non-negative")
    items = _as_sequence(seq)
    n = len(items)
    if size > n:
        return
    if size == 0:
        for start in range(n + 1):
            yield start, 0
        return

    rh = RollingHash.from_sequence(items[:size], params)
    yield 0, rh.current_hash()
    for start in range(1, n - size + 1):
        yield start, rh.slide(items[start + size - 1])


def _iter_matches(text: Text, pattern: Text, params: HashParams) -> Iterator[int]:
    haystack = _as_sequence(text)
    needle = _as_sequence(pattern)
    if isinstance(haystack, str) != isinstance(needle, str):
        raise TypeError("text and pattern must both be str or both be bytes-like")

    m = len(needle)
    target = RollingHash.from_sequence(needle, params).current_hash()
    for start, h in window_hashes(haystack, m, params):
        if h == target and haystack[start:start + m] == needle:
            yield start


def find_all(text: Text, pattern: Text, params: HashParams = DEFAULT_PARAMS) -> list[int]:
    """Every start index where *pattern* occurs in *text* (overlaps included)."""
    return list(_iter_matches(text, pattern, params))


def find_first(text: Text, pattern: Text, params: HashParams = DEFAULT_PARAMS) -> int:
    """First start index of *pattern* in *text*, or -1."""
    return next(_iter_matches(text, pattern, params), -1)
