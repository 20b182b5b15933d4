"""Content-defined chunking driven by a sliding ``RollingHash`` window.

Starting ``min_size`` bytes into each chunk, a ``window_size``-byte window
slides forward one byte at a time; the chunk ends where the window ends once
``hash % target_size == magic``, or when the chunk reaches ``max_size``.
Cut points depend only on nearby content, so an insertion early in a stream
only moves the boundaries around it.

``fixed_size=True`` turns this into plain ``target_size`` blocking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from .core import DEFAULT_PARAMS, HashParams, InvalidParamsError, RollingHash

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChunkerConfig:
    """Chunk size bounds and cut-point condition."""

    window_size: int = 48
    min_size: int = 512
    target_size: int = 8192
    max_size: int = 16 * 1024
    magic: int = 13
    fixed_size: bool = False
    params: HashParams = DEFAULT_PARAMS

    def __post_init__(self) -> None:
        if not 0 < self.window_size <= self.min_size:
            raise InvalidParamsError("window_size_out_of_range")
        if not self.min_size <= self.target_size <= self.max_size:
            raise InvalidParamsError("chunk_sizes_unordered")
        if not 0 <= self.magic < self.target_size:
            raise InvalidParamsError("magic_out_of_range")


def _next_boundary(data: bytes | bytearray, start: int, config: ChunkerConfig) -> int:
    """End offset of the chunk beginning at *start*. Looks at most ``max_size`` bytes ahead."""
    n = len(data)
    if config.fixed_size:
        return min(start + config.target_size, n)
    if n - start <= config.min_size:
        return n

    cur = start + config.min_size
    rh = RollingHash.from_bytes(data[cur - config.window_size:cur], config.params)
    while True:
        if cur - start >= config.max_size:
            break
        if rh.current_hash() % config.target_size == config.magic:
            break
        if cur >= n:
            break
        rh.slide(data[cur])
        cur += 1
    return cur


def chunk_boundaries(data: bytes | bytearray | memoryview, config: ChunkerConfig = ChunkerConfig()) -> list[int]:
    """End offsets (exclusive) of every chunk of *data*; the last is ``len(data)``."""
    buf = bytes(data)
    bounds: list[int] = []
    start = 0
    while start < len(buf):
        start = _next_boundary(buf, start, config)
        bounds.append(start)
    return bounds


def iter_chunks(stream: Iterable[bytes], config: ChunkerConfig = ChunkerConfig()) -> Iterator[bytes]:
    """Chunk a stream of byte blocks.

    Yields exactly the chunks ``chunk_boundaries`` would produce for the
    concatenated stream, holding about ``max_size`` bytes (plus one block) in memory.
    """
    buf = bytearray()
    emitted = 0
    offset = 0
    blocks = iter(stream)
    exhausted = False
    while True:
        while not exhausted and len(buf) < config.max_size:
            block = next(blocks, None)
            if block is None:
                exhausted = True
            else:
                buf += block
        if not buf:
            break
        cut = _next_boundary(buf, 0, config)
        chunk = bytes(buf[:cut])
        del buf[:cut]
        logger.debug("chunk %d: offset=%d size=%d", emitted, offset, len(chunk))
        offset += len(chunk)
        emitted += 1
        yield chunk
    logger.debug("chunking finished: %d chunks", emitted)
