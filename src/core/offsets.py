# src/core/offsets.py — v1
"""Reconstruct block byte ranges from a start offset and block sizes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from blockverify.core.models import Block, BlockMetadata


def offset_size_pairs(start: int, sizes: Iterable[int]) -> Iterator[tuple[int, int]]:
    """Yield (offset, size) per block, offsets being a running sum from start.

    Single forward pass; call again with the same inputs to restart.
    """
    offset = start
    for size in sizes:
        yield offset, size
        offset += size


def iter_blocks(metadata: BlockMetadata) -> Iterator[Block]:
    """Yield the blocks of metadata in file order."""
    pairs = offset_size_pairs(metadata.offset, metadata.sizes)
    for index, ((offset, size), checksum) in enumerate(zip(pairs, metadata.checksums)):
        yield Block(index=index, offset=offset, size=size, checksum=checksum)
