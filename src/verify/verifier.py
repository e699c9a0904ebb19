# src/verify/verifier.py — v1
"""Verify an artifact's bytes against its blockmap.

Blocks are walked in declared order and each digest is recomputed and
compared with the stored checksum. The first mismatch stops the walk.

A block whose end reaches or passes the end of the buffer stops the walk
as well; the blocks before it are the complete result. Note the guard is
`end >= len(data)`, so a final block ending exactly at the buffer end is
not hashed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from blockverify.core.checksum import checksum
from blockverify.core.document import InvalidMetadataError, ensure_metadata
from blockverify.core.models import BlockMetadata, Failed, Invalid, Ok
from blockverify.core.offsets import iter_blocks

logger = logging.getLogger(__name__)


def verify(
    data: bytes,
    metadata: BlockMetadata | Mapping[str, Any],
) -> Ok | Invalid | Failed:
    """Verify data block by block.

    Args:
        data: Full artifact contents.
        metadata: Typed metadata or the raw first file entry of a blockmap.

    Returns:
        Ok with the declared block count, Invalid if the metadata is
        malformed (checked before any hashing), or Failed on the first
        digest mismatch.
    """
    try:
        metadata = ensure_metadata(metadata)
    except InvalidMetadataError as exc:
        return Invalid(reason=str(exc))

    data_size = len(data)
    hashed = 0
    for block in iter_blocks(metadata):
        if block.end >= data_size:
            logger.info(
                "Block %d (offset=%d, len=%d) reaches the end of data (%d bytes); "
                "stopping after %d blocks",
                block.index, block.offset, block.size, data_size, hashed,
            )
            break

        digest = checksum(data, block.offset, block.size)
        if digest != block.checksum:
            logger.debug(
                "Block %d digest mismatch: computed=%s expected=%s",
                block.index, digest, block.checksum,
            )
            return Failed(
                reason=(
                    f"The digest of block (offset = {block.offset}, len = {block.size}) "
                    f"does NOT match checksum {block.checksum}"
                ),
                offset=block.offset,
                size=block.size,
                expected_checksum=block.checksum,
            )
        hashed += 1

    logger.debug("Hashed %d of %d declared blocks", hashed, metadata.block_count)
    return Ok(blocks_verified=metadata.block_count)
