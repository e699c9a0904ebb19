# src/diff/differencer.py — v1
"""Compare two blockmaps to estimate how much of a new artifact is unchanged.

A new block is skippable when the old blockmap has a block with the same
checksum AND the same size. If the old blockmap repeats a checksum with
different sizes, the last occurrence wins.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from blockverify.core.document import InvalidMetadataError, ensure_metadata
from blockverify.core.models import BlockMetadata, DiffSummary, Invalid

logger = logging.getLogger(__name__)


def compare(
    old: BlockMetadata | Mapping[str, Any],
    new: BlockMetadata | Mapping[str, Any],
) -> DiffSummary | Invalid:
    """Compute total and skippable bytes of new relative to old.

    Old is validated before new; the first malformed side is reported.
    """
    try:
        old_meta = ensure_metadata(old)
    except InvalidMetadataError as exc:
        logger.debug("Old blockmap is invalid: %s", exc)
        return Invalid(reason=str(exc))
    try:
        new_meta = ensure_metadata(new)
    except InvalidMetadataError as exc:
        logger.debug("New blockmap is invalid: %s", exc)
        return Invalid(reason=str(exc))

    old_sizes = dict(zip(old_meta.checksums, old_meta.sizes))

    total = 0
    skipped = 0
    for digest, size in zip(new_meta.checksums, new_meta.sizes):
        total += size
        if old_sizes.get(digest) == size:
            skipped += size

    summary = DiffSummary(total_bytes=total, skipped_bytes=skipped)
    logger.debug("Compared %d new blocks: %s", new_meta.block_count, summary.format())
    return summary
