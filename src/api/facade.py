# src/api/facade.py — v1
"""Public API facade — file-level entry points for verify and compare.

Usage:
    from blockverify.api.facade import verify_artifact
    outcome = verify_artifact(Path("app-1.2.0.exe"))

Loading happens once, up front; the core then works on in-memory bytes
and decoded documents only.
"""

from __future__ import annotations

import logging
from pathlib import Path

from blockverify.config.settings import Settings
from blockverify.core.document import InvalidMetadataError, parse_document
from blockverify.core.models import (
    BlockmapDocument,
    DiffSummary,
    Failed,
    Invalid,
    Ok,
)
from blockverify.diff.differencer import compare
from blockverify.logging.context import clear_context, set_artifact_context
from blockverify.storage.layout import blockmap_path_for
from blockverify.storage.reader import load_artifact, load_blockmap
from blockverify.verify.verifier import verify

logger = logging.getLogger(__name__)


def verify_artifact(
    artifact: Path,
    settings: Settings | None = None,
) -> Ok | Invalid | Failed | None:
    """Verify an artifact against its sibling blockmap.

    Returns:
        The verification outcome, or None if the blockmap holds no file
        metadata (nothing to verify).

    Raises:
        FileNotFoundError: If the artifact or its blockmap is missing.
        BlockmapFormatError: If the blockmap cannot be decoded.
    """
    settings = settings or Settings()
    blockmap = blockmap_path_for(artifact, settings.blockmap_suffix)

    set_artifact_context(artifact.name, "verify")
    try:
        data = load_artifact(artifact)
        document = load_blockmap(blockmap)
        try:
            parsed = parse_document(document)
        except InvalidMetadataError as exc:
            return Invalid(reason=str(exc))
        if parsed is None:
            logger.info("No file metadata in %s; nothing to verify", blockmap.name)
            return None

        mismatch = _check_version(parsed, settings)
        if mismatch is not None:
            return mismatch

        outcome = verify(data, parsed.metadata)
        logger.info("Verification of %s: %s", artifact.name, outcome.status)
        return outcome
    finally:
        clear_context()


def compare_blockmaps(
    old_blockmap: Path,
    new_blockmap: Path,
    settings: Settings | None = None,
) -> DiffSummary | Invalid | None:
    """Compare two blockmap files.

    Returns:
        DiffSummary, Invalid for the first malformed blockmap (old before
        new), or None if either blockmap holds no file metadata.

    Raises:
        FileNotFoundError: If either blockmap is missing.
        BlockmapFormatError: If either blockmap cannot be decoded.
    """
    settings = settings or Settings()

    set_artifact_context(new_blockmap.name, "compare")
    try:
        documents = []
        for path in (old_blockmap, new_blockmap):
            try:
                parsed = parse_document(load_blockmap(path))
            except InvalidMetadataError as exc:
                return Invalid(reason=str(exc))
            if parsed is None:
                logger.info("No file metadata in %s; nothing to compare", path.name)
                return None
            mismatch = _check_version(parsed, settings)
            if mismatch is not None:
                return mismatch
            documents.append(parsed)

        old, new = documents
        return compare(old.metadata, new.metadata)
    finally:
        clear_context()


def _check_version(document: BlockmapDocument, settings: Settings) -> Invalid | None:
    """Turn an unsupported version into Invalid when configured to be strict."""
    if settings.fail_on_version_mismatch and not document.version_supported:
        return Invalid(reason=f"Version {document.version} is not supported")
    return None
