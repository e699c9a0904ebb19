# src/core/document.py — v1
"""Decode a generic blockmap document into typed metadata.

The decoded JSON is a plain mapping of dynamically-typed values. Every
field is read through an explicit accessor that either returns the
expected type or raises InvalidMetadataError; nothing is cast blindly.

JSON producers do not reliably preserve integer typing, so numbers may
arrive as floats. Integral floats are coerced losslessly; anything else
is rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from blockverify.core.models import BlockmapDocument, BlockMetadata

logger = logging.getLogger(__name__)

SUPPORTED_VERSION = "2"


class InvalidMetadataError(ValueError):
    """Raised when a file entry is structurally malformed.

    Never escapes the verifier or differencer: both turn it into an
    Invalid outcome.
    """


def as_int(value: Any, field: str) -> int:
    """Return value as an int, accepting integral floats."""
    if isinstance(value, bool):
        raise InvalidMetadataError(f"{field} is not an integer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidMetadataError(f"{field} is not an integer: {value!r}")


def require_sequence(entry: Mapping[str, Any], key: str) -> list[Any]:
    value = entry.get(key)
    if not isinstance(value, list):
        raise InvalidMetadataError(f"'{key}' is not a valid array")
    return value


def read_offset(entry: Mapping[str, Any]) -> int:
    """Start offset of the first block.

    Many blockmaps omit a zero offset, so an absent or non-integral value
    means 0 rather than an error.
    """
    try:
        offset = as_int(entry.get("offset", 0), "offset")
    except InvalidMetadataError:
        return 0
    return offset if offset >= 0 else 0


def read_metadata(entry: Mapping[str, Any]) -> BlockMetadata:
    """Decode one file entry into BlockMetadata.

    Raises:
        InvalidMetadataError: If checksums/sizes are missing, not arrays,
            of different lengths, or hold values of the wrong type.
    """
    checksums = require_sequence(entry, "checksums")
    sizes = require_sequence(entry, "sizes")
    if len(checksums) != len(sizes):
        raise InvalidMetadataError(
            "The lengths of 'checksums' and 'sizes' are not the same"
        )

    for i, checksum in enumerate(checksums):
        if not isinstance(checksum, str):
            raise InvalidMetadataError(
                f"'checksums' contains a non-string value at index {i}"
            )

    int_sizes: list[int] = []
    for i, size in enumerate(sizes):
        n = as_int(size, f"'sizes'[{i}]")
        if n <= 0:
            raise InvalidMetadataError(
                f"'sizes' contains a non-positive size at index {i}"
            )
        int_sizes.append(n)

    name = entry.get("name")
    return BlockMetadata(
        name=name if isinstance(name, str) else None,
        offset=read_offset(entry),
        checksums=list(checksums),
        sizes=int_sizes,
    )


def first_entry(document: Mapping[str, Any]) -> Mapping[str, Any] | None:
    """Return the raw first file entry, or None when there is nothing to decode."""
    files = document.get("files")
    if not isinstance(files, list) or not files:
        return None
    if len(files) > 1:
        logger.warning("More than 1 file in blockmap (%d); using the first", len(files))
    entry = files[0]
    if not isinstance(entry, Mapping):
        return None
    return entry


def parse_document(document: Mapping[str, Any]) -> BlockmapDocument | None:
    """Decode a blockmap document into its typed form.

    Returns:
        BlockmapDocument holding the first file entry, or None if the
        document has no usable metadata (a no-op, not an error).

    Raises:
        InvalidMetadataError: If the first file entry is malformed.
    """
    version = document.get("version")
    supported = version is None or version == SUPPORTED_VERSION
    if not supported:
        logger.warning("Version %s is not supported", version)

    entry = first_entry(document)
    if entry is None:
        logger.debug("Blockmap has no file metadata; nothing to decode")
        return None

    return BlockmapDocument(
        version=None if version is None else str(version),
        version_supported=supported,
        files=[read_metadata(entry)],
    )


def ensure_metadata(metadata: BlockMetadata | Mapping[str, Any]) -> BlockMetadata:
    """Return typed metadata, decoding a raw file entry if necessary.

    Raises:
        InvalidMetadataError: If the layout is malformed.
    """
    if isinstance(metadata, BlockMetadata):
        if len(metadata.checksums) != len(metadata.sizes):
            raise InvalidMetadataError(
                "The lengths of 'checksums' and 'sizes' are not the same"
            )
        return metadata
    return read_metadata(metadata)
