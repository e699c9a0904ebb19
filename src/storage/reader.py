# src/storage/reader.py — v1
"""Read and write blockmap files and artifact bytes.

A blockmap file is gzip-compressed UTF-8 JSON. Reading stops at the
generic decoded document; turning it into typed metadata is the job of
core.document.
"""

from __future__ import annotations

import gzip
import json
import logging
import zlib
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class BlockmapFormatError(ValueError):
    """Raised when a blockmap file cannot be decoded into a JSON object."""


def load_blockmap(path: Path) -> dict[str, Any]:
    """Decompress and parse a blockmap file.

    Raises:
        FileNotFoundError: If path does not exist.
        BlockmapFormatError: If the file is not gzip, not UTF-8, not JSON,
            or not a JSON object at top level.
    """
    raw = path.read_bytes()
    try:
        text = gzip.decompress(raw).decode("utf-8")
        data = json.loads(text)
    except (OSError, EOFError, zlib.error) as exc:
        raise BlockmapFormatError(f"{path}: not a gzip stream ({exc})") from exc
    except UnicodeDecodeError as exc:
        raise BlockmapFormatError(f"{path}: not UTF-8 ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise BlockmapFormatError(f"{path}: invalid JSON ({exc})") from exc

    if not isinstance(data, dict):
        raise BlockmapFormatError(
            f"{path}: expected a JSON object, got {type(data).__name__}"
        )
    logger.debug("Loaded blockmap %s (%d bytes compressed)", path, len(raw))
    return data


def load_artifact(path: Path) -> bytes:
    """Read the full artifact into memory."""
    data = path.read_bytes()
    logger.debug("Loaded artifact %s (%d bytes)", path, len(data))
    return data


def write_blockmap(document: dict[str, Any], path: Path) -> None:
    """Write a blockmap document as gzip-compressed UTF-8 JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(document, ensure_ascii=False).encode("utf-8")
    path.write_bytes(gzip.compress(payload))
