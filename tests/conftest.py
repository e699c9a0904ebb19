# tests/conftest.py — v1
"""Shared test fixtures for unit tests.

Provides a deterministic artifact buffer, blockmap entries whose checksums
are computed independently of the package, and a gzip blockmap writer.
"""

from __future__ import annotations

import base64
import hashlib
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from blockverify.storage.reader import write_blockmap


def reference_checksum(data: bytes, offset: int, size: int) -> str:
    """BLAKE2b-144 + base64, computed without the package under test."""
    digest = hashlib.blake2b(data[offset : offset + size], digest_size=18).digest()
    return base64.b64encode(digest).decode("ascii")


# === FIXTURES: Sample data ===


@pytest.fixture
def artifact_bytes() -> bytes:
    """1024-byte artifact with non-repeating block contents."""
    return bytes((i * 7 + i // 256) % 256 for i in range(1024))


@pytest.fixture
def entry_factory() -> Callable[..., dict[str, Any]]:
    """Build a raw file entry whose checksums match data."""

    def _make(data: bytes, sizes: list[int], offset: int = 0, name: str = "app.exe") -> dict[str, Any]:
        checksums = []
        pos = offset
        for size in sizes:
            checksums.append(reference_checksum(data, pos, size))
            pos += size
        entry: dict[str, Any] = {"name": name, "checksums": checksums, "sizes": list(sizes)}
        if offset:
            entry["offset"] = offset
        return entry

    return _make


@pytest.fixture
def sample_entry(artifact_bytes: bytes, entry_factory) -> dict[str, Any]:
    """Three blocks (100, 200, 300 bytes) ending well before the buffer end."""
    return entry_factory(artifact_bytes, [100, 200, 300])


@pytest.fixture
def blockmap_writer() -> Callable[[Path, dict[str, Any]], Path]:
    """Write a document as a gzip-compressed JSON blockmap."""

    def _write(path: Path, document: dict[str, Any]) -> Path:
        write_blockmap(document, path)
        return path

    return _write


# === FIXTURES: Logging isolation ===


@pytest.fixture(autouse=True)
def _reset_blockverify_logger():
    """Drop handlers installed by setup_logging() between tests."""
    yield
    root = logging.getLogger("blockverify")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
