# src/storage/layout.py — v1
"""Path conventions for artifacts and their blockmaps.

A blockmap lives next to its artifact, named after it with an extra
suffix: ``app-1.2.0.exe`` → ``app-1.2.0.exe.blockmap``.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_BLOCKMAP_SUFFIX = ".blockmap"


def blockmap_path_for(artifact: Path, suffix: str = DEFAULT_BLOCKMAP_SUFFIX) -> Path:
    """Return the sibling blockmap path for an artifact."""
    return artifact.with_name(f"{artifact.name}{suffix}")
