# tests/unit/storage/test_unit_layout.py — v1
"""Tests for storage/layout.py — blockmap path conventions."""

from __future__ import annotations

from pathlib import Path

from blockverify.storage.layout import DEFAULT_BLOCKMAP_SUFFIX, blockmap_path_for


class TestBlockmapPathFor:
    def test_sibling_with_suffix(self):
        assert blockmap_path_for(Path("/dist/app-1.2.0.exe")) == Path("/dist/app-1.2.0.exe.blockmap")

    def test_custom_suffix(self):
        assert blockmap_path_for(Path("app.AppImage"), ".bmap") == Path("app.AppImage.bmap")

    def test_default_suffix(self):
        assert DEFAULT_BLOCKMAP_SUFFIX == ".blockmap"
