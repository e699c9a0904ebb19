# tests/unit/storage/test_unit_reader.py — v1
"""Tests for storage/reader.py — gzip JSON blockmap loading."""

from __future__ import annotations

import gzip
from pathlib import Path

import pytest

from blockverify.storage.reader import (
    BlockmapFormatError,
    load_artifact,
    load_blockmap,
    write_blockmap,
)


class TestLoadBlockmap:
    def test_loads_document(self, tmp_path: Path, blockmap_writer, sample_entry):
        path = blockmap_writer(tmp_path / "app.exe.blockmap", {"version": "2", "files": [sample_entry]})
        doc = load_blockmap(path)
        assert doc["version"] == "2"
        assert doc["files"][0]["sizes"] == [100, 200, 300]

    def test_written_blockmap_is_readable(self, tmp_path: Path, sample_entry):
        path = tmp_path / "out" / "app.exe.blockmap"
        write_blockmap({"version": "2", "files": [sample_entry]}, path)
        assert gzip.decompress(path.read_bytes()).startswith(b"{")
        assert load_blockmap(path)["files"][0]["checksums"] == sample_entry["checksums"]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_blockmap(tmp_path / "missing.blockmap")

    def test_not_gzip(self, tmp_path: Path):
        path = tmp_path / "plain.blockmap"
        path.write_text('{"version": "2"}')
        with pytest.raises(BlockmapFormatError, match="not a gzip stream"):
            load_blockmap(path)

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "broken.blockmap"
        path.write_bytes(gzip.compress(b"{not json"))
        with pytest.raises(BlockmapFormatError, match="invalid JSON"):
            load_blockmap(path)

    def test_not_utf8(self, tmp_path: Path):
        path = tmp_path / "latin.blockmap"
        path.write_bytes(gzip.compress(b'{"name": "\xe9"}'))
        with pytest.raises(BlockmapFormatError, match="not UTF-8"):
            load_blockmap(path)

    def test_top_level_must_be_object(self, tmp_path: Path):
        path = tmp_path / "list.blockmap"
        path.write_bytes(gzip.compress(b"[1, 2]"))
        with pytest.raises(BlockmapFormatError, match="expected a JSON object"):
            load_blockmap(path)

    def test_format_error_is_value_error(self):
        assert issubclass(BlockmapFormatError, ValueError)


class TestLoadArtifact:
    def test_reads_bytes(self, tmp_path: Path, artifact_bytes: bytes):
        path = tmp_path / "app.exe"
        path.write_bytes(artifact_bytes)
        assert load_artifact(path) == artifact_bytes
