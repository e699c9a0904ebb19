# src/core/models.py — v1
"""Shared Pydantic domain models for blockmaps, verification and diffing.

No module redefines these types — all imports come from core.models.
All models are frozen: they are read-only views over a parsed blockmap.
"""

from __future__ import annotations

import math
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, computed_field


# === BLOCKMAP LAYOUT ===


class BlockMetadata(BaseModel):
    """Block layout of one file entry in a blockmap."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    offset: int = Field(default=0, ge=0)
    checksums: list[str]
    sizes: list[PositiveInt]

    @property
    def block_count(self) -> int:
        return len(self.checksums)


class BlockmapDocument(BaseModel):
    """Decoded top-level blockmap: version plus the file entries it declares."""

    model_config = ConfigDict(frozen=True)

    version: str | None = None
    version_supported: bool = True
    files: list[BlockMetadata] = Field(default_factory=list)

    @property
    def metadata(self) -> BlockMetadata | None:
        """First file entry, the only one that is used."""
        return self.files[0] if self.files else None


class Block(BaseModel):
    """One contiguous byte range of the artifact with its expected digest."""

    model_config = ConfigDict(frozen=True)

    index: int
    offset: int
    size: int
    checksum: str

    @property
    def end(self) -> int:
        return self.offset + self.size


# === VERIFICATION OUTCOME ===


class Ok(BaseModel):
    """Every hashed block matched its stored checksum."""

    model_config = ConfigDict(frozen=True)

    status: Literal["ok"] = "ok"
    blocks_verified: int


class Invalid(BaseModel):
    """Metadata was malformed; no hashing was performed."""

    model_config = ConfigDict(frozen=True)

    status: Literal["invalid"] = "invalid"
    reason: str


class Failed(BaseModel):
    """A block digest did not match its stored checksum."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    reason: str
    offset: int
    size: int
    expected_checksum: str


VerificationOutcome = Annotated[
    Union[Ok, Invalid, Failed], Field(discriminator="status")
]


# === DIFF ===


class DiffSummary(BaseModel):
    """Byte-level overlap between an old and a new blockmap."""

    model_config = ConfigDict(frozen=True)

    total_bytes: int
    skipped_bytes: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ratio(self) -> float:
        """Fraction of new bytes already present in the old artifact.

        NaN when the new blockmap declares no bytes at all.
        """
        if self.total_bytes == 0:
            return math.nan
        return self.skipped_bytes / self.total_bytes

    def format(self) -> str:
        if self.total_bytes == 0:
            return "total = 0, skipped = 0, ratio = n/a (no data to compare)"
        return (
            f"total = {self.total_bytes}, skipped = {self.skipped_bytes}, "
            f"ratio = {self.ratio * 100:.2f}%"
        )
