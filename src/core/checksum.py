# src/core/checksum.py — v1
"""Block digest: un-keyed BLAKE2b with an 18-byte output, base64-encoded.

This is the checksum format stored in blockmap files.
"""

from __future__ import annotations

import base64
import hashlib

DIGEST_SIZE = 18


def checksum(data: bytes, offset: int, length: int) -> str:
    """Digest data[offset:offset + length] and return it base64-encoded.

    A fresh hash object is used per call, so the result depends only on
    the bytes in range.
    """
    if offset < 0 or length < 0:
        raise ValueError(f"Invalid block range: offset={offset}, length={length}")
    h = hashlib.blake2b(digest_size=DIGEST_SIZE)
    h.update(memoryview(data)[offset : offset + length])
    return base64.b64encode(h.digest()).decode("ascii")
