"""Content hashing, compression and the object store."""

from __future__ import annotations

import hashlib
import zlib
from pathlib import Path

OBJECTS_DIR = Path(".ritz", "objects")


def compress(data: bytes) -> bytes:
    """Return ``data`` compressed with zlib."""
    return zlib.compress(data)


def decompress(data: bytes) -> bytes:
    """Return zlib-compressed ``data`` expanded; raises ``zlib.error`` on bad input."""
    return zlib.decompress(data)


def sha1_hex(data: bytes) -> str:
    """Return the lowercase hexadecimal SHA-1 digest of ``data``."""
    return hashlib.sha1(data).hexdigest()


def object_path(sha: str) -> Path:
    """Return where the object with hash ``sha`` is stored."""
    return OBJECTS_DIR / sha[:2] / sha[2:]


def write_object(path: str | Path, content: bytes) -> None:
    """Write ``content`` compressed to ``path``, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(compress(content))


def read_object(sha: str) -> bytes:
    """Return the decompressed content of the object with hash ``sha``."""
    return decompress(object_path(sha).read_bytes())