# src/tetris_sim/game/core/storage.py
"""
Byte-keyed persistence.

The engine persists exactly one record: the high score as a 4-byte
little-endian unsigned integer. A missing key or a short record reads as 0.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Optional, Protocol, runtime_checkable

from tetris_sim.game.core.constants import HIGH_SCORE_RECORD_LEN

_U32 = 0xFFFFFFFF
_KEY_SAFE = re.compile(r"[^A-Za-z0-9_.-]")


class StorageError(OSError):
    pass


@runtime_checkable
class ByteStore(Protocol):
    def save(self, key: str, data: bytes) -> None:
        raise NotImplementedError

    def load(self, key: str) -> Optional[bytes]:
        raise NotImplementedError


class MemoryStore:
    def __init__(self, initial: Optional[Dict[str, bytes]] = None) -> None:
        self.records: Dict[str, bytes] = dict(initial or {})
        self.saves = 0

    def save(self, key: str, data: bytes) -> None:
        self.records[str(key)] = bytes(data)
        self.saves += 1

    def load(self, key: str) -> Optional[bytes]:
        return self.records.get(str(key))


class DirectoryStore:
    """One file per key under root (`<sanitized key>.bin`)."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        name = _KEY_SAFE.sub("_", str(key).strip())
        if not name:
            raise ValueError("storage key must be non-empty")
        return self.root / f"{name}.bin"

    def save(self, key: str, data: bytes) -> None:
        p = self.path_for(key)
        tmp = p.with_suffix(".bin.tmp")
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(bytes(data))
            tmp.replace(p)
        except OSError as e:
            raise StorageError(f"failed to save {key!r} to {p}: {e}") from e

    def load(self, key: str) -> Optional[bytes]:
        p = self.path_for(key)
        if not p.is_file():
            return None
        try:
            return p.read_bytes()
        except OSError as e:
            raise StorageError(f"failed to load {key!r} from {p}: {e}") from e


def pack_u32_le(value: int) -> bytes:
    return (int(value) & _U32).to_bytes(HIGH_SCORE_RECORD_LEN, "little", signed=False)


def unpack_u32_le(data: Optional[bytes]) -> int:
    """Decode a stored record; None or fewer than 4 bytes means "no record" (0)."""
    if data is None or len(data) < HIGH_SCORE_RECORD_LEN:
        return 0
    return int.from_bytes(bytes(data[:HIGH_SCORE_RECORD_LEN]), "little", signed=False)


__all__ = [
    "ByteStore",
    "DirectoryStore",
    "MemoryStore",
    "StorageError",
    "pack_u32_le",
    "unpack_u32_le",
]
