"""CRC-32 (reflected, polynomial 0xEDB88320) and the word-wise CRC one-way function."""

from __future__ import annotations

import hashlib

_POLY = 0xEDB88320
_ALL_ONES = 0xFFFFFFFF


def _build_table() -> tuple[int, ...]:
    table = []
    for index in range(256):
        entry = index
        for _ in range(8):
            entry = (entry >> 1) ^ _POLY if entry & 1 else entry >> 1
        table.append(entry)
    return tuple(table)


_TABLE = _build_table()


class Crc32:
    """Incremental CRC-32 whose digest is the inverted value, little-endian."""

    def __init__(self, data: bytes = b"") -> None:
        self._value = _ALL_ONES
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the running checksum."""
        value = self._value
        for byte in memoryview(data).cast("B"):
            value = (value >> 8) ^ _TABLE[(value ^ byte) & 0xFF]
        self._value = value

    def digest(self) -> bytes:
        """Return the four checksum bytes, least significant first."""
        return ((~self._value) & _ALL_ONES).to_bytes(4, "little")


def crc32_digest(data: bytes) -> bytes:
    """Return the little-endian CRC-32 of ``data``."""
    return Crc32(data).digest()


def hello_crc32(data: bytes) -> bytes:
    """Hash ``data`` with SHA-256, then replace each 4-byte word by its CRC-32."""
    digest = hashlib.sha256(data).digest()
    return b"".join(crc32_digest(digest[i : i + 4]) for i in range(0, len(digest), 4))