"""BLAKE2s-256 hashing, unkeyed, with a lazily compressed final block."""

from __future__ import annotations

import struct

BLOCK_BYTES = 64
OUT_BYTES = 32
DIGEST_LENGTH = 32

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_IV = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_SIGMA = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
    (11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4),
    (7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8),
    (9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13),
    (2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9),
    (12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11),
    (13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10),
    (6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5),
    (10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0),
)

_COLUMNS_AND_DIAGONALS = (
    (0, 4, 8, 12), (1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15),
    (0, 5, 10, 15), (1, 6, 11, 12), (2, 7, 8, 13), (3, 4, 9, 14),
)

# Parameter block: digest length 32, no key, fanout 1, depth 1, rest zero.
_PARAM_WORD0 = DIGEST_LENGTH | (0 << 8) | (1 << 16) | (1 << 24)


def _rotr32(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK32


class Blake2s:
    """Incremental BLAKE2s with a 32-byte digest."""

    digest_size = DIGEST_LENGTH
    block_size = BLOCK_BYTES

    def __init__(self, data: bytes = b"") -> None:
        self._h = list(_IV)
        self._h[0] ^= _PARAM_WORD0
        self._t = 0
        self._f0 = 0
        self._buf = bytearray(BLOCK_BYTES)
        self._buflen = 0
        if data:
            self.update(data)

    def copy(self) -> "Blake2s":
        """Return an independent copy of the running state."""
        clone = Blake2s.__new__(Blake2s)
        clone._h = list(self._h)
        clone._t = self._t
        clone._f0 = self._f0
        clone._buf = bytearray(self._buf)
        clone._buflen = self._buflen
        return clone

    def _compress(self, blocks, length: int) -> None:
        increment = min(length, BLOCK_BYTES)
        offset = 0
        h = self._h
        while True:
            m = struct.unpack_from("<16I", blocks, offset)
            self._t = (self._t + increment) & _MASK64
            v = h + [
                _IV[0], _IV[1], _IV[2], _IV[3],
                (self._t & _MASK32) ^ _IV[4],
                (self._t >> 32) ^ _IV[5],
                self._f0 ^ _IV[6],
                _IV[7],
            ]
            for sigma in _SIGMA:
                for i, (a, b, c, d) in enumerate(_COLUMNS_AND_DIAGONALS):
                    va, vb, vc, vd = v[a], v[b], v[c], v[d]
                    va = (va + vb + m[sigma[2 * i]]) & _MASK32
                    vd = _rotr32(vd ^ va, 16)
                    vc = (vc + vd) & _MASK32
                    vb = _rotr32(vb ^ vc, 12)
                    va = (va + vb + m[sigma[2 * i + 1]]) & _MASK32
                    vd = _rotr32(vd ^ va, 8)
                    vc = (vc + vd) & _MASK32
                    vb = _rotr32(vb ^ vc, 7)
                    v[a], v[b], v[c], v[d] = va, vb, vc, vd
            for i in range(8):
                h[i] ^= v[i] ^ v[i + 8]
            offset += increment
            length -= increment
            if length <= 0:
                break

    def update(self, data: bytes) -> None:
        """Absorb more bytes; the last block is held back until digest time."""
        view = memoryview(data).cast("B")
        fill = BLOCK_BYTES - self._buflen
        if len(view) > fill:
            if self._buflen:
                self._buf[self._buflen:] = view[:fill]
                self._compress(self._buf, BLOCK_BYTES)
                self._buflen = 0
                view = view[fill:]
            if len(view) > BLOCK_BYTES:
                stash = len(view) % BLOCK_BYTES or BLOCK_BYTES
                whole = len(view) - stash
                self._compress(view, whole)
                view = view[whole:]
        self._buf[self._buflen:self._buflen + len(view)] = view
        self._buflen += len(view)

    def digest(self) -> bytes:
        """Return the 32-byte digest without disturbing the running state."""
        final = self.copy()
        final._f0 = _MASK32
        final._buf[final._buflen:] = bytes(BLOCK_BYTES - final._buflen)
        final._compress(final._buf, final._buflen)
        return struct.pack("<8I", *final._h)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hex."""
        return self.digest().hex()


def blake2s256(data: bytes) -> bytes:
    """Return the BLAKE2s-256 digest of ``data``."""
    return Blake2s(data).digest()