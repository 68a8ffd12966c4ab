"""One-way functions built from a block cipher keyed by the input's own digest.

Each function hashes the input with SHA-256 and derives a key from the MD5 of
that digest. It then encrypts the 32-byte SHA-256 digest block by block in ECB
mode, and the 32 bytes of ciphertext are the result.
"""

from __future__ import annotations

import hashlib

from Crypto.Cipher import AES, DES
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

OUTPUT_LEN = 32


def _digest_and_key(data: bytes) -> tuple[bytes, bytes]:
    digest = hashlib.sha256(data).digest()
    key = hashlib.md5(digest, usedforsecurity=False).digest()
    return digest, key


def aes128(data: bytes) -> bytes:
    """Encrypt SHA-256(data) with AES-128 keyed by MD5(SHA-256(data))."""
    digest, key = _digest_and_key(data)
    return AES.new(key, AES.MODE_ECB).encrypt(digest)[:OUTPUT_LEN]


def camellia128(data: bytes) -> bytes:
    """Encrypt SHA-256(data) with Camellia-128 keyed by MD5(SHA-256(data))."""
    digest, key = _digest_and_key(data)
    encryptor = Cipher(algorithms.Camellia(key), modes.ECB()).encryptor()
    return (encryptor.update(digest) + encryptor.finalize())[:OUTPUT_LEN]


def des(data: bytes) -> bytes:
    """Encrypt SHA-256(data) with DES keyed by the first 8 bytes of MD5(SHA-256(data)).

    Parity bits of the key are not checked.
    """
    digest, key = _digest_and_key(data)
    return DES.new(key[:8], DES.MODE_ECB).encrypt(digest)[:OUTPUT_LEN]