"""Byte-array helpers shared by the one-way functions: folding, rotation, dumps."""

from __future__ import annotations

import math
from collections.abc import Iterable


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two non-negative integers.

    ``lcm(n, 0)`` is 0; ``lcm(0, 0)`` raises ZeroDivisionError.
    """
    if a < 0 or b < 0:
        raise ValueError("lcm is defined here for non-negative integers only")
    divisor = math.gcd(a, b)
    if divisor == 0:
        raise ZeroDivisionError("lcm(0, 0) is undefined")
    return a * b // divisor


def _output_length(data: bytes, bits: int) -> int:
    out_len = bits >> 3
    if out_len <= 0:
        raise ValueError(f"bits must be at least 8, got {bits}")
    if len(data) < out_len:
        raise ValueError(
            f"input of {len(data)} bytes is shorter than the {out_len}-byte output"
        )
    return out_len


def reduce_bit(data: bytes, bits: int) -> bytes:
    """Fold ``data`` down to ``bits // 8`` bytes by XOR-ing it in place."""
    out_len = _output_length(data, bits)
    output = bytearray(data[:out_len])
    for index, byte in enumerate(data[out_len:], start=out_len):
        output[index % out_len] ^= byte
    return bytes(output)


def reduce_bit_lcm(data: bytes, bits: int) -> bytes:
    """Fold ``data`` cyclically over the least common multiple of both lengths."""
    out_len = _output_length(data, bits)
    in_len = len(data)
    output = bytearray(data[:out_len])
    for index in range(out_len, lcm(in_len, out_len)):
        output[index % out_len] ^= data[index % in_len]
    return bytes(output)


def rrs(data: bytes, bits: int) -> bytes:
    """Rotate ``data``, read as one big-endian bit string, right by ``bits``."""
    if not data:
        raise ValueError("cannot rotate an empty byte string")
    if bits < 0:
        raise ValueError(f"bits must be non-negative, got {bits}")
    width = 8 * len(data)
    shift = bits % width
    if shift == 0:
        return bytes(data)
    value = int.from_bytes(data, "big")
    mask = (1 << width) - 1
    rotated = ((value >> shift) | (value << (width - shift))) & mask
    return rotated.to_bytes(len(data), "big")


def format_u8(label: str, data: bytes) -> str:
    """Render a byte array as a padded label followed by lower-case hex."""
    return f"{label:<18}\t{bytes(data).hex()}"


def format_u32(label: str, words: Iterable[int]) -> str:
    """Render 32-bit words as ``label:`` followed by 8-digit hex words."""
    return f"{label}: " + "".join(f"{word & 0xFFFFFFFF:08x} " for word in words)


def view_data_u8(label: str, data: bytes) -> None:
    """Print a byte array in the ``format_u8`` layout."""
    print(format_u8(label, data))


def view_data_u32(label: str, words: Iterable[int]) -> None:
    """Print 32-bit words in the ``format_u32`` layout."""
    print(format_u32(label, words))