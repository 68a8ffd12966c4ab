"""One-way hash building blocks, ANSI escape emulation and getopt-style option scanning."""

__version__ = "0.1.0"

__all__ = ["ansi", "blake2s", "block_ciphers", "common", "crc32", "getopt", "hmac_md5"]