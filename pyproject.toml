[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hellohash"
version = "0.1.0"
description = "One-way hash building blocks (bit folding, CRC-32, BLAKE2s, block-cipher hashes, HMAC-MD5) with ANSI escape emulation and getopt parsing"
requires-python = ">=3.10"
keywords = ["hash", "one-way function", "crc32", "blake2s", "aes", "camellia", "des", "hmac", "ansi", "getopt"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "cryptography",
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hellohash"]

[tool.pytest.ini_options]
addopts = "-ra"
