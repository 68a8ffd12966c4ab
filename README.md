# hellohash

Building blocks for a family of 32-byte one-way functions. The package also
has two small utilities: an ANSI escape interpreter and a getopt-style option
scanner.

## Installation

```
pip install hellohash
```

To run the test suite:

```
pip install "hellohash[test]"
pytest
```

## Modules

### `hellohash.common`: byte helpers

- `reduce_bit(data, bits)` XOR-folds `data` down to `bits // 8` bytes. It
  raises `ValueError` if `bits` is below 8 or if `data` is shorter than the
  output.
- `reduce_bit_lcm(data, bits)` folds cyclically over the least common multiple
  of the input and output lengths.
- `rrs(data, bits)` rotates `data`, read as one big-endian bit string, right by
  `bits`.
- `lcm(a, b)` returns the least common multiple of two non-negative integers.
- `format_u8(label, data)` and `format_u32(label, words)` render bytes and
  32-bit words as hex strings. `view_data_u8` and `view_data_u32` print the
  same strings.

### `hellohash.crc32`: CRC-32

- `Crc32` is an incremental CRC-32 (reflected, polynomial `0xEDB88320`) with
  `update(data)` and `digest()`. `digest()` returns four bytes, little-endian.
- `crc32_digest(data)` is the one-shot form.
- `hello_crc32(data)` is a 32-byte one-way function. It takes the SHA-256 of
  the input and replaces each 4-byte word with that word's CRC-32.

### `hellohash.blake2s`: BLAKE2s-256

- `Blake2s` is a pure-Python unkeyed BLAKE2s hasher with a 32-byte digest. It
  has `update`, `digest`, `hexdigest` and `copy`. `digest()` leaves the
  running state intact.
- `blake2s256(data)` is the one-shot function.

### `hellohash.block_ciphers`: cipher-based one-way functions

`aes128(data)`, `camellia128(data)` and `des(data)` each work the same way:

1. Take the SHA-256 of the input.
2. Derive a key from the MD5 of that digest. DES uses only the first 8 bytes
   and does not check parity.
3. Encrypt the 32-byte digest in ECB mode and return the 32 bytes of
   ciphertext.

### `hellohash.hmac_md5`

- `hmac_md5(data)` returns the SHA-256 of the HMAC-MD5 of `data`, with `data`
  used as its own key.

### `hellohash.ansi`: ANSI escape emulation

- `AnsiEmulator` tracks a console attribute word, built from the `ConsoleAttr`
  flags, through SGR (`ESC[...m`) sequences.
- `emulate(text)` splits text into `(run, attr)` pairs. A run of `None` marks
  an erase-to-end-of-line (`ESC[K`).
- Other methods:
  - `apply_sgr(params)` applies SGR parameters directly.
  - `set_attr(text)` interprets one escape body.
  - `effective_attr()` returns the attribute with colours swapped under
    negative video.
  - `reset()` returns to the plain attribute.

### `hellohash.getopt`: option scanning

- `GetOpt(argv, opterr=True)` provides `getopt(options)`,
  `getopt_long(options, long_options)` and
  `getopt_long_only(options, long_options)`.
- Each call returns the next option. It returns `None` when the options are
  done.
- The scanner exposes `optarg`, `optind`, `optopt`, `longindex`, `flags` and
  `errmsg`.
- Long options are described with `LongOption(name, has_arg, val, flag)` and
  `HasArg`.
- Non-options are permuted to the end of `argv` unless `POSIXLY_CORRECT` is
  set or the option string begins with `+`.
- `gcd(a, b)` and `permute_args(argv, nonopt_start, nonopt_end, opt_end)` are
  exposed as helpers.

## Example

```python
from hellohash.blake2s import blake2s256
from hellohash.block_ciphers import aes128
from hellohash.common import reduce_bit, rrs

digest = blake2s256(b"HelloWorld")
assert len(digest) == 32

folded = reduce_bit(digest, 64)   # 8 bytes
rotated = rrs(digest, 3)
cipher_hash = aes128(b"HelloWorld")
```

Every one-way function takes `bytes` and returns 32 `bytes`.

## What it does not do

- The package provides the individual one-way functions and byte helpers
  only. It does not chain them into a complete memory-hard proof-of-work hash.
- It has no command-line program.
- `AnsiEmulator` computes attributes and text runs but does not write to a
  console itself.