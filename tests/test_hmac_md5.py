import hashlib

import pytest

from hellohash.hmac_md5 import hmac_md5

# HMAC-MD5 with an empty key over an empty message.
EMPTY_HMAC_MD5 = bytes.fromhex("74e6f7298a9c2d168935f58c001bad88")


def test_empty_input_matches_known_hmac():
    assert hmac_md5(b"") == hashlib.sha256(EMPTY_HMAC_MD5).digest()


@pytest.mark.parametrize("data", [b"", b"HelloWorld", b"0123456789", bytes(200)])
def test_output_is_32_bytes(data):
    assert len(hmac_md5(data)) == 32


def test_distinct_inputs_differ():
    inputs = [b"", b"a", b"HelloWorld", b"0123456789"]
    assert len({hmac_md5(data) for data in inputs}) == len(inputs)


def test_long_key_is_handled_and_differs_from_prefix():
    long_input = bytes(range(100))
    assert hmac_md5(long_input) != hmac_md5(long_input[:64])
    assert len(hmac_md5(long_input)) == 32


def test_accepts_bytearray():
    assert hmac_md5(bytearray(b"HelloWorld")) == hmac_md5(b"HelloWorld")