#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `btcmsg.base58` module."

import pytest

from btcmsg.base58 import (
    _b58decode,
    _b58decode_to_int,
    _b58encode,
    _b58encode_from_int,
    b58decode,
    b58encode,
)
from btcmsg.exceptions import BTCMsgValueError


def test_empty() -> None:
    assert _b58encode(b"") == b""
    assert _b58decode(_b58encode(b"")) == b""

    assert b58decode(b58encode(b""), 0) == b""


def test_hello_world() -> None:
    assert _b58encode(b"hello world") == b"StV1DL6CwTryKyV"
    assert _b58decode(b"StV1DL6CwTryKyV") == b"hello world"

    assert b58decode(b58encode(b"hello world"), 11) == b"hello world"
    assert b58decode(b58encode(b"hello world").decode("ascii")) == b"hello world"


def test_leading_zeros() -> None:
    assert _b58encode(b"\x00\x00hello world") == b"11StV1DL6CwTryKyV"
    assert _b58decode(b"11StV1DL6CwTryKyV") == b"\x00\x00hello world"
    assert _b58encode(b"\x00") == b"1"
    assert _b58decode(b"111") == b"\x00\x00\x00"

    assert b58decode(b58encode(b"\x00\x00hello world"), 13) == b"\x00\x00hello world"


def test_address_payload() -> None:
    # version byte 0x00 and hash160 of the compressed generator point
    payload = "00 751e76e8199196d454941c45d1b3a323f1433bd6"
    address = b"1BgGZ9tcN4rm9KBzDn7KprQz87SZ26SAMH"
    assert b58encode(payload) == address
    assert b58encode(payload, 21) == address
    assert b58decode(address, 21) == bytes.fromhex(payload)

    # all-zero payload: one '1' per leading zero byte
    assert b58encode(b"\x00" * 21) == b"1111111111111111111114oLvT2"

    with pytest.raises(BTCMsgValueError, match="invalid size: "):
        b58encode(payload, 20)


def test_exceptions() -> None:

    encoded = b58encode(b"hello world")
    b58decode(encoded, 11)

    wrong_length = len(encoded) - 1
    with pytest.raises(BTCMsgValueError, match="invalid decoded size: "):
        b58decode(encoded, wrong_length)

    invalid_checksum = encoded[:-4] + b"1111"
    with pytest.raises(BTCMsgValueError, match="invalid checksum: "):
        b58decode(invalid_checksum, 4)

    err_msg = "'ascii' codec can't encode character "
    with pytest.raises(UnicodeEncodeError, match=err_msg):
        b58decode("hèllo world")

    with pytest.raises(BTCMsgValueError, match="invalid characters"):
        b58decode("0OIl")

    err_msg = "not enough bytes for checksum, invalid base58 decoded size: "
    with pytest.raises(BTCMsgValueError, match=err_msg):
        b58decode(_b58encode(b"123"))


def test_integers() -> None:
    digits = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
    for i in range(len(digits)):
        char = digits[i : i + 1]
        assert _b58decode_to_int(char) == i
        assert _b58encode_from_int(i) == char
    number = (
        "0111d38e5fc9071ffcd20b4a763cc9ae4f252bb4e4"
        "8fd66a835e252ada93ff480d6dd43dc62a641155a5"
    )
    n = int(number, 16)
    assert _b58decode_to_int(digits) == n
    assert _b58encode_from_int(n) == digits[1:]
