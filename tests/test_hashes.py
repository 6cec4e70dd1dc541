#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `btcmsg.hashes` module."

import pytest

from btcmsg.exceptions import BTCMsgValueError, UnsupportedLengthError
from btcmsg.hashes import (
    MAGIC_HEADER,
    hash160,
    hash256,
    magic_message,
    ripemd160,
    sha256,
)


def test_hash_functions() -> None:
    assert sha256(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )
    assert sha256(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )
    assert ripemd160(b"").hex() == "9c1185a5c5e9fc54612808977ee8f548b2258d31"
    assert ripemd160(b"abc").hex() == "8eb208f7e05d987a9b044a8e98c6b087f15a0bfc"
    assert hash160(b"").hex() == "b472a266d0bd89c13706a4132ccfb16f7c3b9fcb"
    assert hash256(b"").hex() == (
        "5df6e0e2761359d30a8275058e299fcc0381534545f55cf43e41983f5d4c9456"
    )

    # Octets: hex-strings are accepted too
    assert sha256("616263") == sha256(b"abc")
    assert hash160("") == hash160(b"")


def test_magic_message() -> None:
    assert MAGIC_HEADER == "Bitcoin Signed Message:\n"

    msg = "Hello, world"
    payload = b"\x18Bitcoin Signed Message:\n" + b"\x0cHello, world"
    assert magic_message(msg) == hash256(payload)
    assert magic_message(msg.encode()) == hash256(payload)
    assert magic_message(msg, MAGIC_HEADER) == hash256(payload)
    assert len(magic_message(msg)) == 32

    # empty message
    assert magic_message("") == hash256(b"\x18Bitcoin Signed Message:\n\x00")

    # custom header
    payload = b"\x06header" + b"\x0cHello, world"
    assert magic_message(msg, "header") == hash256(payload)

    # UTF-8 encoding
    payload = b"\x18Bitcoin Signed Message:\n" + b"\x03\xe2\x82\xac"
    assert magic_message("€") == hash256(payload)

    # blanks are significant
    assert magic_message(" " + msg) != magic_message(msg)
    assert magic_message(msg + "\n") != magic_message(msg)


def test_length_limits() -> None:
    msg = "a" * 252
    payload = b"\x18Bitcoin Signed Message:\n" + b"\xfc" + msg.encode()
    assert magic_message(msg) == hash256(payload)

    err_msg = "message too long: 253 bytes"
    with pytest.raises(UnsupportedLengthError, match=err_msg):
        magic_message(msg + "a")
    with pytest.raises(UnsupportedLengthError, match="message too long: "):
        magic_message(b"\x00" * 1000)
    # 84 characters, 252 bytes
    magic_message("€" * 84)
    with pytest.raises(UnsupportedLengthError, match="message too long: 255 bytes"):
        magic_message("€" * 85)

    magic_message(msg, "h" * 252)
    with pytest.raises(UnsupportedLengthError, match="header too long: 253 bytes"):
        magic_message(msg, "h" * 253)

    # header is checked first
    with pytest.raises(UnsupportedLengthError, match="header too long: "):
        magic_message(msg + "a", "h" * 253)

    assert issubclass(UnsupportedLengthError, BTCMsgValueError)
