#!/usr/bin/env python3

# Copyright (C) The btcmsg developers
#
# This file is part of btcmsg. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of btcmsg including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Base58Check encoding and decoding.

Base58 writes a big-endian integer with the digits
123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz,
i.e. the alphanumeric characters without 0, O, I, and l.
Leading zero bytes would be lost in the integer conversion:
each of them is written as a leading '1' instead.

Base58Check appends the first four bytes of hash256(payload)
to the payload before encoding, and verifies them when decoding.
"""

from __future__ import annotations

from btcmsg.alias import Octets, String
from btcmsg.exceptions import BTCMsgValueError
from btcmsg.hashes import hash256
from btcmsg.utils import bytes_from_octets

_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE = len(_ALPHABET)
_ZERO = _ALPHABET[:1]
_CHECKSUM_SIZE = 4


def _b58encode_from_int(i: int) -> bytes:
    digits = bytearray()
    while True:
        i, idx = divmod(i, _BASE)
        digits.append(_ALPHABET[idx])
        if i == 0:
            return bytes(reversed(digits))


def _b58encode(v: bytes) -> bytes:
    stripped = v.lstrip(b"\x00")
    prefix = _ZERO * (len(v) - len(stripped))
    if not stripped:
        return prefix
    return prefix + _b58encode_from_int(int.from_bytes(stripped, "big"))


def b58encode(v: Octets, in_size: int | None = None) -> bytes:
    "Return the Base58Check encoding of the payload."

    payload = bytes_from_octets(v, in_size)
    return _b58encode(payload + hash256(payload)[:_CHECKSUM_SIZE])


def _b58decode_to_int(v: bytes) -> int:
    i = 0
    for char in v:
        i = i * _BASE + _ALPHABET.index(char)
    return i


def _b58decode(v: bytes) -> bytes:

    invalid = set(v).difference(_ALPHABET)
    if invalid:
        err_msg = "Base58 string contains invalid characters: "
        err_msg += repr(bytes(sorted(invalid)))
        raise BTCMsgValueError(err_msg)

    stripped = v.lstrip(_ZERO)
    prefix = b"\x00" * (len(v) - len(stripped))
    if not stripped:
        return prefix
    i = _b58decode_to_int(stripped)
    return prefix + i.to_bytes((i.bit_length() + 7) // 8, "big")


def b58decode(v: String, out_size: int | None = None) -> bytes:
    """Return the payload of a Base58Check encoded string.

    Blanks are not stripped: they are invalid characters.
    If out_size is given, the payload must have that size.
    """

    if isinstance(v, str):
        v = v.encode("ascii")

    decoded = _b58decode(v)
    if len(decoded) < _CHECKSUM_SIZE:
        err_msg = "not enough bytes for checksum, "
        err_msg += f"invalid base58 decoded size: {len(decoded)}"
        raise BTCMsgValueError(err_msg)

    payload, checksum = decoded[:-_CHECKSUM_SIZE], decoded[-_CHECKSUM_SIZE:]
    expected = hash256(payload)[:_CHECKSUM_SIZE]
    if checksum != expected:
        err_msg = f"invalid checksum: 0x{checksum.hex()} instead of 0x{expected.hex()}"
        raise BTCMsgValueError(err_msg)

    if out_size is not None and len(payload) != out_size:
        err_msg = "valid checksum, invalid decoded size: "
        err_msg += f"{len(payload)} bytes instead of {out_size}"
        raise BTCMsgValueError(err_msg)
    return payload
